# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from appschemas.models import movies, qna, rentals
from appschemas.models.base import (
    CreatedAtMixin,
    IntegerIDMixin,
    MoviesBase,
    QnaBase,
    RentalsBase,
    TimestampMixin,
)

# Each schema lives in its own database; they share table names such as "users".
SCHEMAS = {
    "qna": QnaBase.metadata,
    "movies": MoviesBase.metadata,
    "rentals": RentalsBase.metadata,
}

__all__ = [
    "SCHEMAS",
    "CreatedAtMixin",
    "IntegerIDMixin",
    "MoviesBase",
    "QnaBase",
    "RentalsBase",
    "TimestampMixin",
    "movies",
    "qna",
    "rentals",
]
