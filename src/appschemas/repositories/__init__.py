# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from appschemas.repositories.base import BaseRepository
from appschemas.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
]
