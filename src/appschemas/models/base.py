# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, MetaData, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Every constraint gets a deterministic name; the error layer keys on them.
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class QnaBase(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class MoviesBase(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class RentalsBase(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class IntegerIDMixin:
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)


class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )


class TimestampMixin(CreatedAtMixin):
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )


def table_args(*items: Any) -> tuple[Any, ...]:
    """Build ``__table_args__`` for a table with a never-reused surrogate key.

    SQLite recycles the highest rowid after a delete unless the table is
    declared AUTOINCREMENT; other backends use sequences or identity columns
    that never go backwards.
    """
    return (*items, {"sqlite_autoincrement": True})


def rating_check(column: str, low: int, high: int) -> str:
    """SQL text bounding a nullable integer rating column to ``[low, high]``."""
    return f"{column} >= {low} AND {column} <= {high}"


def one_of(values: type[Any]) -> str:
    """SQL ``IN`` list for the members of a string enum."""
    return ", ".join(f"'{member.value}'" for member in values)
