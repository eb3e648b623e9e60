# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, MoviesBase, table_args


class Movie(IntegerIDMixin, CreatedAtMixin, MoviesBase):
    __tablename__ = "movies"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, default=None)
    genre: Mapped[str | None] = mapped_column(String(100), default=None)
    language: Mapped[str | None] = mapped_column(String(50), default=None)
    release_date: Mapped[date | None] = mapped_column(Date, default=None)
    # Audience certificate such as "PG-13"; user scores live in movie_reviews.
    rating: Mapped[str | None] = mapped_column(String(10), default=None)

    # Relationships
    showtimes: Mapped[list[Showtime]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="movie",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args()
