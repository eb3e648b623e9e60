# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import (
    IntegerIDMixin,
    MoviesBase,
    TimestampMixin,
    rating_check,
    table_args,
)

MIN_RATING = 1
MAX_RATING = 10


class MovieReview(IntegerIDMixin, TimestampMixin, MoviesBase):
    __tablename__ = "movie_reviews"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    movie_id: Mapped[int] = mapped_column(
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships
    user: Mapped[User] = relationship()  # type: ignore[name-defined]  # noqa: F821
    movie: Mapped[Movie] = relationship()  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = table_args(
        UniqueConstraint("user_id", "movie_id"),
        CheckConstraint(
            rating_check("rating", MIN_RATING, MAX_RATING), name="rating_range"
        ),
        Index("idx_movie_reviews_movie_id", "movie_id"),
    )


class TheatreReview(IntegerIDMixin, TimestampMixin, MoviesBase):
    __tablename__ = "theatre_reviews"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    theatre_id: Mapped[int] = mapped_column(
        ForeignKey("theatres.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships
    user: Mapped[User] = relationship()  # type: ignore[name-defined]  # noqa: F821
    theatre: Mapped[Theatre] = relationship()  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = table_args(
        UniqueConstraint("user_id", "theatre_id"),
        CheckConstraint(
            rating_check("rating", MIN_RATING, MAX_RATING), name="rating_range"
        ),
        Index("idx_theatre_reviews_theatre_id", "theatre_id"),
    )
