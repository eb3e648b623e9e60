# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import (
    CreatedAtMixin,
    IntegerIDMixin,
    RentalsBase,
    rating_check,
    table_args,
)

MIN_RATING = 1
MAX_RATING = 5

SUB_RATINGS = (
    "cleanliness_rating",
    "communication_rating",
    "checkin_rating",
    "accuracy_rating",
    "location_rating",
    "value_rating",
)


class PropertyReview(IntegerIDMixin, CreatedAtMixin, RentalsBase):
    """A guest's review of a stay; one per booking."""

    __tablename__ = "property_reviews"

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
    )
    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    booking_id: Mapped[int] = mapped_column(
        ForeignKey("bookings.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    overall_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    cleanliness_rating: Mapped[int | None] = mapped_column(Integer, default=None)
    communication_rating: Mapped[int | None] = mapped_column(Integer, default=None)
    checkin_rating: Mapped[int | None] = mapped_column(Integer, default=None)
    accuracy_rating: Mapped[int | None] = mapped_column(Integer, default=None)
    location_rating: Mapped[int | None] = mapped_column(Integer, default=None)
    value_rating: Mapped[int | None] = mapped_column(Integer, default=None)
    comment: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships
    guest: Mapped[User] = relationship()  # type: ignore[name-defined]  # noqa: F821
    booking: Mapped[Booking] = relationship()  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = table_args(
        *(
            CheckConstraint(
                rating_check(column, MIN_RATING, MAX_RATING),
                name=column.removesuffix("_rating") + "_range",
            )
            for column in ("overall_rating", *SUB_RATINGS)
        ),
        Index("idx_reviews_property_id", "property_id"),
    )


class HostReview(IntegerIDMixin, CreatedAtMixin, RentalsBase):
    """A host's review of a guest; one per (booking, host)."""

    __tablename__ = "host_reviews"

    host_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    booking_id: Mapped[int] = mapped_column(
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, default=None)

    __table_args__ = table_args(
        UniqueConstraint("booking_id", "host_id"),
        CheckConstraint(
            rating_check("rating", MIN_RATING, MAX_RATING), name="rating_range"
        ),
    )
