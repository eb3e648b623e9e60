# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

import enum
from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import (
    IntegerIDMixin,
    MoviesBase,
    TimestampMixin,
    one_of,
    table_args,
)


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Booking(IntegerIDMixin, TimestampMixin, MoviesBase):
    __tablename__ = "bookings"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    showtime_id: Mapped[int] = mapped_column(
        ForeignKey("showtimes.id", ondelete="CASCADE"),
        nullable=False,
    )
    seats_booked: Mapped[int] = mapped_column(Integer, nullable=False)
    total_amount: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), default=None
    )
    booking_status: Mapped[str] = mapped_column(
        String(20),
        default=BookingStatus.PENDING.value,
        server_default=BookingStatus.PENDING.value,
    )
    payment_status: Mapped[str] = mapped_column(
        String(20),
        default=PaymentStatus.PENDING.value,
        server_default=PaymentStatus.PENDING.value,
    )
    booking_reference: Mapped[str | None] = mapped_column(
        String(50), unique=True, default=None
    )

    # Relationships
    user: Mapped[User] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="bookings",
    )
    showtime: Mapped[Showtime] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="bookings",
    )

    __table_args__ = table_args(
        CheckConstraint(
            f"booking_status IN ({one_of(BookingStatus)})",
            name="booking_status",
        ),
        CheckConstraint(
            f"payment_status IN ({one_of(PaymentStatus)})",
            name="payment_status",
        ),
        Index("idx_bookings_user_id", "user_id"),
        Index("idx_bookings_showtime_id", "showtime_id"),
        Index("idx_bookings_status", "booking_status"),
    )
