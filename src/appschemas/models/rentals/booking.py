# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

import enum
from datetime import date
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Date,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import (
    IntegerIDMixin,
    RentalsBase,
    TimestampMixin,
    one_of,
    table_args,
)


class StayStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class StayPaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


# Statuses that hold the property's calendar.
BLOCKING_STATUSES = (StayStatus.PENDING.value, StayStatus.CONFIRMED.value)


class Booking(IntegerIDMixin, TimestampMixin, RentalsBase):
    """A stay over ``[check_in_date, check_out_date)``.

    Non-overlap between stays of the same property is enforced by
    :class:`~appschemas.services.stay_reservations.StayReservationService`.
    """

    __tablename__ = "bookings"

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
    )
    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    check_in_date: Mapped[date] = mapped_column(Date, nullable=False)
    check_out_date: Mapped[date] = mapped_column(Date, nullable=False)
    guests: Mapped[int] = mapped_column(Integer, nullable=False)
    nights: Mapped[int] = mapped_column(Integer, nullable=False)
    # Prices are snapshotted from the listing at booking time.
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    cleaning_fee: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), default=Decimal("0"), server_default="0"
    )
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    booking_status: Mapped[str] = mapped_column(
        String(20),
        default=StayStatus.PENDING.value,
        server_default=StayStatus.PENDING.value,
    )
    payment_status: Mapped[str] = mapped_column(
        String(20),
        default=StayPaymentStatus.PENDING.value,
        server_default=StayPaymentStatus.PENDING.value,
    )
    booking_reference: Mapped[str | None] = mapped_column(
        String(50), unique=True, default=None
    )
    special_requests: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships
    property: Mapped[Property] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="bookings",
    )
    guest: Mapped[User] = relationship()  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = table_args(
        CheckConstraint("check_out_date > check_in_date", name="stay_dates"),
        CheckConstraint("guests > 0", name="guests_positive"),
        CheckConstraint(
            f"booking_status IN ({one_of(StayStatus)})",
            name="booking_status",
        ),
        CheckConstraint(
            f"payment_status IN ({one_of(StayPaymentStatus)})",
            name="payment_status",
        ),
        Index("idx_bookings_property_id", "property_id"),
        Index("idx_bookings_guest_id", "guest_id"),
        Index("idx_bookings_dates", "check_in_date", "check_out_date"),
        Index("idx_bookings_status", "booking_status"),
    )
