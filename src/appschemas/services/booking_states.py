# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Booking/payment state machines for the movie and rental schemas.

The database accepts any (booking_status, payment_status) pair; these
tables decide which moves are legal.

Movies::

    booking  pending -> confirmed | cancelled,  confirmed -> cancelled
    payment  pending -> completed | failed,     failed -> pending
             (only while the booking is pending)
    confirmed requires payment completed

Rentals::

    booking  pending -> confirmed | cancelled,  confirmed -> cancelled | completed
    payment  pending -> paid       (booking pending or confirmed)
             paid -> refunded      (booking cancelled)
    confirmed and completed require payment paid
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from appschemas.errors import InvalidTransitionError
from appschemas.models.movies import BookingStatus, PaymentStatus
from appschemas.models.rentals import StayPaymentStatus, StayStatus


def _values(*members: object) -> frozenset[str]:
    return frozenset(str(getattr(m, "value", m)) for m in members)


@dataclass(frozen=True)
class BookingStateMachine:
    name: str
    booking_transitions: Mapping[str, frozenset[str]]
    payment_transitions: Mapping[str, frozenset[str]]
    # target booking status -> payment statuses it may be entered with
    booking_guards: Mapping[str, frozenset[str]] = field(default_factory=dict)
    # target payment status -> booking statuses during which it may be entered
    payment_guards: Mapping[str, frozenset[str]] = field(default_factory=dict)

    def can_move_booking(self, booking: str, payment: str, target: str) -> bool:
        if target not in self.booking_transitions.get(booking, frozenset()):
            return False
        allowed = self.booking_guards.get(target)
        return allowed is None or payment in allowed

    def can_move_payment(self, booking: str, payment: str, target: str) -> bool:
        if target not in self.payment_transitions.get(payment, frozenset()):
            return False
        allowed = self.payment_guards.get(target)
        return allowed is None or booking in allowed

    def check_booking(self, booking: str, payment: str, target: str) -> None:
        if not self.can_move_booking(booking, payment, target):
            raise InvalidTransitionError(
                f"{self.name} booking cannot move from {booking!r} to {target!r}"
                f" while payment is {payment!r}"
            )

    def check_payment(self, booking: str, payment: str, target: str) -> None:
        if not self.can_move_payment(booking, payment, target):
            raise InvalidTransitionError(
                f"{self.name} payment cannot move from {payment!r} to {target!r}"
                f" while booking is {booking!r}"
            )


MOVIE_BOOKINGS = BookingStateMachine(
    name="movie",
    booking_transitions={
        BookingStatus.PENDING.value: _values(
            BookingStatus.CONFIRMED, BookingStatus.CANCELLED
        ),
        BookingStatus.CONFIRMED.value: _values(BookingStatus.CANCELLED),
    },
    payment_transitions={
        PaymentStatus.PENDING.value: _values(
            PaymentStatus.COMPLETED, PaymentStatus.FAILED
        ),
        PaymentStatus.FAILED.value: _values(PaymentStatus.PENDING),
    },
    booking_guards={
        BookingStatus.CONFIRMED.value: _values(PaymentStatus.COMPLETED),
    },
    payment_guards={
        PaymentStatus.COMPLETED.value: _values(BookingStatus.PENDING),
        PaymentStatus.FAILED.value: _values(BookingStatus.PENDING),
        PaymentStatus.PENDING.value: _values(BookingStatus.PENDING),
    },
)

STAY_BOOKINGS = BookingStateMachine(
    name="stay",
    booking_transitions={
        StayStatus.PENDING.value: _values(StayStatus.CONFIRMED, StayStatus.CANCELLED),
        StayStatus.CONFIRMED.value: _values(
            StayStatus.CANCELLED, StayStatus.COMPLETED
        ),
    },
    payment_transitions={
        StayPaymentStatus.PENDING.value: _values(StayPaymentStatus.PAID),
        StayPaymentStatus.PAID.value: _values(StayPaymentStatus.REFUNDED),
    },
    booking_guards={
        StayStatus.CONFIRMED.value: _values(StayPaymentStatus.PAID),
        StayStatus.COMPLETED.value: _values(StayPaymentStatus.PAID),
    },
    payment_guards={
        StayPaymentStatus.PAID.value: _values(
            StayStatus.PENDING, StayStatus.CONFIRMED
        ),
        StayPaymentStatus.REFUNDED.value: _values(StayStatus.CANCELLED),
    },
)
