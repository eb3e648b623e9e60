# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Ticket reservations that keep ``showtimes.available_seats`` consistent.

Every seat-count change happens under a row lock on the showtime
(``SELECT ... FOR UPDATE``), taken before the matching booking row is read
or written, so concurrent reservations for the same screening serialize on
that lock. Run each call inside the caller's transaction and commit after.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.config import get_settings
from appschemas.errors import CapacityError, NotFoundError
from appschemas.models.movies import Booking, BookingStatus, PaymentStatus, Showtime
from appschemas.repositories.movies import BookingRepository, ShowtimeRepository
from appschemas.schemas.movies import SeatRequest
from appschemas.services.booking_states import MOVIE_BOOKINGS
from appschemas.services.references import new_booking_reference

logger = logging.getLogger(__name__)


class SeatReservationService:
    def __init__(
        self, session: AsyncSession, *, reference_prefix: str | None = None
    ) -> None:
        self.session = session
        self.showtimes = ShowtimeRepository(session)
        self.bookings = BookingRepository(session)
        self._reference_prefix = (
            reference_prefix or get_settings().booking_reference_prefix
        )

    async def _lock_showtime(self, showtime_id: int) -> Showtime:
        showtime = await self.showtimes.get_for_update(showtime_id)
        if showtime is None:
            raise NotFoundError("Showtime", showtime_id)
        return showtime

    async def _lock_booking(self, booking_id: int) -> tuple[Booking, Showtime]:
        booking = await self.bookings.get_by_id(booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)
        # Showtime first, then the booking: the same order reserve() uses.
        showtime = await self._lock_showtime(booking.showtime_id)
        locked = await self.bookings.get_for_update(booking_id)
        if locked is None:
            raise NotFoundError("Booking", booking_id)
        return locked, showtime

    async def reserve(self, request: SeatRequest) -> Booking:
        """Hold seats on a showtime and create a pending booking for them."""
        showtime = await self._lock_showtime(request.showtime_id)
        available = showtime.available_seats or 0
        if request.seats > available:
            logger.warning(
                "Rejected %d seat(s) on showtime %d: %d left",
                request.seats,
                showtime.id,
                available,
            )
            raise CapacityError(
                f"only {available} seat(s) left for showtime {showtime.id}"
            )

        showtime.available_seats = available - request.seats
        total = (
            showtime.ticket_price * request.seats
            if showtime.ticket_price is not None
            else None
        )
        booking = Booking(
            user_id=request.user_id,
            showtime_id=showtime.id,
            seats_booked=request.seats,
            total_amount=total,
            booking_reference=new_booking_reference(self._reference_prefix),
        )
        await self.bookings.create(booking)
        logger.info(
            "Reserved %d seat(s) on showtime %d (booking %s)",
            request.seats,
            showtime.id,
            booking.booking_reference,
        )
        return booking

    async def record_payment(self, booking_id: int, status: PaymentStatus) -> Booking:
        booking, _ = await self._lock_booking(booking_id)
        MOVIE_BOOKINGS.check_payment(
            booking.booking_status, booking.payment_status, status.value
        )
        booking.payment_status = status.value
        await self.bookings.flush()
        logger.info("Booking %d payment -> %s", booking.id, status.value)
        return booking

    async def confirm(self, booking_id: int) -> Booking:
        booking, _ = await self._lock_booking(booking_id)
        MOVIE_BOOKINGS.check_booking(
            booking.booking_status,
            booking.payment_status,
            BookingStatus.CONFIRMED.value,
        )
        booking.booking_status = BookingStatus.CONFIRMED.value
        await self.bookings.flush()
        logger.info("Booking %d confirmed", booking.id)
        return booking

    async def cancel(self, booking_id: int) -> Booking:
        """Cancel a booking and give its seats back to the showtime."""
        booking, showtime = await self._lock_booking(booking_id)
        MOVIE_BOOKINGS.check_booking(
            booking.booking_status,
            booking.payment_status,
            BookingStatus.CANCELLED.value,
        )
        booking.booking_status = BookingStatus.CANCELLED.value
        showtime.available_seats = (showtime.available_seats or 0) + booking.seats_booked
        await self.bookings.flush()
        logger.info(
            "Cancelled booking %d, released %d seat(s) on showtime %d",
            booking.id,
            booking.seats_booked,
            showtime.id,
        )
        return booking
