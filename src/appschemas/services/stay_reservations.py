# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Rental bookings that never double-book a listing.

``book`` locks the property row before looking for overlapping stays, so two
requests for the same listing cannot both pass the availability check.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.config import get_settings
from appschemas.errors import CapacityError, NotFoundError, UnavailableError
from appschemas.models.rentals import Booking, StayPaymentStatus, StayStatus
from appschemas.repositories.rentals import PropertyRepository, StayBookingRepository
from appschemas.schemas.rentals import StayRequest
from appschemas.services.booking_states import STAY_BOOKINGS
from appschemas.services.references import new_booking_reference

logger = logging.getLogger(__name__)


class StayReservationService:
    def __init__(
        self, session: AsyncSession, *, reference_prefix: str | None = None
    ) -> None:
        self.session = session
        self.properties = PropertyRepository(session)
        self.bookings = StayBookingRepository(session)
        self._reference_prefix = (
            reference_prefix or get_settings().booking_reference_prefix
        )

    async def book(self, request: StayRequest) -> Booking:
        listing = await self.properties.get_for_update(request.property_id)
        if listing is None:
            raise NotFoundError("Property", request.property_id)
        if not listing.is_active:
            raise UnavailableError(f"property {listing.id} is not accepting bookings")
        if listing.max_guests is not None and request.guests > listing.max_guests:
            raise CapacityError(
                f"property {listing.id} allows at most {listing.max_guests} guest(s)"
            )

        clashes = await self.bookings.list_overlapping(
            listing.id, request.check_in_date, request.check_out_date
        )
        if clashes:
            logger.warning(
                "Rejected stay %s..%s on property %d: overlaps booking(s) %s",
                request.check_in_date,
                request.check_out_date,
                listing.id,
                [b.id for b in clashes],
            )
            raise UnavailableError(
                f"property {listing.id} is already booked for those dates"
            )

        nights = request.nights
        cleaning_fee = listing.cleaning_fee or Decimal("0")
        booking = Booking(
            property_id=listing.id,
            guest_id=request.guest_id,
            check_in_date=request.check_in_date,
            check_out_date=request.check_out_date,
            guests=request.guests,
            nights=nights,
            price_per_night=listing.price_per_night,
            cleaning_fee=cleaning_fee,
            total_amount=listing.price_per_night * nights + cleaning_fee,
            booking_reference=new_booking_reference(self._reference_prefix),
            special_requests=request.special_requests,
        )
        await self.bookings.create(booking)
        logger.info(
            "Booked property %d for %d night(s) (booking %s)",
            listing.id,
            nights,
            booking.booking_reference,
        )
        return booking

    async def _lock_booking(self, booking_id: int) -> Booking:
        booking = await self.bookings.get_for_update(booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)
        return booking

    async def _move(self, booking_id: int, target: StayStatus) -> Booking:
        booking = await self._lock_booking(booking_id)
        STAY_BOOKINGS.check_booking(
            booking.booking_status, booking.payment_status, target.value
        )
        booking.booking_status = target.value
        await self.bookings.flush()
        logger.info("Stay %d -> %s", booking.id, target.value)
        return booking

    async def record_payment(
        self, booking_id: int, status: StayPaymentStatus
    ) -> Booking:
        booking = await self._lock_booking(booking_id)
        STAY_BOOKINGS.check_payment(
            booking.booking_status, booking.payment_status, status.value
        )
        booking.payment_status = status.value
        await self.bookings.flush()
        logger.info("Stay %d payment -> %s", booking.id, status.value)
        return booking

    async def confirm(self, booking_id: int) -> Booking:
        return await self._move(booking_id, StayStatus.CONFIRMED)

    async def complete(self, booking_id: int) -> Booking:
        return await self._move(booking_id, StayStatus.COMPLETED)

    async def cancel(self, booking_id: int) -> Booking:
        """Cancel a stay; its dates become bookable again."""
        return await self._move(booking_id, StayStatus.CANCELLED)
