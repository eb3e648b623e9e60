# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.errors import NotFoundError, RuleViolationError
from appschemas.models.rentals import (
    Booking,
    HostReview,
    Property,
    PropertyReview,
    StayStatus,
)
from appschemas.repositories.base import BaseRepository
from appschemas.schemas.rentals import HostReviewCreate, PropertyReviewCreate


async def _completed_booking(session: AsyncSession, booking_id: int) -> Booking:
    booking = await session.get(Booking, booking_id)
    if booking is None:
        raise NotFoundError("Booking", booking_id)
    if booking.booking_status != StayStatus.COMPLETED.value:
        raise RuleViolationError(
            f"booking {booking_id} is {booking.booking_status}; only completed"
            " stays can be reviewed"
        )
    return booking


class PropertyReviewRepository(BaseRepository[PropertyReview]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PropertyReview)

    async def add(self, body: PropertyReviewCreate) -> PropertyReview:
        """Record a guest's review of a completed stay (one per booking)."""
        booking = await _completed_booking(self.session, body.booking_id)
        if booking.guest_id != body.guest_id:
            raise RuleViolationError("only the booking's guest can review the stay")
        review = PropertyReview(
            property_id=booking.property_id,
            **body.model_dump(exclude_none=True),
        )
        return await self.create(review)

    async def list_by_property(self, property_id: int) -> list[PropertyReview]:
        result = await self.session.execute(
            select(PropertyReview)
            .where(PropertyReview.property_id == property_id)
            .order_by(PropertyReview.created_at.desc(), PropertyReview.id.desc())
        )
        return list(result.scalars().all())


class HostReviewRepository(BaseRepository[HostReview]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HostReview)

    async def add(self, body: HostReviewCreate) -> HostReview:
        """Record a host's review of the guest of a completed stay."""
        booking = await _completed_booking(self.session, body.booking_id)
        host_id = await self.session.scalar(
            select(Property.host_id).where(Property.id == booking.property_id)
        )
        if host_id != body.host_id:
            raise RuleViolationError("only the listing's host can review the guest")
        review = HostReview(
            host_id=body.host_id,
            guest_id=booking.guest_id,
            booking_id=booking.id,
            rating=body.rating,
            comment=body.comment,
        )
        return await self.create(review)

    async def list_for_guest(self, guest_id: int) -> list[HostReview]:
        result = await self.session.execute(
            select(HostReview)
            .where(HostReview.guest_id == guest_id)
            .order_by(HostReview.created_at.desc(), HostReview.id.desc())
        )
        return list(result.scalars().all())
