# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from appschemas.models.rentals import BLOCKING_STATUSES, Booking, Property
from appschemas.repositories.base import BaseRepository
from appschemas.repositories.rentals.property_repository import overlaps


class StayBookingRepository(BaseRepository[Booking]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Booking)

    async def history_for_guest(
        self, guest_id: int, *, limit: int = 50, offset: int = 0
    ) -> list[Booking]:
        """A guest's stays, newest first, with listing, city and host loaded."""
        result = await self.session.execute(
            select(Booking)
            .where(Booking.guest_id == guest_id)
            .options(
                selectinload(Booking.property).selectinload(Property.city),
                selectinload(Booking.property).selectinload(Property.host),
            )
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def list_overlapping(
        self,
        property_id: int,
        check_in: date,
        check_out: date,
        *,
        exclude_id: int | None = None,
    ) -> list[Booking]:
        """Pending or confirmed stays of a listing that intersect the range."""
        stmt = select(Booking).where(
            Booking.property_id == property_id,
            Booking.booking_status.in_(BLOCKING_STATUSES),
            overlaps(check_in, check_out),
        )
        if exclude_id is not None:
            stmt = stmt.where(Booking.id != exclude_id)
        result = await self.session.execute(stmt.order_by(Booking.check_in_date))
        return list(result.scalars().all())

    async def get_by_reference(self, reference: str) -> Booking | None:
        result = await self.session.execute(
            select(Booking).where(Booking.booking_reference == reference)
        )
        return result.scalar_one_or_none()

    async def get_for_update(self, booking_id: int) -> Booking | None:
        result = await self.session.execute(
            select(Booking)
            .where(Booking.id == booking_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
