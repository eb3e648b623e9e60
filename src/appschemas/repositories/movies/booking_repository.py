# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from appschemas.models.movies import Booking, Showtime
from appschemas.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Booking)

    async def history_for_user(
        self, user_id: int, *, limit: int = 50, offset: int = 0
    ) -> list[Booking]:
        """A user's bookings, newest first, with showtime, movie and theatre."""
        result = await self.session.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .options(
                selectinload(Booking.showtime).selectinload(Showtime.movie),
                selectinload(Booking.showtime).selectinload(Showtime.theatre),
            )
            .order_by(Booking.created_at.desc(), Booking.id.desc())
            .limit(limit)
            .offset(offset)
        )
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
