# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from appschemas.errors import NotFoundError
from appschemas.models.movies import Booking, BookingStatus, Movie, Showtime, Theatre
from appschemas.repositories.base import BaseRepository


class ShowtimeRepository(BaseRepository[Showtime]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Showtime)

    async def list_for_movie_at_theatre(
        self,
        movie_title: str,
        theatre_name: str,
        *,
        on_or_after: date | None = None,
    ) -> list[Showtime]:
        since = on_or_after or date.today()
        result = await self.session.execute(
            select(Showtime)
            .join(Movie, Movie.id == Showtime.movie_id)
            .join(Theatre, Theatre.id == Showtime.theatre_id)
            .where(
                Movie.title == movie_title,
                Theatre.name == theatre_name,
                Showtime.show_date >= since,
            )
            .options(selectinload(Showtime.movie), selectinload(Showtime.theatre))
            .order_by(Showtime.show_date, Showtime.show_time)
        )
        return list(result.scalars().all())

    async def get_for_update(self, showtime_id: int) -> Showtime | None:
        """Load a showtime holding a row lock until the transaction ends."""
        result = await self.session.execute(
            select(Showtime)
            .where(Showtime.id == showtime_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def booked_seats(self, showtime_id: int) -> int:
        """Seats held by bookings that are not cancelled."""
        result = await self.session.execute(
            select(func.coalesce(func.sum(Booking.seats_booked), 0)).where(
                Booking.showtime_id == showtime_id,
                Booking.booking_status != BookingStatus.CANCELLED.value,
            )
        )
        return int(result.scalar_one())

    async def recompute_available_seats(self, showtime_id: int) -> int | None:
        """Rebuild the cached ``available_seats`` counter from the bookings.

        A showtime with no seat total has no meaningful counter; it is left NULL.
        """
        showtime = await self.get_for_update(showtime_id)
        if showtime is None:
            raise NotFoundError("Showtime", showtime_id)
        if showtime.total_seats is None:
            showtime.available_seats = None
        else:
            booked = await self.booked_seats(showtime_id)
            showtime.available_seats = showtime.total_seats - booked
        await self.flush()
        return showtime.available_seats
