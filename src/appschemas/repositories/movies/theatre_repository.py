# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from appschemas.models.movies import City, Movie, Showtime, Theatre, TheatreReview
from appschemas.repositories.base import BaseRepository
from appschemas.schemas.movies import RatingSummary


class TheatreRepository(BaseRepository[Theatre]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Theatre)

    async def list_by_city(self, city_id: int) -> list[Theatre]:
        result = await self.session.execute(
            select(Theatre).where(Theatre.city_id == city_id).order_by(Theatre.name)
        )
        return list(result.scalars().all())

    async def list_showing_movie(
        self,
        city_name: str,
        movie_title: str,
        *,
        on_or_after: date | None = None,
    ) -> list[Theatre]:
        since = on_or_after or date.today()
        result = await self.session.execute(
            select(Theatre)
            .join(City, City.id == Theatre.city_id)
            .join(Showtime, Showtime.theatre_id == Theatre.id)
            .join(Movie, Movie.id == Showtime.movie_id)
            .where(
                City.name == city_name,
                Movie.title == movie_title,
                Showtime.show_date >= since,
            )
            .distinct()
            .options(selectinload(Theatre.city))
            .order_by(Theatre.name, Theatre.id)
        )
        return list(result.scalars().all())

    async def rating_summary(self, theatre_id: int) -> RatingSummary:
        result = await self.session.execute(
            select(
                func.avg(TheatreReview.rating),
                func.count(TheatreReview.id),
            ).where(TheatreReview.theatre_id == theatre_id)
        )
        average, total = result.one()
        return RatingSummary(
            average_rating=float(average) if average is not None else None,
            total_reviews=total,
        )
