# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.models.movies import City, Movie, MovieReview, Showtime, Theatre
from appschemas.repositories.base import BaseRepository
from appschemas.schemas.movies import RatingSummary


class MovieRepository(BaseRepository[Movie]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Movie)

    async def list_playing_in_city(
        self, city_name: str, *, on_or_after: date | None = None
    ) -> list[Movie]:
        """Movies with at least one showtime in ``city_name`` from ``on_or_after`` on."""
        since = on_or_after or date.today()
        result = await self.session.execute(
            select(Movie)
            .join(Showtime, Showtime.movie_id == Movie.id)
            .join(Theatre, Theatre.id == Showtime.theatre_id)
            .join(City, City.id == Theatre.city_id)
            .where(City.name == city_name, Showtime.show_date >= since)
            .distinct()
            .order_by(Movie.title, Movie.id)
        )
        return list(result.scalars().all())

    async def rating_summary(self, movie_id: int) -> RatingSummary:
        result = await self.session.execute(
            select(
                func.avg(MovieReview.rating),
                func.count(MovieReview.id),
            ).where(MovieReview.movie_id == movie_id)
        )
        average, total = result.one()
        return RatingSummary(
            average_rating=float(average) if average is not None else None,
            total_reviews=total,
        )
