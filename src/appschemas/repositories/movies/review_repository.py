# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from appschemas.models.movies import MovieReview, TheatreReview
from appschemas.repositories.base import BaseRepository
from appschemas.schemas.movies import ReviewCreate


class MovieReviewRepository(BaseRepository[MovieReview]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, MovieReview)

    async def add(self, movie_id: int, body: ReviewCreate) -> MovieReview:
        return await self.create(
            MovieReview(
                movie_id=movie_id,
                user_id=body.user_id,
                rating=body.rating,
                comment=body.comment,
            )
        )

    async def list_by_movie(self, movie_id: int) -> list[MovieReview]:
        result = await self.session.execute(
            select(MovieReview)
            .where(MovieReview.movie_id == movie_id)
            .options(selectinload(MovieReview.user))
            .order_by(MovieReview.created_at.desc(), MovieReview.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_user_and_movie(
        self, user_id: int, movie_id: int
    ) -> MovieReview | None:
        result = await self.session.execute(
            select(MovieReview).where(
                MovieReview.user_id == user_id,
                MovieReview.movie_id == movie_id,
            )
        )
        return result.scalar_one_or_none()


class TheatreReviewRepository(BaseRepository[TheatreReview]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, TheatreReview)

    async def add(self, theatre_id: int, body: ReviewCreate) -> TheatreReview:
        return await self.create(
            TheatreReview(
                theatre_id=theatre_id,
                user_id=body.user_id,
                rating=body.rating,
                comment=body.comment,
            )
        )

    async def get_by_user_and_theatre(
        self, user_id: int, theatre_id: int
    ) -> TheatreReview | None:
        result = await self.session.execute(
            select(TheatreReview).where(
                TheatreReview.user_id == user_id,
                TheatreReview.theatre_id == theatre_id,
            )
        )
        return result.scalar_one_or_none()
