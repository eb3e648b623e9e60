# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.models.qna import Like
from appschemas.repositories.base import BaseRepository
from appschemas.schemas.qna import LikeTarget


class LikeRepository(BaseRepository[Like]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Like)

    @staticmethod
    def _target_column(target: LikeTarget):  # type: ignore[no-untyped-def]
        return getattr(Like, target.kind.column)

    async def like(self, user_id: int, target: LikeTarget) -> Like:
        return await self.create(Like.for_target(user_id, target))

    async def unlike(self, user_id: int, target: LikeTarget) -> bool:
        result = await self.session.execute(
            delete(Like).where(
                Like.user_id == user_id,
                self._target_column(target) == target.id,
            )
        )
        return result.rowcount > 0

    async def count(self, target: LikeTarget) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(Like)
            .where(self._target_column(target) == target.id)
        )
        return result.scalar_one()

    async def has_liked(self, user_id: int, target: LikeTarget) -> bool:
        result = await self.session.execute(
            select(Like.id).where(
                Like.user_id == user_id,
                self._target_column(target) == target.id,
            )
        )
        return result.first() is not None
