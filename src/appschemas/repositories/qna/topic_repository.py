# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.models.qna import Topic
from appschemas.repositories.base import BaseRepository


class TopicRepository(BaseRepository[Topic]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Topic)

    async def get_by_name(self, name: str) -> Topic | None:
        result = await self.session.execute(select(Topic).where(Topic.name == name))
        return result.scalar_one_or_none()
