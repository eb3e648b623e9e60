# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.models.qna import Answer
from appschemas.repositories.base import BaseRepository


class AnswerRepository(BaseRepository[Answer]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Answer)

    async def list_by_question(
        self, question_id: int, *, limit: int = 50, offset: int = 0
    ) -> list[Answer]:
        """Answers to a question, oldest first."""
        result = await self.session.execute(
            select(Answer)
            .where(Answer.question_id == question_id)
            .order_by(Answer.created_at, Answer.id)
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def count_by_question(self, question_id: int) -> int:
        result = await self.session.execute(
            select(func.count(Answer.id)).where(Answer.question_id == question_id)
        )
        return result.scalar_one()
