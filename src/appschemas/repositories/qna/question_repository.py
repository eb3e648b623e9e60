# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.models.qna import (
    Question,
    QuestionTopic,
    Topic,
    TopicFollow,
    UserFollow,
)
from appschemas.repositories.base import BaseRepository


class QuestionRepository(BaseRepository[Question]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Question)

    async def list_by_topic_name(
        self, topic_name: str, *, limit: int = 50, offset: int = 0
    ) -> list[Question]:
        result = await self.session.execute(
            select(Question)
            .join(QuestionTopic, QuestionTopic.question_id == Question.id)
            .join(Topic, Topic.id == QuestionTopic.topic_id)
            .where(Topic.name == topic_name)
            .order_by(Question.created_at.desc(), Question.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def feed_from_followed_users(
        self, user_id: int, *, limit: int = 50, offset: int = 0
    ) -> list[Question]:
        """Questions asked by the users ``user_id`` follows, newest first."""
        result = await self.session.execute(
            select(Question)
            .join(UserFollow, UserFollow.following_id == Question.user_id)
            .where(UserFollow.follower_id == user_id)
            .order_by(Question.created_at.desc(), Question.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def feed_from_followed_topics(
        self, user_id: int, *, limit: int = 50, offset: int = 0
    ) -> list[Question]:
        """Questions in any topic ``user_id`` follows, each listed once."""
        result = await self.session.execute(
            select(Question)
            .join(QuestionTopic, QuestionTopic.question_id == Question.id)
            .join(TopicFollow, TopicFollow.topic_id == QuestionTopic.topic_id)
            .where(TopicFollow.user_id == user_id)
            .distinct()
            .order_by(Question.created_at.desc(), Question.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def add_topic(self, question_id: int, topic_id: int) -> QuestionTopic:
        link = QuestionTopic(question_id=question_id, topic_id=topic_id)
        self.session.add(link)
        await self.flush()
        return link

    async def list_topics(self, question_id: int) -> list[Topic]:
        result = await self.session.execute(
            select(Topic)
            .join(QuestionTopic, QuestionTopic.topic_id == Topic.id)
            .where(QuestionTopic.question_id == question_id)
            .order_by(Topic.name)
        )
        return list(result.scalars().all())
