# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from appschemas.errors import CheckViolationError
from appschemas.models.qna import Topic, TopicFollow, User, UserFollow
from appschemas.repositories.base import BaseRepository


class FollowRepository(BaseRepository[UserFollow]):
    """User-to-user and user-to-topic follow edges."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserFollow)

    async def follow_user(self, follower_id: int, following_id: int) -> UserFollow:
        if follower_id == following_id:
            raise CheckViolationError(
                "users cannot follow themselves", "ck_user_follows_no_self_follow"
            )
        return await self.create(
            UserFollow(follower_id=follower_id, following_id=following_id)
        )

    async def unfollow_user(self, follower_id: int, following_id: int) -> bool:
        result = await self.session.execute(
            delete(UserFollow).where(
                UserFollow.follower_id == follower_id,
                UserFollow.following_id == following_id,
            )
        )
        return result.rowcount > 0

    async def list_followers(self, user_id: int) -> list[User]:
        result = await self.session.execute(
            select(User)
            .join(UserFollow, UserFollow.follower_id == User.id)
            .where(UserFollow.following_id == user_id)
            .order_by(User.username)
        )
        return list(result.scalars().all())

    async def list_following(self, user_id: int) -> list[User]:
        result = await self.session.execute(
            select(User)
            .join(UserFollow, UserFollow.following_id == User.id)
            .where(UserFollow.follower_id == user_id)
            .order_by(User.username)
        )
        return list(result.scalars().all())

    async def follow_topic(self, user_id: int, topic_id: int) -> TopicFollow:
        follow = TopicFollow(user_id=user_id, topic_id=topic_id)
        self.session.add(follow)
        await self.flush()
        return follow

    async def unfollow_topic(self, user_id: int, topic_id: int) -> bool:
        result = await self.session.execute(
            delete(TopicFollow).where(
                TopicFollow.user_id == user_id,
                TopicFollow.topic_id == topic_id,
            )
        )
        return result.rowcount > 0

    async def list_followed_topics(self, user_id: int) -> list[Topic]:
        result = await self.session.execute(
            select(Topic)
            .join(TopicFollow, TopicFollow.topic_id == Topic.id)
            .where(TopicFollow.user_id == user_id)
            .order_by(Topic.name)
        )
        return list(result.scalars().all())
