# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, QnaBase, table_args


class UserFollow(IntegerIDMixin, CreatedAtMixin, QnaBase):
    __tablename__ = "user_follows"

    follower_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    following_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    follower: Mapped[User] = relationship(  # type: ignore[name-defined]  # noqa: F821
        foreign_keys="[UserFollow.follower_id]",
    )
    following: Mapped[User] = relationship(  # type: ignore[name-defined]  # noqa: F821
        foreign_keys="[UserFollow.following_id]",
    )

    __table_args__ = table_args(
        CheckConstraint("follower_id != following_id", name="no_self_follow"),
        UniqueConstraint("follower_id", "following_id"),
        Index("idx_user_follows_following_id", "following_id"),
    )


class TopicFollow(IntegerIDMixin, CreatedAtMixin, QnaBase):
    __tablename__ = "topic_follows"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    topic_id: Mapped[int] = mapped_column(
        ForeignKey("topics.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    topic: Mapped[Topic] = relationship()  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = table_args(
        UniqueConstraint("user_id", "topic_id"),
        Index("idx_topic_follows_topic_id", "topic_id"),
    )
