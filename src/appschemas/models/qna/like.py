# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, QnaBase, table_args
from appschemas.schemas.qna import LikeTarget, LikeTargetKind


class Like(IntegerIDMixin, CreatedAtMixin, QnaBase):
    """A user's like on exactly one question, answer or comment."""

    __tablename__ = "likes"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    question_id: Mapped[int | None] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"),
        default=None,
    )
    answer_id: Mapped[int | None] = mapped_column(
        ForeignKey("answers.id", ondelete="CASCADE"),
        default=None,
    )
    comment_id: Mapped[int | None] = mapped_column(
        ForeignKey("comments.id", ondelete="CASCADE"),
        default=None,
    )

    # Relationships
    user: Mapped[User] = relationship()  # type: ignore[name-defined]  # noqa: F821

    # NULL target columns never collide in the composite unique keys, so each
    # key only constrains likes of its own target type.
    __table_args__ = table_args(
        CheckConstraint(
            "(question_id IS NOT NULL AND answer_id IS NULL AND comment_id IS NULL)"
            " OR (question_id IS NULL AND answer_id IS NOT NULL AND comment_id IS NULL)"
            " OR (question_id IS NULL AND answer_id IS NULL AND comment_id IS NOT NULL)",
            name="single_target",
        ),
        UniqueConstraint("user_id", "question_id"),
        UniqueConstraint("user_id", "answer_id"),
        UniqueConstraint("user_id", "comment_id"),
        Index("idx_likes_question_id", "question_id"),
        Index("idx_likes_answer_id", "answer_id"),
        Index("idx_likes_comment_id", "comment_id"),
    )

    @classmethod
    def for_target(cls, user_id: int, target: LikeTarget) -> Like:
        return cls(user_id=user_id, **{target.kind.column: target.id})

    @property
    def target(self) -> LikeTarget:
        for kind in LikeTargetKind:
            target_id = getattr(self, kind.column)
            if target_id is not None:
                return LikeTarget(kind=kind, id=target_id)
        raise ValueError(f"like {self.id} has no target")
