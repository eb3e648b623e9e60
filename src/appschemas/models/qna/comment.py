# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import IntegerIDMixin, QnaBase, TimestampMixin, table_args
from appschemas.schemas.qna import CommentParent, CommentParentKind


class Comment(IntegerIDMixin, TimestampMixin, QnaBase):
    """A comment on an answer, or a reply to another comment.

    Exactly one of ``answer_id`` and ``parent_comment_id`` is set. Callers
    should go through :meth:`for_parent` / :attr:`parent_ref` rather than the
    raw columns.
    """

    __tablename__ = "comments"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    answer_id: Mapped[int | None] = mapped_column(
        ForeignKey("answers.id", ondelete="CASCADE"),
        default=None,
    )
    parent_comment_id: Mapped[int | None] = mapped_column(
        ForeignKey("comments.id", ondelete="CASCADE"),
        default=None,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    author: Mapped[User] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="comments",
    )
    answer: Mapped[Answer | None] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="comments",
    )
    parent: Mapped[Comment | None] = relationship(
        remote_side="[Comment.id]",
        back_populates="replies",
    )
    replies: Mapped[list[Comment]] = relationship(
        back_populates="parent",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args(
        CheckConstraint(
            "(answer_id IS NOT NULL AND parent_comment_id IS NULL)"
            " OR (answer_id IS NULL AND parent_comment_id IS NOT NULL)",
            name="single_parent",
        ),
        # MySQL refuses CHECKs that read an AUTO_INCREMENT column; there the
        # repository guard is all there is.
        CheckConstraint(
            "parent_comment_id IS NULL OR parent_comment_id != id",
            name="not_self_parent",
        ).ddl_if(dialect=("postgresql", "sqlite")),
        Index("idx_comments_answer_id", "answer_id"),
        Index("idx_comments_parent_comment_id", "parent_comment_id"),
        Index("idx_comments_user_id", "user_id"),
    )

    @classmethod
    def for_parent(cls, user_id: int, parent: CommentParent, content: str) -> Comment:
        comment = cls(user_id=user_id, content=content)
        comment.attach_to(parent)
        return comment

    def attach_to(self, parent: CommentParent) -> None:
        if parent.kind is CommentParentKind.ANSWER:
            self.answer_id, self.parent_comment_id = parent.id, None
        else:
            self.answer_id, self.parent_comment_id = None, parent.id

    @property
    def parent_ref(self) -> CommentParent:
        if self.answer_id is not None:
            return CommentParent.answer(self.answer_id)
        if self.parent_comment_id is not None:
            return CommentParent.comment(self.parent_comment_id)
        raise ValueError(f"comment {self.id} has no parent")

    @property
    def is_reply(self) -> bool:
        return self.parent_comment_id is not None
