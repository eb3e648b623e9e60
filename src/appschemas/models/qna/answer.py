# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import IntegerIDMixin, QnaBase, TimestampMixin, table_args


class Answer(IntegerIDMixin, TimestampMixin, QnaBase):
    __tablename__ = "answers"

    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    question: Mapped[Question] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="answers",
    )
    author: Mapped[User] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="answers",
    )
    comments: Mapped[list[Comment]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="answer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args(
        Index("idx_answers_question_id", "question_id"),
        Index("idx_answers_user_id", "user_id"),
    )
