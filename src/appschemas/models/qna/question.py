# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import IntegerIDMixin, QnaBase, TimestampMixin, table_args


class Question(IntegerIDMixin, TimestampMixin, QnaBase):
    __tablename__ = "questions"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships
    author: Mapped[User] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="questions",
    )
    answers: Mapped[list[Answer]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="question",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    topic_links: Mapped[list[QuestionTopic]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="question",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args(
        Index("idx_questions_user_id", "user_id"),
    )
