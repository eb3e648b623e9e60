# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, QnaBase, table_args


class Topic(IntegerIDMixin, CreatedAtMixin, QnaBase):
    __tablename__ = "topics"

    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)

    __table_args__ = table_args()


class QuestionTopic(IntegerIDMixin, CreatedAtMixin, QnaBase):
    """Many-to-many edge between a question and a topic."""

    __tablename__ = "question_topics"

    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    )
    topic_id: Mapped[int] = mapped_column(
        ForeignKey("topics.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    question: Mapped[Question] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="topic_links",
    )
    topic: Mapped[Topic] = relationship()

    __table_args__ = table_args(
        UniqueConstraint("question_id", "topic_id"),
        Index("idx_question_topics_topic_id", "topic_id"),
    )
