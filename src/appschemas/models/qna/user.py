# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, QnaBase, table_args


class User(IntegerIDMixin, CreatedAtMixin, QnaBase):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(100), default=None)
    bio: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships (rows are removed by ON DELETE CASCADE in the database)
    questions: Mapped[list[Question]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    answers: Mapped[list[Answer]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    comments: Mapped[list[Comment]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args()
