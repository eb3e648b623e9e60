# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, RentalsBase, table_args


class User(IntegerIDMixin, CreatedAtMixin, RentalsBase):
    """A marketplace account; the same row can act as guest and host."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(15), default=None)
    profile_image: Mapped[str | None] = mapped_column(String(255), default=None)
    date_of_birth: Mapped[date | None] = mapped_column(Date, default=None)
    is_host: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false()
    )
    is_verified: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false()
    )

    # Relationships
    properties: Mapped[list[Property]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="host",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
