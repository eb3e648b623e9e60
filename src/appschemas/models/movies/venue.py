# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, MoviesBase, table_args


class City(IntegerIDMixin, CreatedAtMixin, MoviesBase):
    __tablename__ = "cities"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str | None] = mapped_column(String(100), default=None)
    country: Mapped[str | None] = mapped_column(
        String(100), default="India", server_default="India"
    )

    # Relationships
    theatres: Mapped[list[Theatre]] = relationship(
        back_populates="city",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args()


class Theatre(IntegerIDMixin, CreatedAtMixin, MoviesBase):
    __tablename__ = "theatres"

    name: Mapped[str] = mapped_column(String(150), nullable=False)
    address: Mapped[str | None] = mapped_column(Text, default=None)
    city_id: Mapped[int] = mapped_column(
        ForeignKey("cities.id", ondelete="CASCADE"),
        nullable=False,
    )
    phone: Mapped[str | None] = mapped_column(String(15), default=None)
    total_screens: Mapped[int | None] = mapped_column(
        Integer, default=1, server_default="1"
    )

    # Relationships
    city: Mapped[City] = relationship(back_populates="theatres")
    showtimes: Mapped[list[Showtime]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="theatre",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args(
        Index("idx_theatres_city_id", "city_id"),
    )
