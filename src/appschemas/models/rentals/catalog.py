# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Lookup tables referenced by listings: cities, property types, amenities."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, RentalsBase, table_args


class City(IntegerIDMixin, CreatedAtMixin, RentalsBase):
    __tablename__ = "cities"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str | None] = mapped_column(String(100), default=None)
    country: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = table_args()


class PropertyType(IntegerIDMixin, CreatedAtMixin, RentalsBase):
    __tablename__ = "property_types"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)

    __table_args__ = table_args()


class Amenity(IntegerIDMixin, CreatedAtMixin, RentalsBase):
    __tablename__ = "amenities"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    icon: Mapped[str | None] = mapped_column(String(50), default=None)
    category: Mapped[str | None] = mapped_column(String(50), default=None)

    __table_args__ = table_args()
