# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import CreatedAtMixin, IntegerIDMixin, RentalsBase, table_args


class Wishlist(IntegerIDMixin, CreatedAtMixin, RentalsBase):
    """A property saved by a user."""

    __tablename__ = "wishlists"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    property: Mapped[Property] = relationship()  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = table_args(
        UniqueConstraint("user_id", "property_id"),
    )
