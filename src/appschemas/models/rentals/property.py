# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    false,
    true,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from appschemas.models.base import (
    CreatedAtMixin,
    IntegerIDMixin,
    RentalsBase,
    TimestampMixin,
    table_args,
)


class Property(IntegerIDMixin, TimestampMixin, RentalsBase):
    __tablename__ = "properties"

    host_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Lookup rows cannot be deleted while listings still use them.
    property_type_id: Mapped[int] = mapped_column(
        ForeignKey("property_types.id"),
        nullable=False,
    )
    city_id: Mapped[int] = mapped_column(
        ForeignKey("cities.id"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(10, 8), default=None)
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(11, 8), default=None)
    bedrooms: Mapped[int | None] = mapped_column(
        Integer, default=1, server_default="1"
    )
    bathrooms: Mapped[int | None] = mapped_column(
        Integer, default=1, server_default="1"
    )
    max_guests: Mapped[int | None] = mapped_column(
        Integer, default=2, server_default="2"
    )
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    cleaning_fee: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), default=Decimal("0"), server_default="0"
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, server_default=true()
    )

    # Relationships
    host: Mapped[User] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="properties",
    )
    property_type: Mapped[PropertyType] = relationship()  # type: ignore[name-defined]  # noqa: F821
    city: Mapped[City] = relationship()  # type: ignore[name-defined]  # noqa: F821
    images: Mapped[list[PropertyImage]] = relationship(
        back_populates="property",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PropertyImage.id",
    )
    amenity_links: Mapped[list[PropertyAmenity]] = relationship(
        back_populates="property",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    bookings: Mapped[list[Booking]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="property",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = table_args(
        Index("idx_properties_city_id", "city_id"),
        Index("idx_properties_host_id", "host_id"),
        Index("idx_properties_type_id", "property_type_id"),
        Index("idx_properties_price", "price_per_night"),
        Index("idx_properties_active", "is_active"),
    )

    @property
    def primary_image(self) -> PropertyImage | None:
        return next((image for image in self.images if image.is_primary), None)


class PropertyImage(IntegerIDMixin, CreatedAtMixin, RentalsBase):
    """An image of a listing.

    At most one image per property should be primary; that is maintained by
    :meth:`PropertyRepository.set_primary_image`, not by a constraint.
    """

    __tablename__ = "property_images"

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
    )
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)
    is_primary: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false()
    )
    caption: Mapped[str | None] = mapped_column(String(255), default=None)

    # Relationships
    property: Mapped[Property] = relationship(back_populates="images")

    __table_args__ = table_args(
        Index("idx_property_images_property_id", "property_id"),
    )


class PropertyAmenity(IntegerIDMixin, RentalsBase):
    """Many-to-many edge between a property and an amenity."""

    __tablename__ = "property_amenities"

    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
    )
    amenity_id: Mapped[int] = mapped_column(
        ForeignKey("amenities.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    property: Mapped[Property] = relationship(back_populates="amenity_links")
    amenity: Mapped[Amenity] = relationship()  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = table_args(
        UniqueConstraint("property_id", "amenity_id"),
    )
