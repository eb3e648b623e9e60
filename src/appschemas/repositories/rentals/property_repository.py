# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import case, exists, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from appschemas.errors import NotFoundError
from appschemas.models.rentals import (
    BLOCKING_STATUSES,
    Amenity,
    Booking,
    City,
    Property,
    PropertyAmenity,
    PropertyImage,
    PropertyReview,
    PropertyType,
    StayStatus,
)
from appschemas.repositories.base import BaseRepository
from appschemas.schemas.rentals import HostStats, PropertySearch, PropertySearchResult

# Stays that count towards a host's earnings.
EARNING_STATUSES = (StayStatus.CONFIRMED.value, StayStatus.COMPLETED.value)


def overlaps(check_in: date, check_out: date):  # type: ignore[no-untyped-def]
    """Half-open ``[check_in, check_out)`` overlap with a booking row."""
    return (Booking.check_in_date < check_out) & (Booking.check_out_date > check_in)


class PropertyRepository(BaseRepository[Property]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Property)

    async def search(self, search: PropertySearch) -> list[PropertySearchResult]:
        """Active listings in a city, cheapest first, with review aggregates."""
        avg_rating = func.avg(PropertyReview.overall_rating)
        stmt = (
            select(
                Property.id,
                Property.title,
                Property.price_per_night,
                Property.max_guests,
                PropertyType.name.label("property_type"),
                City.name.label("city_name"),
                avg_rating.label("avg_rating"),
                func.count(PropertyReview.id).label("review_count"),
            )
            .join(PropertyType, PropertyType.id == Property.property_type_id)
            .join(City, City.id == Property.city_id)
            .outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
            .where(City.name == search.city_name, Property.is_active.is_(True))
            .group_by(
                Property.id,
                Property.title,
                Property.price_per_night,
                Property.max_guests,
                PropertyType.name,
                City.name,
            )
            .order_by(Property.price_per_night.asc(), Property.id)
            .limit(search.limit)
            .offset(search.offset)
        )
        if search.min_guests is not None:
            stmt = stmt.where(Property.max_guests >= search.min_guests)
        if search.min_price is not None:
            stmt = stmt.where(Property.price_per_night >= search.min_price)
        if search.max_price is not None:
            stmt = stmt.where(Property.price_per_night <= search.max_price)
        if search.min_rating is not None:
            stmt = stmt.having(
                or_(avg_rating >= search.min_rating, avg_rating.is_(None))
            )

        result = await self.session.execute(stmt)
        return [PropertySearchResult.model_validate(row) for row in result.all()]

    async def is_available(
        self, property_id: int, check_in: date, check_out: date
    ) -> bool:
        """Whether an active listing has no pending/confirmed stay in the range."""
        blocked = exists().where(
            Booking.property_id == Property.id,
            Booking.booking_status.in_(BLOCKING_STATUSES),
            overlaps(check_in, check_out),
        )
        result = await self.session.execute(
            select(Property.id).where(
                Property.id == property_id,
                Property.is_active.is_(True),
                ~blocked,
            )
        )
        return result.first() is not None

    async def get_details(self, property_id: int) -> Property | None:
        result = await self.session.execute(
            select(Property)
            .where(Property.id == property_id)
            .options(
                selectinload(Property.images),
                selectinload(Property.amenity_links).selectinload(
                    PropertyAmenity.amenity
                ),
                selectinload(Property.property_type),
                selectinload(Property.city),
                selectinload(Property.host),
            )
        )
        return result.scalar_one_or_none()

    async def list_amenities(self, property_id: int) -> list[Amenity]:
        result = await self.session.execute(
            select(Amenity)
            .join(PropertyAmenity, PropertyAmenity.amenity_id == Amenity.id)
            .where(PropertyAmenity.property_id == property_id)
            .order_by(Amenity.name)
        )
        return list(result.scalars().all())

    async def add_amenity(self, property_id: int, amenity_id: int) -> PropertyAmenity:
        link = PropertyAmenity(property_id=property_id, amenity_id=amenity_id)
        self.session.add(link)
        await self.flush()
        return link

    async def add_image(
        self,
        property_id: int,
        image_url: str,
        *,
        caption: str | None = None,
        is_primary: bool = False,
    ) -> PropertyImage:
        image = PropertyImage(
            property_id=property_id, image_url=image_url, caption=caption
        )
        self.session.add(image)
        await self.flush()
        if is_primary:
            await self.set_primary_image(property_id, image.id)
        return image

    async def set_primary_image(self, property_id: int, image_id: int) -> None:
        """Flag ``image_id`` as the listing's only primary image."""
        owner = await self.session.execute(
            select(PropertyImage.id).where(
                PropertyImage.id == image_id,
                PropertyImage.property_id == property_id,
            )
        )
        if owner.first() is None:
            raise NotFoundError("PropertyImage", image_id)
        await self.session.execute(
            update(PropertyImage)
            .where(
                PropertyImage.property_id == property_id,
                PropertyImage.id != image_id,
            )
            .values(is_primary=False)
        )
        await self.session.execute(
            update(PropertyImage)
            .where(PropertyImage.id == image_id)
            .values(is_primary=True)
        )
        await self.flush()

    async def host_stats(self, host_id: int) -> list[HostStats]:
        """Per-listing booking count, average rating and earnings for a host."""
        bookings = (
            select(
                Booking.property_id,
                func.count(Booking.id).label("total_bookings"),
                func.sum(
                    case(
                        (
                            Booking.booking_status.in_(EARNING_STATUSES),
                            Booking.total_amount,
                        ),
                        else_=0,
                    )
                ).label("total_earnings"),
            )
            .group_by(Booking.property_id)
            .subquery()
        )
        reviews = (
            select(
                PropertyReview.property_id,
                func.avg(PropertyReview.overall_rating).label("avg_rating"),
            )
            .group_by(PropertyReview.property_id)
            .subquery()
        )
        earnings = func.coalesce(bookings.c.total_earnings, 0)
        result = await self.session.execute(
            select(
                Property.id.label("property_id"),
                Property.title,
                func.coalesce(bookings.c.total_bookings, 0).label("total_bookings"),
                reviews.c.avg_rating,
                earnings.label("total_earnings"),
            )
            .outerjoin(bookings, bookings.c.property_id == Property.id)
            .outerjoin(reviews, reviews.c.property_id == Property.id)
            .where(Property.host_id == host_id)
            .order_by(earnings.desc(), Property.id)
        )
        return [
            HostStats(
                property_id=row.property_id,
                title=row.title,
                total_bookings=row.total_bookings,
                avg_rating=float(row.avg_rating)
                if row.avg_rating is not None
                else None,
                total_earnings=Decimal(str(row.total_earnings)),
            )
            for row in result.all()
        ]

    async def get_for_update(self, property_id: int) -> Property | None:
        """Load a listing holding a row lock until the transaction ends."""
        result = await self.session.execute(
            select(Property)
            .where(Property.id == property_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
