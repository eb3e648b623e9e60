# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from appschemas.models.base import RentalsBase
from appschemas.models.rentals.booking import (
    BLOCKING_STATUSES,
    Booking,
    StayPaymentStatus,
    StayStatus,
)
from appschemas.models.rentals.catalog import Amenity, City, PropertyType
from appschemas.models.rentals.property import Property, PropertyAmenity, PropertyImage
from appschemas.models.rentals.review import HostReview, PropertyReview
from appschemas.models.rentals.user import User
from appschemas.models.rentals.wishlist import Wishlist

metadata = RentalsBase.metadata

__all__ = [
    "BLOCKING_STATUSES",
    "Amenity",
    "Booking",
    "City",
    "HostReview",
    "Property",
    "PropertyAmenity",
    "PropertyImage",
    "PropertyReview",
    "PropertyType",
    "RentalsBase",
    "StayPaymentStatus",
    "StayStatus",
    "User",
    "Wishlist",
    "metadata",
]
