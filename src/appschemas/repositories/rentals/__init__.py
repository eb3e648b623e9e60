# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from appschemas.repositories.rentals.booking_repository import StayBookingRepository
from appschemas.repositories.rentals.property_repository import PropertyRepository
from appschemas.repositories.rentals.review_repository import (
    HostReviewRepository,
    PropertyReviewRepository,
)
from appschemas.repositories.rentals.wishlist_repository import WishlistRepository

__all__ = [
    "HostReviewRepository",
    "PropertyRepository",
    "PropertyReviewRepository",
    "StayBookingRepository",
    "WishlistRepository",
]
