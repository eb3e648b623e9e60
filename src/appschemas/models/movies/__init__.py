# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from appschemas.models.base import MoviesBase
from appschemas.models.movies.booking import Booking, BookingStatus, PaymentStatus
from appschemas.models.movies.movie import Movie
from appschemas.models.movies.review import MovieReview, TheatreReview
from appschemas.models.movies.showtime import Showtime
from appschemas.models.movies.user import User
from appschemas.models.movies.venue import City, Theatre

metadata = MoviesBase.metadata

__all__ = [
    "Booking",
    "BookingStatus",
    "City",
    "Movie",
    "MovieReview",
    "MoviesBase",
    "PaymentStatus",
    "Showtime",
    "Theatre",
    "TheatreReview",
    "User",
    "metadata",
]
