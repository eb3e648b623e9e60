# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from appschemas.repositories.movies.booking_repository import BookingRepository
from appschemas.repositories.movies.movie_repository import MovieRepository
from appschemas.repositories.movies.review_repository import (
    MovieReviewRepository,
    TheatreReviewRepository,
)
from appschemas.repositories.movies.showtime_repository import ShowtimeRepository
from appschemas.repositories.movies.theatre_repository import TheatreRepository

__all__ = [
    "BookingRepository",
    "MovieRepository",
    "MovieReviewRepository",
    "ShowtimeRepository",
    "TheatreRepository",
    "TheatreReviewRepository",
]
