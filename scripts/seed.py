#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors
"""Seed the three databases with a small, consistent set of sample rows.

Everything goes through the repositories and reservation services, so the
sample data obeys the same rules as application writes.

Usage:
    python scripts/seed.py                      # all schemas
    python scripts/seed.py --schema rentals
    python scripts/seed.py --create-tables      # create_all() first (dev only)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import date, time, timedelta
from decimal import Decimal

from appschemas.config import get_settings
from appschemas.db.session import get_engine, session_scope
from appschemas.models import SCHEMAS, movies, qna, rentals
from appschemas.repositories.movies import MovieReviewRepository
from appschemas.repositories.qna import (
    AnswerRepository,
    CommentRepository,
    FollowRepository,
    LikeRepository,
    QuestionRepository,
)
from appschemas.repositories.rentals import (
    PropertyRepository,
    PropertyReviewRepository,
    WishlistRepository,
)
from appschemas.schemas.movies import ReviewCreate, SeatRequest
from appschemas.schemas.qna import CommentParent, LikeTarget
from appschemas.schemas.rentals import PropertyReviewCreate, StayRequest
from appschemas.services.seat_reservations import SeatReservationService
from appschemas.services.stay_reservations import StayReservationService

logger = logging.getLogger("seed")

# Not a real hash; seeded accounts are not meant to log in.
PLACEHOLDER_HASH = "!seed"

# ---------------------------------------------------------------------------
# Q&A
# ---------------------------------------------------------------------------


async def seed_qna() -> None:
    async with session_scope("qna") as session:
        alice = qna.User(username="alice", email="alice@example.com",
                         password_hash=PLACEHOLDER_HASH, full_name="Alice Ng")
        bob = qna.User(username="bob", email="bob@example.com",
                       password_hash=PLACEHOLDER_HASH)
        python = qna.Topic(name="Python", description="The language")
        databases = qna.Topic(name="Databases")
        session.add_all([alice, bob, python, databases])
        await session.flush()

        questions = QuestionRepository(session)
        question = await questions.create(qna.Question(
            user_id=alice.id,
            title="When should I use a recursive CTE?",
            content="Threaded comments seem like a good fit.",
        ))
        await questions.add_topic(question.id, python.id)
        await questions.add_topic(question.id, databases.id)
        answer = await AnswerRepository(session).create(qna.Answer(
            question_id=question.id,
            user_id=bob.id,
            content="Whenever the depth is unbounded.",
        ))

        comments = CommentRepository(session)
        top = await comments.add(alice.id, CommentParent.answer(answer.id), "Thanks!")
        await comments.add(bob.id, CommentParent.comment(top.id), "Any time.")

        likes = LikeRepository(session)
        await likes.like(bob.id, LikeTarget.question(question.id))
        await likes.like(alice.id, LikeTarget.answer(answer.id))

        follows = FollowRepository(session)
        await follows.follow_user(bob.id, alice.id)
        await follows.follow_topic(bob.id, databases.id)
    logger.info("Seeded qna: 2 users, 1 question, 1 answer, 2 comments")


# ---------------------------------------------------------------------------
# Movies
# ---------------------------------------------------------------------------


async def seed_movies() -> None:
    async with session_scope("movies") as session:
        user = movies.User(username="carol", email="carol@example.com",
                           password_hash=PLACEHOLDER_HASH, phone="5550100")
        city = movies.City(name="Bengaluru", state="Karnataka")
        session.add_all([user, city])
        await session.flush()

        theatre = movies.Theatre(name="Lakeside Cinema", city_id=city.id,
                                 total_screens=4)
        film = movies.Movie(title="The Long Query", genre="Drama",
                            language="English", duration_minutes=128,
                            release_date=date.today() - timedelta(days=7))
        session.add_all([theatre, film])
        await session.flush()

        showtime = movies.Showtime(
            movie_id=film.id,
            theatre_id=theatre.id,
            show_date=date.today() + timedelta(days=1),
            show_time=time(19, 30),
            screen_number=2,
            total_seats=120,
            available_seats=120,
            ticket_price=Decimal("250.00"),
        )
        session.add(showtime)
        await session.flush()

        seats = SeatReservationService(session)
        booking = await seats.reserve(
            SeatRequest(user_id=user.id, showtime_id=showtime.id, seats=3)
        )
        await seats.record_payment(booking.id, movies.PaymentStatus.COMPLETED)
        await seats.confirm(booking.id)

        await MovieReviewRepository(session).add(
            film.id, ReviewCreate(user_id=user.id, rating=8, comment="Tense.")
        )
    logger.info("Seeded movies: 1 showtime, booking %s", booking.booking_reference)


# ---------------------------------------------------------------------------
# Rentals
# ---------------------------------------------------------------------------


async def seed_rentals() -> None:
    async with session_scope("rentals") as session:
        host = rentals.User(email="host@example.com", password_hash=PLACEHOLDER_HASH,
                            first_name="Dev", last_name="Rao", is_host=True)
        guest = rentals.User(email="guest@example.com",
                             password_hash=PLACEHOLDER_HASH,
                             first_name="Erin", last_name="Cole")
        city = rentals.City(name="Goa", country="India")
        villa = rentals.PropertyType(name="Villa")
        wifi = rentals.Amenity(name="Wi-Fi", category="Essentials")
        session.add_all([host, guest, city, villa, wifi])
        await session.flush()

        listings = PropertyRepository(session)
        listing = await listings.create(rentals.Property(
            host_id=host.id,
            property_type_id=villa.id,
            city_id=city.id,
            title="Beach villa",
            address="1 Shore Road",
            bedrooms=3,
            max_guests=6,
            price_per_night=Decimal("2000.00"),
            cleaning_fee=Decimal("500.00"),
        ))
        await listings.add_amenity(listing.id, wifi.id)
        await listings.add_image(listing.id, "https://img.example.com/villa.jpg",
                                 caption="Front", is_primary=True)

        stays = StayReservationService(session)
        check_in = date.today() - timedelta(days=10)
        past = await stays.book(StayRequest(
            property_id=listing.id,
            guest_id=guest.id,
            check_in_date=check_in,
            check_out_date=check_in + timedelta(days=5),
            guests=2,
        ))
        await stays.record_payment(past.id, rentals.StayPaymentStatus.PAID)
        await stays.confirm(past.id)
        await stays.complete(past.id)
        await PropertyReviewRepository(session).add(PropertyReviewCreate(
            booking_id=past.id, guest_id=guest.id, overall_rating=5,
            cleanliness_rating=4, comment="Lovely stay.",
        ))

        await WishlistRepository(session).add(guest.id, listing.id)
    logger.info("Seeded rentals: 1 listing, stay %s", past.booking_reference)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

SEEDERS = {"qna": seed_qna, "movies": seed_movies, "rentals": seed_rentals}


async def create_tables(schema: str) -> None:
    async with get_engine(schema).begin() as conn:
        await conn.run_sync(SCHEMAS[schema].create_all)


async def seed(schemas: list[str], *, create: bool) -> None:
    for schema in schemas:
        if create:
            logger.info("Creating %s tables", schema)
            await create_tables(schema)
        await SEEDERS[schema]()
    for schema in schemas:
        await get_engine(schema).dispose()


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the sample databases")
    parser.add_argument(
        "--schema",
        choices=sorted(SEEDERS),
        action="append",
        help="Schema to seed; repeatable (default: all)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Run metadata.create_all() before seeding instead of Alembic",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(levelname)s [%(name)s] %(message)s",
    )
    asyncio.run(seed(args.schema or list(SEEDERS), create=args.create_tables))
