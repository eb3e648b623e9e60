# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date, time, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from appschemas.db.session import build_engine
from appschemas.models import SCHEMAS


def _get_test_database_url() -> str:
    """Return the test database URL from env, falling back to in-memory SQLite."""
    return os.environ.get(
        "TEST_DATABASE_URL",
        "sqlite+aiosqlite:///:memory:",
    )


@asynccontextmanager
async def _schema_session(metadata: MetaData) -> AsyncIterator[AsyncSession]:
    """Create ``metadata``'s tables, yield a session, then drop them again.

    The three schemas share table names, so each test gets exactly one of
    them in the database at a time.
    """
    engine = build_engine(_get_test_database_url(), echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    try:
        async with session_factory() as session:
            yield session
            await session.rollback()
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)
        await engine.dispose()


@pytest.fixture
async def qna_session() -> AsyncIterator[AsyncSession]:
    async with _schema_session(SCHEMAS["qna"]) as session:
        yield session


@pytest.fixture
async def movies_session() -> AsyncIterator[AsyncSession]:
    async with _schema_session(SCHEMAS["movies"]) as session:
        yield session


@pytest.fixture
async def rentals_session() -> AsyncIterator[AsyncSession]:
    async with _schema_session(SCHEMAS["rentals"]) as session:
        yield session


# ---------------------------------------------------------------------------
# Factory helpers for creating model instances in tests
# ---------------------------------------------------------------------------


def _tag() -> str:
    return uuid4().hex[:8]


def make_user(*, username: str | None = None, **overrides: object) -> dict[str, object]:
    """Return kwargs for a Q&A or movies ``User`` (both have usernames)."""
    username = username or f"user-{_tag()}"
    return {
        "username": username,
        "email": f"{username}@example.com",
        "password_hash": "x",
        **overrides,
    }


def make_rental_user(
    *, first_name: str = "Test", is_host: bool = False, **overrides: object
) -> dict[str, object]:
    """Return kwargs for a rentals ``User``."""
    return {
        "email": f"{first_name.lower()}-{_tag()}@example.com",
        "password_hash": "x",
        "first_name": first_name,
        "last_name": "User",
        "is_host": is_host,
        **overrides,
    }


def make_showtime(
    *,
    movie_id: int,
    theatre_id: int,
    days_ahead: int = 1,
    seats: int = 100,
    ticket_price: Decimal | None = Decimal("200.00"),
) -> dict[str, object]:
    """Return kwargs for a ``Showtime`` with every seat still available."""
    return {
        "movie_id": movie_id,
        "theatre_id": theatre_id,
        "show_date": date.today() + timedelta(days=days_ahead),
        "show_time": time(18, 0),
        "screen_number": 1,
        "total_seats": seats,
        "available_seats": seats,
        "ticket_price": ticket_price,
    }


def make_property(
    *,
    host_id: int,
    property_type_id: int,
    city_id: int,
    title: str = "Test listing",
    price_per_night: Decimal = Decimal("100.00"),
    cleaning_fee: Decimal = Decimal("20.00"),
    max_guests: int = 4,
    **overrides: object,
) -> dict[str, object]:
    """Return kwargs for a rentals ``Property``."""
    return {
        "host_id": host_id,
        "property_type_id": property_type_id,
        "city_id": city_id,
        "title": title,
        "address": "1 Test Street",
        "price_per_night": price_per_night,
        "cleaning_fee": cleaning_fee,
        "max_guests": max_guests,
        **overrides,
    }
