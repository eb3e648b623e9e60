# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Concurrent writers against a file database.

Each request runs in its own session on its own pooled connection, the way
two API workers would. Only one of two competing requests may win.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path

from sqlalchemy import MetaData, func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from appschemas.db.session import build_engine
from appschemas.errors import CapacityError, UnavailableError
from appschemas.models import SCHEMAS, movies, rentals
from appschemas.schemas.movies import SeatRequest
from appschemas.schemas.rentals import StayRequest
from appschemas.services.seat_reservations import SeatReservationService
from appschemas.services.stay_reservations import StayReservationService
from tests.conftest import make_property, make_rental_user, make_showtime, make_user


@asynccontextmanager
async def _file_engine(tmp_path: Path, metadata: MetaData) -> AsyncIterator[AsyncEngine]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'app.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


async def _attempt(
    factory: async_sessionmaker[AsyncSession],
    call: Callable[[AsyncSession], Awaitable[object]],
) -> bool:
    """Run ``call`` in its own transaction; report whether it committed."""
    async with factory() as session:
        try:
            await call(session)
        except (CapacityError, UnavailableError):
            await session.rollback()
            return False
        await session.commit()
        return True


async def test_competing_seat_reservations_never_oversell(tmp_path: Path) -> None:
    async with _file_engine(tmp_path, SCHEMAS["movies"]) as engine:
        factory = async_sessionmaker(engine, expire_on_commit=False)
        async with factory() as session:
            user = movies.User(**make_user())
            city = movies.City(name="Pune")
            film = movies.Movie(title="Dune")
            session.add_all([user, city, film])
            await session.flush()
            theatre = movies.Theatre(name="Inox", city_id=city.id)
            session.add(theatre)
            await session.flush()
            showtime = movies.Showtime(
                **make_showtime(movie_id=film.id, theatre_id=theatre.id, seats=10)
            )
            session.add(showtime)
            await session.commit()
        request = SeatRequest(user_id=user.id, showtime_id=showtime.id, seats=6)

        results = await asyncio.gather(
            *(
                _attempt(factory, lambda s: SeatReservationService(s).reserve(request))
                for _ in range(2)
            )
        )

        assert sorted(results) == [False, True]
        async with factory() as session:
            booked = await session.scalar(select(func.sum(movies.Booking.seats_booked)))
            available = await session.scalar(
                select(movies.Showtime.available_seats).where(
                    movies.Showtime.id == showtime.id
                )
            )
        assert booked == 6
        assert available == 4


async def test_competing_stays_never_double_book(tmp_path: Path) -> None:
    async with _file_engine(tmp_path, SCHEMAS["rentals"]) as engine:
        factory = async_sessionmaker(engine, expire_on_commit=False)
        async with factory() as session:
            host = rentals.User(**make_rental_user(first_name="Host", is_host=True))
            guest = rentals.User(**make_rental_user(first_name="Guest"))
            city = rentals.City(name="Goa", country="India")
            villa = rentals.PropertyType(name="Villa")
            session.add_all([host, guest, city, villa])
            await session.flush()
            listing = rentals.Property(
                **make_property(
                    host_id=host.id, property_type_id=villa.id, city_id=city.id
                )
            )
            session.add(listing)
            await session.commit()
        request = StayRequest(
            property_id=listing.id,
            guest_id=guest.id,
            check_in_date=date(2027, 1, 1),
            check_out_date=date(2027, 1, 5),
            guests=2,
        )

        results = await asyncio.gather(
            *(
                _attempt(factory, lambda s: StayReservationService(s).book(request))
                for _ in range(2)
            )
        )

        assert sorted(results) == [False, True]
        async with factory() as session:
            count = await session.scalar(select(func.count(rentals.Booking.id)))
        assert count == 1
