# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from appschemas.config import get_settings


def _configure_sqlite_connection(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Stop the driver from issuing its own deferred BEGIN; see _begin_immediate.
    dbapi_connection.isolation_level = None


def _begin_immediate(conn: Any) -> None:
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine with referential integrity switched on.

    SQLite ignores foreign keys (and therefore ON DELETE CASCADE) unless the
    pragma is set on every new connection.

    SQLite also has no row locks, so ``SELECT ... FOR UPDATE`` is a no-op
    there. Every transaction is opened with ``BEGIN IMMEDIATE`` instead,
    which takes the database write lock before the first read. A second
    writer waits at its own BEGIN until the first commits, so capacity and
    overlap checks always see committed state.
    """
    engine = create_async_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _configure_sqlite_connection)
        event.listen(engine.sync_engine, "begin", _begin_immediate)
    return engine


@lru_cache
def get_engine(schema: str) -> AsyncEngine:
    """Create and cache the async database engine for ``schema``."""
    settings = get_settings()
    url = settings.database_url(schema)
    kwargs: dict[str, Any] = {"echo": settings.echo_sql}
    if make_url(url).get_backend_name() != "sqlite":
        kwargs.update(
            pool_size=settings.database_pool_size,
            max_overflow=10,
            pool_timeout=30,
        )
    return build_engine(url, **kwargs)


@lru_cache
def get_session_factory(schema: str) -> async_sessionmaker[AsyncSession]:
    """Create and cache the async session factory for ``schema``."""
    return async_sessionmaker(
        get_engine(schema),
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(schema: str) -> AsyncIterator[AsyncSession]:
    """Yield a session inside a transaction; commit on success, roll back on error."""
    async with get_session_factory(schema)() as session:
        async with session.begin():
            yield session
