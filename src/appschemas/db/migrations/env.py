# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

"""Alembic environment shared by the three schemas.

Each schema lives in its own database and on its own branch. Pick it with
``-x schema=<qna|movies|rentals>`` and upgrade that branch only::

    alembic -x schema=rentals upgrade rentals@head
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config

from appschemas.config import get_settings
from appschemas.models import SCHEMAS

# Alembic Config object
config = context.config

# Set up Python logging from alembic.ini
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

schema = context.get_x_argument(as_dictionary=True).get("schema", "qna")
if schema not in SCHEMAS:
    raise SystemExit(
        f"unknown schema {schema!r}; expected one of {', '.join(sorted(SCHEMAS))}"
    )

target_metadata = SCHEMAS[schema]


def get_url() -> str:
    """Read the schema's database URL from settings."""
    return get_settings().database_url(schema)


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (generate SQL without connecting)."""
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=get_url().startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection):  # type: ignore[no-untyped-def]
    """Execute migrations within a connection context."""
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Run migrations in 'online' mode using an async engine."""
    configuration = config.get_section(config.config_ini_section, {})
    configuration["sqlalchemy.url"] = get_url()

    connectable = async_engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    """Entry point for online migrations."""
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
