# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase

from appschemas.config import get_settings
from appschemas.errors import NotFoundError, translate_integrity_error


T = TypeVar("T", bound=DeclarativeBase)


class BaseRepository(Generic[T]):
    def __init__(self, session: AsyncSession, model: type[T]) -> None:
        self.session = session
        self.model = model

    async def get_by_id(self, entity_id: int) -> T | None:
        return await self.session.get(self.model, entity_id)

    async def get_or_raise(self, entity_id: int) -> T:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.model.__name__, entity_id)
        return entity

    async def create(self, entity: T) -> T:
        self.session.add(entity)
        await self.flush()
        return entity

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[T]:
        if limit is None:
            limit = get_settings().default_page_size
        result = await self.session.execute(
            select(self.model)
            .order_by(self.model.id)  # type: ignore[attr-defined]
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars().all())

    async def delete(self, entity: T) -> None:
        await self.session.delete(entity)
        await self.flush()

    async def flush(self) -> None:
        """Flush pending writes, translating constraint violations.

        The session's transaction is unusable after a violation; the caller
        must roll back.
        """
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise translate_integrity_error(exc) from exc
