# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from typing import Any

from sqlalchemy import select

from appschemas.repositories.base import BaseRepository


class UserRepository(BaseRepository[Any]):
    """Account lookups shared by the three schemas' ``users`` tables."""

    async def get_by_email(self, email: str) -> Any | None:
        result = await self.session.execute(
            select(self.model).where(self.model.email == email)
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Any | None:
        if not hasattr(self.model, "username"):
            raise AttributeError(f"{self.model.__module__} users have no username")
        result = await self.session.execute(
            select(self.model).where(self.model.username == username)
        )
        return result.scalar_one_or_none()
