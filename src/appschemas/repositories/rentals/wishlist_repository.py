# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Appschemas Contributors

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from appschemas.models.rentals import Property, Wishlist
from appschemas.repositories.base import BaseRepository


class WishlistRepository(BaseRepository[Wishlist]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Wishlist)

    async def add(self, user_id: int, property_id: int) -> Wishlist:
        return await self.create(Wishlist(user_id=user_id, property_id=property_id))

    async def remove(self, user_id: int, property_id: int) -> bool:
        result = await self.session.execute(
            delete(Wishlist).where(
                Wishlist.user_id == user_id,
                Wishlist.property_id == property_id,
            )
        )
        return result.rowcount > 0

    async def list_for_user(self, user_id: int) -> list[Property]:
        result = await self.session.execute(
            select(Property)
            .join(Wishlist, Wishlist.property_id == Property.id)
            .where(Wishlist.user_id == user_id)
            .options(selectinload(Property.city))
            .order_by(Wishlist.created_at.desc(), Wishlist.id.desc())
        )
        return list(result.scalars().all())
