from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from categories.domain.models.category_user import CategoryUser
from shared.abstracts.abstract_repository import AbstractRepository


class CategoryUserRepository(AbstractRepository):
    model = CategoryUser

    async def get_by_pair(self, user_id: UUID, category_id: UUID) -> Optional[CategoryUser]:
        return await self.find_one(user_id=user_id, category_id=category_id)

    async def list_by_user(self, user_id: UUID) -> List[CategoryUser]:
        return await self.find(user_id=user_id)

    async def get(self, entity_id: UUID) -> Optional[CategoryUser]:
        return await self.find_one(id=entity_id)

    async def list(self, **filters) -> List[CategoryUser]:
        return await self.find(**filters)
