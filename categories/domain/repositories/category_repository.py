from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import UUID

from categories.domain.models.category import Category
from shared.abstracts.abstract_repository import AbstractRepository


class CategoryRepository(AbstractRepository):
    model = Category

    # ---------- Query helpers ----------

    async def get_by_name(self, name: str) -> Optional[Category]:
        return await self.find_one(name=name)

    async def get_by_slug(self, slug: str) -> Optional[Category]:
        return await self.find_one(slug=slug)

    async def get_by_ids(self, ids: Iterable[UUID]) -> List[Category]:
        idlist = [cid for cid in ids if cid]
        if not idlist:
            return []
        return await self.find(id=idlist)

    # ---------- AbstractRepository ----------

    async def get(self, entity_id: UUID) -> Optional[Category]:
        return await self.find_one(id=entity_id)

    async def list(self, **filters) -> List[Category]:
        return await self.find(**filters)

    async def list_all(self) -> List[Category]:
        return await self.find()
