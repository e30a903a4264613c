import logging
from typing import List
from uuid import UUID

from categories.domain.entities.category import CategoryUserOut, decode_category_user
from categories.domain.models.category_user import CategoryUser
from categories.errors import PersistenceError
from shared.abstracts.abstract_repository import AbstractRepository
from shared.entities.batch import decode_rows

logger = logging.getLogger(__name__)


class CategoryUserService:
    def __init__(self, repo: AbstractRepository):  # CategoryUserRepository
        self.repo = repo

    async def get_or_create(self, user_id: UUID, category_id: UUID) -> CategoryUserOut:
        existing = await self.repo.get_by_pair(user_id, category_id)
        if existing is not None:
            return decode_category_user(existing)

        await self.repo.insert(CategoryUser(user_id=user_id, category_id=category_id))

        stored = await self.repo.get_by_pair(user_id, category_id)
        if stored is None:
            raise PersistenceError(f"Association ({user_id}, {category_id}) missing after insert")
        logger.info("Linked user to category", extra={"user_id": user_id, "category_id": category_id})
        return decode_category_user(stored)

    async def list_by_user(self, user_id: UUID) -> List[CategoryUserOut]:
        """All associations of a user; no associations is an empty list, not an error."""
        batch = decode_rows(await self.repo.list_by_user(user_id), decode_category_user)
        if batch.skipped:
            logger.warning(
                f"Skipped {len(batch.skipped)} undecodable associations",
                extra={"user_id": user_id, "skipped": len(batch.skipped)},
            )
        return batch.items
