import logging
from typing import List
from uuid import UUID

from categories.domain.entities.category import CategoryOut, decode_category
from categories.ports.user_lookup_port import UserLookupPort
from categories.services.category_user_service import CategoryUserService
from shared.abstracts.abstract_repository import AbstractRepository
from shared.entities.batch import decode_rows

logger = logging.getLogger(__name__)


class UserCategoriesService:
    """
    Read-model service that:
      - lists a user's associations via CategoryUserService
      - resolves the categories behind them in one batched membership query
    """

    def __init__(
        self,
        links: CategoryUserService,
        categories_repo: AbstractRepository,    # CategoryRepository
        users: UserLookupPort,
    ):
        self.links = links
        self.categories_repo = categories_repo
        self.users = users

    async def categories_for_user(self, user_id: UUID) -> List[CategoryOut]:
        category_ids = {link.category_id for link in await self.links.list_by_user(user_id)}
        if not category_ids:
            return []

        batch = decode_rows(await self.categories_repo.get_by_ids(category_ids), decode_category)
        if batch.skipped:
            logger.warning(
                f"Skipped {len(batch.skipped)} undecodable categories",
                extra={"user_id": user_id, "skipped": len(batch.skipped)},
            )
        return batch.items

    async def categories_for_username(self, username: str) -> List[CategoryOut]:
        # UserNotFoundError propagates as-is
        user = await self.users.user_by_username(username)
        return await self.categories_for_user(user.id)
