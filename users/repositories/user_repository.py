from typing import Optional, List
from uuid import UUID

from shared.abstracts.abstract_repository import AbstractRepository
from users.models.user import User

class UserRepository(AbstractRepository):
    model = User

    async def get(self, user_id: UUID) -> Optional[User]:
        return await self.find_one(id=user_id)

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self.find_one(username=username)

    async def list(self, **filters) -> List[User]:
        return await self.find(**filters)
