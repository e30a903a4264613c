from shared.abstracts.abstract_repository import AbstractRepository
from users.entities.user import UserOut
from users.errors import UserNotFoundError

class UserService:
    def __init__(self, users_repo: AbstractRepository):
        self.users = users_repo

    async def get_by_username(self, username: str) -> UserOut:
        user = await self.users.get_by_username(username)
        if user is None:
            raise UserNotFoundError(f"User '{username}' not found")
        return UserOut.model_validate(user)