from categories.ports.user_lookup_port import UserLookupPort
from users.entities.user import UserOut
from users.services.user_service import UserService

class UserLookupInProcessAdapter(UserLookupPort):
    def __init__(self, user_service: UserService) -> None:
        self._users = user_service

    async def user_by_username(self, username: str) -> UserOut:
        return await self._users.get_by_username(username)
