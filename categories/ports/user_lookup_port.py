from typing import Protocol

from users.entities.user import UserOut


class UserLookupPort(Protocol):
    """
    Outbound port resolving a username to a user.
    Raises UserNotFoundError for unknown usernames.
    """

    async def user_by_username(self, username: str) -> UserOut: ...
