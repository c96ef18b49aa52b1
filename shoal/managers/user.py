from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

from .base import BaseManager
from ..objects.member import Member
from ..objects.message import Message
from ..objects.user import User
from ..utils import SnowflakeLike

if TYPE_CHECKING:
    from ..state import State

__all__ = ("UserManager", "UserResolvable")

UserResolvable = Union[User, Member, Message, SnowflakeLike]


class UserManager(BaseManager[User]):
    """
    The client-wide user cache.
    """

    def __init__(self, state: State) -> None:
        super().__init__(state, User)

    def resolve(self, ref: Any) -> Optional[User]:
        """
        Resolves a user, a member, a message or an ID to a user.

        Members resolve to their user and messages to their author.
        """
        if isinstance(ref, Member):
            return ref.user

        if isinstance(ref, Message):
            return ref.author

        return super().resolve(ref)

    def resolve_id(self, ref: Any) -> Optional[int]:
        if isinstance(ref, Member):
            return ref.user.id

        if isinstance(ref, Message):
            return ref.author.id

        return super().resolve_id(ref)

    async def fetch(self, id: Union[int, str], cache: bool = True) -> User:
        """
        Fetches a user, from the cache if it's fully cached, otherwise from the API.

        Parameters:
            id (Union[int, str]): The ID of the user.
            cache (bool): Whether to cache the user if it isn't already.

        Returns:
            The [shoal.User][] instance.

        Raises:
            shoal.HTTPException: The request failed.

        """
        existing = self.get(id)
        if existing is not None and not existing.partial:
            return existing

        data = await self._state.http.get_user(int(id))
        return self.add(data, cache)  # type: ignore
