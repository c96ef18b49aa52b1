from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from .flags import UserFlags
from .enums import PremiumType

if TYPE_CHECKING:
    from ..state import State

__all__ = ("User",)


class User:
    """
    Represents a discord user.

    A user created from nothing but an ID is partial, and gets completed in place
    once its full data is received.
    """

    def __init__(self, state: State, data: Dict[str, Any]) -> None:
        self._state = state
        self._data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"<{name} username={self.username!r} discriminator={self.discriminator!r} id={self.id} bot={self.bot}>"

    def __str__(self) -> str:
        return f"{self.username}#{self.discriminator}"

    def _patch(self, data: Dict[str, Any]) -> User:
        self._data.update(data)
        return self

    async def fetch(self) -> User:
        """
        Fetches the user from the API. Completes the user in place if it is partial.

        Returns:
            The [shoal.User][] instance.

        """
        return await self._state.users.fetch(self.id)

    @property
    def partial(self) -> bool:
        return "username" not in self._data

    @property
    def id(self) -> int:
        return int(self._data["id"])

    @property
    def username(self) -> Optional[str]:
        return self._data.get("username")

    @property
    def discriminator(self) -> Optional[str]:
        return self._data.get("discriminator")

    @property
    def avatar(self) -> Optional[str]:
        return self._data.get("avatar")

    @property
    def bot(self) -> bool:
        return self._data.get("bot", False)

    @property
    def system(self) -> bool:
        return self._data.get("system", False)

    @property
    def accent_color(self) -> int:
        return self._data.get("accent_color") or 0

    @property
    def flags(self) -> UserFlags:
        return UserFlags(self._data.get("flags", 0))

    @property
    def public_flags(self) -> UserFlags:
        return UserFlags(self._data.get("public_flags", 0))

    @property
    def premium_type(self) -> PremiumType:
        return PremiumType(self._data.get("premium_type", 0))

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"
