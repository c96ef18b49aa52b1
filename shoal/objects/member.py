from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, List

import datetime

if TYPE_CHECKING:
    from ..state import State
    from .guild import Guild
    from .role import Role
    from .user import User
    from .voice_state import VoiceState

__all__ = ("Member",)


class Member:
    """
    Represents a member of a guild.

    Attributes:
        guild (shoal.Guild): The [shoal.Guild][] instance which the member belongs to.
        user (shoal.User): The cached [shoal.User][] this member wraps.

    """

    def __init__(self, state: State, data: Dict[str, Any], guild: Guild) -> None:
        self._state = state
        self._member = data
        self.guild = guild
        self.user: User = state.users.add(data["user"])  # type: ignore

    def __repr__(self) -> str:
        return f"<Member id={self.id} nick={self.nick!r} guild={self.guild.id}>"

    def _patch(self, data: Dict[str, Any]) -> Member:
        self._member.update(data)
        if user := data.get("user"):
            self._state.users.add(user)

        return self

    @property
    def id(self) -> int:
        return self.user.id

    @property
    def nick(self) -> Optional[str]:
        """
        The nickname of of member.
        """
        return self._member.get("nick")

    @property
    def display_name(self) -> Optional[str]:
        return self.nick or self.user.username

    @property
    def roles(self) -> List[Role]:
        """
        The cached roles of the member.
        """
        roles = [self.guild.roles.get(role_id) for role_id in self._member.get("roles", [])]
        return [role for role in roles if role is not None]

    @property
    def voice(self) -> Optional[VoiceState]:
        return self.guild.voice_states.get(self.id)

    @property
    def joined_at(self) -> Optional[datetime.datetime]:
        """
        A [datetime.datetime][] instance representing when the member joined the guild.
        """
        timestamp = self._member.get("joined_at")
        if timestamp is None:
            return None

        return datetime.datetime.fromisoformat(timestamp)

    @property
    def deaf(self) -> bool:
        return self._member.get("deaf", False)

    @property
    def mute(self) -> bool:
        return self._member.get("mute", False)
