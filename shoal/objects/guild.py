from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .member import Member
from ..utils import to_snowflake

if TYPE_CHECKING:
    from ..state import State
    from .channel import GuildChannel
    from .role import Role
    from .voice_state import VoiceState

__all__ = ("Guild",)


class Guild:
    """
    Represents a Guild.

    Attributes:
        roles (shoal.managers.RoleManager): The roles of the guild.
        channels (shoal.managers.GuildChannelManager): An index of the guild's channels,
            backed by the client's channel cache.
        voice_states (shoal.managers.VoiceStateManager): The voice states of the guild, keyed by user ID.
    """

    def __init__(self, state: State, data: Dict[str, Any]) -> None:
        """
        Creates a new Guild instance.

        Parameters:
            state (shoal.State): The state instance.
            data (Dict): The guild data.
        """
        from ..managers import GuildChannelManager, RoleManager, VoiceStateManager

        self._state = state
        self._data: Dict[str, Any] = {}
        self._members: Dict[int, Member] = {}

        self.roles = RoleManager(self)
        self.channels = GuildChannelManager(self)
        self.voice_states = VoiceStateManager(self)

        self._patch(data)

    def __repr__(self) -> str:
        return f"<Guild id={self.id} name={self.name!r}>"

    def _patch(self, data: Dict[str, Any]) -> Guild:
        """
        Merges new data into the guild, and adds or patches the roles, channels, members
        and voice states it carries.
        """
        data = dict(data)

        roles = data.pop("roles", None)
        channels = data.pop("channels", None)
        members = data.pop("members", None)
        voice_states = data.pop("voice_states", None)

        self._data.update(data)

        if roles is not None:
            seen = {self.roles.add(role).id for role in roles}  # type: ignore
            for role_id in [role_id for role_id in self.roles.cache if role_id not in seen]:
                del self.roles.cache[role_id]

        for channel in channels or []:
            self._state.channels.add(channel, self)

        for member in members or []:
            self._add_member(member)

        if voice_states is not None:
            for voice_state in voice_states:
                self.voice_states.add(voice_state)

        return self

    def _add_member(self, data: Dict[str, Any]) -> Member:
        user_id = int(data["user"]["id"])

        member = self._members.get(user_id)
        if member is not None:
            return member._patch(data)

        member = Member(self._state, data, self)
        self._members[user_id] = member
        return member

    def _remove_member(self, user_id: int) -> Optional[Member]:
        return self._members.pop(user_id, None)

    @property
    def id(self) -> int:
        return int(self._data["id"])

    @property
    def name(self) -> Optional[str]:
        return self._data.get("name")

    @property
    def owner_id(self) -> Optional[int]:
        return to_snowflake(self._data, "owner_id")

    @property
    def unavailable(self) -> bool:
        return self._data.get("unavailable", False)

    @property
    def partial(self) -> bool:
        return False

    @property
    def members(self) -> List[Member]:
        return list(self._members.values())

    @property
    def default_role(self) -> Optional[Role]:
        """
        The `@everyone` role of the guild.
        """
        return self.roles.everyone

    def get_member(self, member_id: int) -> Optional[Member]:
        return self._members.get(member_id)

    def get_role(self, role_id: int) -> Optional[Role]:
        return self.roles.get(role_id)

    def get_channel(self, channel_id: int) -> Optional[GuildChannel]:
        return self.channels.get(channel_id)  # type: ignore

    def get_voice_state(self, member_id: int) -> Optional[VoiceState]:
        """
        Grabs a voice state from the cache.

        Parameters:
            member_id (int): The ID of the member.

        Returns:
            The [shoal.VoiceState][] instance corresponding to the ID if found.

        """
        return self.voice_states.get(member_id)
