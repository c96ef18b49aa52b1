from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from ..utils import to_snowflake

if TYPE_CHECKING:
    from ..state import State
    from .channel import Channel
    from .guild import Guild
    from .member import Member

__all__ = ("VoiceState",)


class VoiceState:
    """
    Represents the voice status of a user in a guild.

    A voice state has no ID of its own. It is identified by the user it belongs to.
    """

    def __init__(self, state: State, guild: Guild, data: Dict[str, Any]) -> None:
        self._state = state
        self._data = data
        self.guild = guild

    def __repr__(self) -> str:
        return f"<VoiceState user_id={self.user_id} channel_id={self.channel_id} guild={self.guild.id}>"

    def _patch(self, data: Dict[str, Any]) -> VoiceState:
        self._data.update(data)
        return self

    def _copy(self) -> VoiceState:
        return self.__class__(self._state, self.guild, self._data.copy())

    @property
    def partial(self) -> bool:
        return False

    @property
    def id(self) -> int:
        return self.user_id

    @property
    def user_id(self) -> int:
        return int(self._data["user_id"])

    @property
    def channel_id(self) -> Optional[int]:
        return to_snowflake(self._data, "channel_id")

    @property
    def channel(self) -> Optional[Channel]:
        if self.channel_id is None:
            return None

        return self._state.channels.get(self.channel_id)

    @property
    def member(self) -> Optional[Member]:
        return self.guild.get_member(self.user_id)

    @property
    def session_id(self) -> Optional[str]:
        return self._data.get("session_id")

    @property
    def deaf(self) -> bool:
        return self._data.get("deaf", False)

    @property
    def mute(self) -> bool:
        return self._data.get("mute", False)

    @property
    def self_deaf(self) -> bool:
        return self._data.get("self_deaf", False)

    @property
    def self_mute(self) -> bool:
        return self._data.get("self_mute", False)

    @property
    def self_stream(self) -> bool:
        return self._data.get("self_stream", False)

    @property
    def self_video(self) -> bool:
        return self._data.get("self_video", False)

    @property
    def suppress(self) -> bool:
        return self._data.get("suppress", False)
