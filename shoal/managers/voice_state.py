from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from .base import BaseManager
from ..objects.voice_state import VoiceState

if TYPE_CHECKING:
    from ..objects import Guild

__all__ = ("VoiceStateManager",)


class VoiceStateManager(BaseManager[VoiceState]):
    """
    The voice states of a guild, keyed by the ID of the user they belong to.

    Attributes:
        guild (shoal.Guild): The guild the voice states belong to.
    """

    def __init__(self, guild: Guild) -> None:
        super().__init__(guild._state, VoiceState)
        self.guild = guild

    def __repr__(self) -> str:
        return f"<VoiceStateManager guild={self.guild.id} size={len(self.cache)}>"

    def add(self, data: Dict[str, Any], cache: bool = True) -> VoiceState:  # type: ignore[override]
        user_id = int(data["user_id"])

        existing = self.cache.get(user_id)
        if existing is not None:
            return existing._patch(data)

        entry = VoiceState(self._state, self.guild, data)
        if cache:
            self.cache[user_id] = entry

        return entry
