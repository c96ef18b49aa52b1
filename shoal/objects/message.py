from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..state import State
    from .channel import Channel
    from .guild import Guild
    from .user import User

__all__ = ("Message",)


class Message:
    """
    Represents a message.

    Attributes:
        author (shoal.User): The author of the message. Webhook authors are not cached.
    """

    def __init__(self, state: State, data: Dict[str, Any], channel: Optional[Channel]) -> None:
        """
        Creates a Message object.

        Parameters:
            state (State): The [State](./state.md) of the client.
            data (Dict): The data of the message.
            channel (Optional[Channel]): The [Channel](./channel.md) the message was sent in.
        """
        self._channel = channel
        self._state = state
        self._data = data

        self.author: User = state.users.add(data["author"], cache="webhook_id" not in data)  # type: ignore

    def __repr__(self) -> str:
        return f"<Message id={self.id} author={self.author!r}>"

    @property
    def id(self) -> int:
        return int(self._data["id"])

    @property
    def channel_id(self) -> int:
        return int(self._data["channel_id"])

    @property
    def channel(self) -> Optional[Channel]:
        return self._channel

    @property
    def guild(self) -> Optional[Guild]:
        return getattr(self._channel, "guild", None)

    @property
    def content(self) -> str:
        return self._data.get("content", "")

    @property
    def webhook_id(self) -> Optional[int]:
        webhook_id = self._data.get("webhook_id")
        return int(webhook_id) if webhook_id else None
