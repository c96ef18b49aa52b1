from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    List,
    Optional,
    Type,
)

from .enums import ChannelType
from ..utils import to_snowflake

if TYPE_CHECKING:
    from ..state import State
    from .guild import Guild
    from .user import User
    from .voice_state import VoiceState

__all__ = (
    "Channel",
    "GuildChannel",
    "TextChannel",
    "NewsChannel",
    "VoiceChannel",
    "StageChannel",
    "CategoryChannel",
    "StoreChannel",
    "DMChannel",
    "CHANNEL_MAPPING",
    "create_channel",
)


class Channel:
    """
    A class representing a discord channel.
    """

    def __init__(self, state: State, data: Dict[str, Any], guild: Optional[Guild] = None) -> None:
        """
        Creates a new Channel from the given data.

        Parameters:
            state (shoal.State): The [State](./state.md) of the client.
            data (dict): The data to create the channel from.
            guild (Optional[shoal.Guild]): The guild the channel belongs to.
        """
        self._state = state
        self._data = data
        self._guild = guild

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"<{name} id={self.id} type={self.type!r}>"

    def _patch(self, data: Dict[str, Any]) -> Channel:
        """
        Merges new data into the channel, keeping the same instance.
        """
        self._data.update(data)
        return self

    def _copy(self) -> Channel:
        return self.__class__(self._state, self._data.copy(), self._guild)

    async def fetch(self) -> Channel:
        """
        Fetches the channel from the API if it is partial.
        """
        return await self._state.channels.fetch(self.id)

    @property
    def guild(self) -> Optional[Guild]:
        """
        A [shoal.Guild](./guild.md) instance which the channel belongs to.
        """
        return self._guild

    @property
    def id(self) -> int:
        """
        The channels id.
        """
        return int(self._data["id"])

    @property
    def type(self) -> Optional[ChannelType]:
        """
        The type of the channel.
        """
        if "type" not in self._data:
            return None

        return ChannelType(int(self._data["type"]))

    @property
    def partial(self) -> bool:
        """
        Whether the channel was created without its full data.
        """
        return "type" not in self._data

    @property
    def mention(self) -> str:
        return f"<#{self.id}>"


class GuildChannel(Channel):
    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"<{name} name={self.name!r} id={self.id} position={self.position} type={self.type!r}>"

    @property
    def guild(self) -> Guild:  # type: ignore
        return self._guild  # type: ignore

    @property
    def name(self) -> str:
        """
        The channels name.
        """
        return self._data.get("name", "")

    @property
    def position(self) -> int:
        """
        The position of the channel.
        """
        return self._data.get("position", 0)

    @property
    def nsfw(self) -> bool:
        """
        Whether or not the channel is marked as NSFW.
        """
        return self._data.get("nsfw", False)

    @property
    def parent_id(self) -> Optional[int]:
        return to_snowflake(self._data, "parent_id")

    @property
    def parent(self) -> Optional[CategoryChannel]:
        """
        The category the channel is in, if it is cached.
        """
        if self.parent_id is None:
            return None

        return self.guild.channels.get(self.parent_id)  # type: ignore


class TextChannel(GuildChannel):
    @property
    def topic(self) -> Optional[str]:
        return self._data.get("topic")

    @property
    def last_message_id(self) -> Optional[int]:
        return to_snowflake(self._data, "last_message_id")

    @property
    def rate_limit_per_user(self) -> int:
        return self._data.get("rate_limit_per_user", 0)


class NewsChannel(TextChannel):
    pass


class StoreChannel(GuildChannel):
    pass


class VoiceChannel(GuildChannel):
    @property
    def user_limit(self) -> int:
        return self._data.get("user_limit", 0)

    @property
    def bitrate(self) -> int:
        return self._data.get("bitrate", 64000)

    @property
    def rtc_region(self) -> Optional[str]:
        return self._data.get("rtc_region")

    @property
    def voice_states(self) -> List[VoiceState]:
        """
        The cached voice states of users connected to this channel.
        """
        return [state for state in self.guild.voice_states if state.channel_id == self.id]


class StageChannel(VoiceChannel):
    @property
    def topic(self) -> Optional[str]:
        return self._data.get("topic")


class CategoryChannel(GuildChannel):
    @property
    def channels(self) -> List[GuildChannel]:
        """
        The cached channels which are in this category.
        """
        return [channel for channel in self.guild.channels if getattr(channel, "parent_id", None) == self.id]


class DMChannel(Channel):
    """
    Represents a direct message channel. The recipient is cached in the client's
    [UserManager][shoal.managers.UserManager].
    """

    def __init__(self, state: State, data: Dict[str, Any], guild: Optional[Guild] = None) -> None:
        super().__init__(state, data, None)
        self.recipient: Optional[User] = None

        if recipients := data.get("recipients"):
            self.recipient = state.users.add(recipients[0])

    def __repr__(self) -> str:
        return f"<DMChannel id={self.id} recipient={self.recipient!r}>"

    def _patch(self, data: Dict[str, Any]) -> DMChannel:
        super()._patch(data)
        if recipients := data.get("recipients"):
            self.recipient = self._state.users.add(recipients[0])

        return self

    @property
    def last_message_id(self) -> Optional[int]:
        return to_snowflake(self._data, "last_message_id")


CHANNEL_MAPPING: Dict[ChannelType, Type[Channel]] = {
    ChannelType.TEXT: TextChannel,
    ChannelType.DM: DMChannel,
    ChannelType.VOICE: VoiceChannel,
    ChannelType.CATEGORY: CategoryChannel,
    ChannelType.NEWS: NewsChannel,
    ChannelType.STORE: StoreChannel,
    ChannelType.STAGE_VOICE: StageChannel,
}


def create_channel(state: State, data: Dict[str, Any], guild: Optional[Guild] = None) -> Optional[Channel]:
    """
    Creates the right Channel subclass for the given data.

    Parameters:
        state (shoal.State): The state of the client.
        data (Dict): The data of the channel.
        guild (Optional[shoal.Guild]): The guild of the channel. Looked up from `guild_id` if not passed.

    Returns:
        The created channel, or None if the channel type is unknown or the guild
        of a guild channel couldn't be found.

    """
    try:
        type = ChannelType(int(data["type"]))
    except (KeyError, ValueError):
        return None

    cls = CHANNEL_MAPPING.get(type)
    if cls is None:
        return None

    if not issubclass(cls, GuildChannel):
        return cls(state, data)

    if guild is None:
        guild_id = to_snowflake(data, "guild_id")
        guild = state.get_guild(guild_id) if guild_id is not None else None

    if guild is None:
        return None

    return cls(state, data, guild)
