from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Union

from .base import BaseManager
from ..objects.channel import Channel, create_channel
from ..utils import SnowflakeLike, parse_snowflake

if TYPE_CHECKING:
    from ..objects import Guild
    from ..state import State

__all__ = ("ChannelManager", "GuildChannelManager", "ChannelResolvable")

logger = logging.getLogger(__name__)

ChannelResolvable = Union[Channel, SnowflakeLike]


class ChannelManager(BaseManager[Channel]):
    """
    The client-wide channel cache.

    This is the only place channels are created or destroyed. A guild's
    [GuildChannelManager][shoal.managers.GuildChannelManager] only keeps the IDs
    of the channels which belong to it.
    """

    def __init__(self, state: State) -> None:
        super().__init__(state, Channel)

    def add(  # type: ignore[override]
        self,
        data: Dict[str, Any],
        guild: Optional[Guild] = None,
        cache: bool = True,
    ) -> Optional[Channel]:
        """
        Adds a channel to the cache, patching it if it's already cached.

        Parameters:
            data (Dict): The raw data of the channel.
            guild (Optional[shoal.Guild]): The guild the channel belongs to.
            cache (bool): Whether to cache the channel.

        Returns:
            The channel, or None if its type is unknown or its guild couldn't be found.

        """
        existing = self.cache.get(int(data["id"]))
        if existing is not None:
            if cache:
                existing._patch(data)

            if guild is not None:
                guild.channels.add(existing)

            return existing

        channel = create_channel(self._state, data, guild)
        if channel is None:
            message = f"Failed to find guild, or unknown type for channel {data['id']} {data.get('type')}"

            logger.debug(message)
            self._state.dispatch("debug", message)
            return None

        if cache:
            self.cache[channel.id] = channel

            if channel.guild is not None:
                channel.guild.channels.add(channel)

        return channel

    def _unlink(self, entry: Channel) -> None:
        if entry.guild is not None:
            entry.guild.channels.discard(entry.id)

    async def fetch(self, id: Union[int, str], cache: bool = True) -> Optional[Channel]:
        """
        Fetches a channel, from the cache if it's fully cached, otherwise from the API.

        Parameters:
            id (Union[int, str]): The ID of the channel.
            cache (bool): Whether to cache the channel if it isn't already.

        Returns:
            The [shoal.Channel][] instance.

        Raises:
            shoal.HTTPException: The request failed.

        """
        existing = self.get(id)
        if existing is not None and not existing.partial:
            return existing

        data = await self._state.http.get_channel(int(id))
        return self.add(data, None, cache)


class GuildChannelManager:
    """
    The channels of a guild.

    This only stores channel IDs. The channel objects are looked up in the
    client's [ChannelManager][shoal.managers.ChannelManager], which owns them.

    Attributes:
        guild (shoal.Guild): The guild the channels belong to.
    """

    def __init__(self, guild: Guild) -> None:
        self.guild = guild
        self._ids: Dict[int, None] = {}

    def __repr__(self) -> str:
        return f"<GuildChannelManager guild={self.guild.id} size={len(self)}>"

    @property
    def _store(self) -> ChannelManager:
        return self.guild._state.channels

    @property
    def cache(self) -> Dict[int, Channel]:
        """
        A mapping of the guild's channels which are held by the client's channel cache.
        """
        store = self._store.cache
        return {id: store[id] for id in self._ids if id in store}

    def __len__(self) -> int:
        return len(self.cache)

    def __iter__(self) -> Iterator[Channel]:
        return iter(list(self.cache.values()))

    def __contains__(self, ref: Any) -> bool:
        id = self.resolve_id(ref)
        return id is not None and id in self.cache

    def add(self, channel: Channel) -> Channel:
        self._ids[channel.id] = None
        return channel

    def discard(self, id: int) -> None:
        self._ids.pop(id, None)

    def get(self, id: Any) -> Optional[Channel]:
        key = parse_snowflake(id)
        if key is None or key not in self._ids:
            return None

        return self._store.cache.get(key)

    def resolve(self, ref: Any) -> Optional[Channel]:
        if isinstance(ref, Channel):
            return ref

        return self.get(ref)

    def resolve_id(self, ref: Any) -> Optional[int]:
        if isinstance(ref, Channel):
            return ref.id

        return parse_snowflake(ref)
