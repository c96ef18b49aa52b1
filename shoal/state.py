from __future__ import annotations

import asyncio
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Coroutine,
    Dict,
    Optional,
)

from .cache import Cache
from .managers import ChannelManager, UserManager
from .objects import Channel, Guild, Message, Role, User

if TYPE_CHECKING:
    from .client import Client
    from .http import HTTPClient

__all__ = ("State",)

logger = logging.getLogger(__name__)


class State:
    """
    A class which represents the connection state between the client and discord.

    Raw gateway events are fed to [State.parse][shoal.State.parse], which routes
    them to the matching `parse_*` method. Those keep the caches up to date through
    the managers, then dispatch the event to the client's listeners.

    Attributes:
        client (shoal.Client): The [shoal.Client](./client.md) instance being used.
        loop (Optional[asyncio.AbstractEventLoop]): The loop to schedule listeners on.
            The running loop is used if this is None.
        channels (shoal.managers.ChannelManager): The client-wide channel cache.
        users (shoal.managers.UserManager): The client-wide user cache.

    Danger:
        This class is used internally. **It is not meant to called directly**

    """

    def __init__(self, client: Client, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """
        Parameters:
            client (shoal.Client): The [Client](./client.md) being used.
            loop (Optional[asyncio.AbstractEventLoop]): The asyncio.AbstractEventLoop being used.

        """
        self.client = client
        self.loop = loop
        self._guilds = Cache[Guild]()

        self.channels = ChannelManager(self)
        self.users = UserManager(self)

    @property
    def http(self) -> HTTPClient:
        return self.client.http

    @property
    def user(self) -> Optional[User]:
        return self.client.user

    def _schedule(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        loop = self.loop or asyncio.get_running_loop()
        return loop.create_task(coro)

    def dispatch(self, event: str, *payload: Any) -> None:
        """
        Dispatches data to callbacks registered to events after parsing is finished.

        Parameters:
            event (str): The name of the event to dispatch to.
            *payload (Any): The data after parsing is finished.

        """
        if callbacks := self.client.once_events.pop(event, None):
            for callback in callbacks:
                self._schedule(callback(*payload))

            return

        futures = self.client.futures.get(event, [])
        for future, check in futures.copy():
            if future.done():
                futures.remove((future, check))
                continue

            if check(*payload):
                future.set_result(payload[0] if len(payload) == 1 else payload)
                futures.remove((future, check))

        for callback in self.client.events.get(event, []):
            self._schedule(callback(*payload))

    async def parse(self, event: str, data: Dict[str, Any]) -> None:
        """
        Routes a raw gateway event to its parser.

        Parameters:
            event (str): The name of the event, e.g `CHANNEL_CREATE`.
            data (Dict): The raw data.

        """
        parser = getattr(self, f"parse_{event.lower()}", None)
        if parser is None:
            logger.debug(f"Unhandled event: {event}")
            return

        await parser(data)

    async def parse_ready(self, data: Dict[str, Any]) -> None:
        """
        Parses the `READY` event. Caches the client's user and its unavailable guilds.

        Parameters:
            data (Dict): The raw data.

        """
        user = self.users.add(data["user"])
        self.client.user = user

        for guild in data.get("guilds", []):
            if int(guild["id"]) not in self._guilds:
                self.add_guild(guild)

        logger.info(f"CONNECTED: CLIENT ID: {user.id}")  # type: ignore
        self.dispatch("ready", user)

    async def parse_guild_create(self, data: Dict[str, Any]) -> None:
        """
        Parses `GUILD_CREATE` event. Creates a Guild then caches it, as well as dispatching it afterwards.

        Parameters:
            data (Dict): The raw data.

        """
        guild = self.add_guild(data)
        self.dispatch("guild_create", guild)

    async def parse_guild_update(self, data: Dict[str, Any]) -> None:
        """
        Parses `GUILD_UPDATE` event. Patches the cached Guild then dispatches it afterwards.

        Parameters:
            data (Dict): The raw data.

        """
        guild = self.get_guild(int(data["id"]))
        if not guild:
            return

        guild._patch(data)
        self.dispatch("guild_update", guild)

    async def parse_guild_delete(self, data: Dict[str, Any]) -> None:
        """
        Parses `GUILD_DELETE` event. Removes the Guild and its channels then dispatches it afterwards.

        Parameters:
            data (Dict): The raw data.

        """
        guild = self.get_guild(int(data["id"]))
        if not guild:
            return

        if data.get("unavailable"):
            guild._data["unavailable"] = True
            self.dispatch("guild_unavailable", guild)
            return

        self.remove_guild(guild)
        self.dispatch("guild_delete", guild)

    async def parse_guild_member_add(self, data: Dict[str, Any]) -> None:
        guild = self.get_guild(int(data["guild_id"]))
        if not guild:
            return

        member = guild._add_member(data)
        self.dispatch("guild_member_add", member)

    async def parse_guild_member_remove(self, data: Dict[str, Any]) -> None:
        guild = self.get_guild(int(data["guild_id"]))
        if not guild:
            return

        member = guild._remove_member(int(data["user"]["id"]))
        if member is not None:
            self.dispatch("guild_member_remove", member)

    async def parse_channel_create(self, data: Dict[str, Any]) -> None:
        """
        Parses `CHANNEL_CREATE` event. Creates a Channel then caches it, as well as dispatching it afterwards.

        Parameters:
            data (Dict): The raw data.

        """
        channel = self.channels.add(data)
        if channel is not None:
            self.dispatch("channel_create", channel)

    async def parse_channel_update(self, data: Dict[str, Any]) -> None:
        """
        Parses `CHANNEL_UPDATE` event. Dispatches `before` and `after`.

        Parameters:
            data (Dict): The raw data.

        """
        channel = self.channels.get(data["id"])
        if channel is None:
            self.channels.add(data)
            return

        before = channel._copy()
        self.channels.add(data)

        self.dispatch("channel_update", before, channel)

    async def parse_channel_delete(self, data: Dict[str, Any]) -> None:
        """
        Parses `CHANNEL_DELETE` event. Dispatches the deleted channel.

        Parameters:
            data (Dict): The raw data.

        """
        channel = self.channels.get(data["id"])
        if channel is None:
            return

        self.channels.remove(channel.id)
        self.dispatch("channel_delete", channel)

    async def parse_guild_role_create(self, data: Dict[str, Any]) -> None:
        """
        Parses the `GUILD_ROLE_CREATE` event.

        Parameters:
            data (Dict): The raw data.

        """
        self.handle_guild_role_create(data)

    async def parse_guild_role_update(self, data: Dict[str, Any]) -> None:
        """
        Parses the `GUILD_ROLE_UPDATE` event.

        Parameters:
            data (Dict): The raw data.

        """
        guild = self.get_guild(int(data["guild_id"]))
        if not guild:
            return

        role = guild.roles.get(data["role"]["id"])
        if role is None:
            return

        before = role._copy()
        guild.roles.add(data["role"])

        self.dispatch("guild_role_update", before, role)

    async def parse_guild_role_delete(self, data: Dict[str, Any]) -> None:
        """
        Parses the `GUILD_ROLE_DELETE` event.

        Parameters:
            data (Dict): The raw data.

        """
        guild = self.get_guild(int(data["guild_id"]))
        if not guild:
            return

        role = guild.roles.get(data["role_id"])
        if role is None:
            return

        guild.roles.remove(role.id)
        self.dispatch("guild_role_delete", role)

    async def parse_voice_state_update(self, data: Dict[str, Any]) -> None:
        """
        Parses `VOICE_STATE_UPDATE` event. Adds or patches the VoiceState, dropping it
        once the user leaves voice, then dispatches `before` and `after`.

        Parameters:
            data (Dict): The raw data.

        """
        guild_id = data.get("guild_id")
        guild = self.get_guild(int(guild_id)) if guild_id else None

        if not guild:
            return

        if member := data.get("member"):
            guild._add_member(member)

        cached = guild.voice_states.get(data["user_id"])
        before = cached._copy() if cached is not None else None

        after = guild.voice_states.add(data)
        if after.channel_id is None:
            guild.voice_states.remove(after.user_id)

        self.dispatch("voice_state_update", before, after)

    async def parse_message_create(self, data: Dict[str, Any]) -> None:
        """
        Parses `MESSAGE_CREATE` event. Caches the author, then dispatches the Message.

        Parameters:
            data (Dict): The raw data.

        """
        channel = self.channels.get(data["channel_id"])
        message = Message(self, data, channel)

        self.dispatch("message_create", message)

    async def parse_user_update(self, data: Dict[str, Any]) -> None:
        """
        Parses `USER_UPDATE` event.

        Parameters:
            data (Dict): The raw data.

        """
        user = self.users.add(data)
        self.dispatch("user_update", user)

    def handle_guild_role_create(self, data: Dict[str, Any], guild: Optional[Guild] = None) -> Optional[Role]:
        """
        Adds a newly created role to its guild's cache.

        The `guild_role_create` event is only dispatched if the role wasn't cached yet,
        so a role created through the API and then received from the gateway is only
        dispatched once.

        Parameters:
            data (Dict): A payload with the `guild_id` and the raw `role`.
            guild (Optional[shoal.Guild]): The guild, looked up from `guild_id` if not passed.

        Returns:
            The role, or None if the guild isn't cached.

        """
        if guild is None:
            guild = self.get_guild(int(data["guild_id"]))

        if guild is None:
            return None

        already = guild.roles.get(data["role"]["id"]) is not None
        role = guild.roles.add(data["role"])

        if not already:
            self.dispatch("guild_role_create", role)

        return role

    def add_guild(self, data: Dict[str, Any]) -> Guild:
        """
        Creates a guild then caches it, or patches the cached one.

        Parameters:
            data (Dict): The data of the guild.

        Returns:
            The [shoal.Guild](./guild.md) instance.

        """
        guild = self._guilds.get(int(data["id"]))
        if guild is not None:
            data.setdefault("unavailable", False)
            return guild._patch(data)

        guild = Guild(self, data)
        self._guilds[guild.id] = guild

        return guild

    def remove_guild(self, guild: Guild) -> None:
        """
        Removes a guild and every one of its channels from the cache.

        Parameters:
            guild (shoal.Guild): The guild to remove.

        """
        for channel in guild.channels:
            self.channels.remove(channel.id)

        self._guilds.pop(guild.id, None)

    def get_guild(self, guild_id: int) -> Optional[Guild]:
        """
        Grabs a guild from the cache.

        Parameters:
            guild_id (int): The ID of the guild.

        Returns:
            The [shoal.Guild](./guild.md) instance corresponding to the ID if found.

        """
        return self._guilds.get(guild_id)

    def get_channel(self, channel_id: int) -> Optional[Channel]:
        """
        Grabs a channel from the cache.

        Parameters:
            channel_id (int): The ID of the channel.

        Returns:
            The [shoal.Channel][] instance corresponding to the ID if found.

        """
        return self.channels.get(channel_id)

    def get_user(self, user_id: int) -> Optional[User]:
        """
        Grabs a user from the cache.

        Parameters:
            user_id (int): The ID of the user.

        Returns:
            The [shoal.User](./user.md) instance corresponding to the ID if found.

        """
        return self.users.get(user_id)
