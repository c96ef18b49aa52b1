from __future__ import annotations

import inspect
import asyncio

from typing import (
    Optional,
    Any,
    Tuple,
    Callable,
    Dict,
    List,
    TYPE_CHECKING,
    Coroutine,
)

from .http import HTTPClient
from .state import State

if TYPE_CHECKING:
    from .managers import ChannelManager, UserManager
    from .objects import Channel, Guild, User

__all__ = ("Client",)


class Client:
    """
    A class used to communicate with the discord API, and to hold the cache fed by its gateway.

    Attributes:
        loop (Optional[asyncio.AbstractEventLoop]): The [asyncio.AbstractEventLoop][] which is being used.
        http (shoal.HTTPClient): The [HTTPClient](./http.md) to use for handling requests to the API.
        user (Optional[shoal.User]): The client's user, set once `READY` is received.

    """

    def __init__(
        self,
        token: str,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        api_version: int = 9,
    ):
        """
        Parameters:
            token (str): The clients token, used for authorization. This is required.
            loop (Optional[asyncio.AbstractEventLoop]): The loop to use. Defaults to the running loop.
            api_version (int): The version of the API to make requests to.

        """
        self.loop: Optional[asyncio.AbstractEventLoop] = loop
        self.http: HTTPClient = HTTPClient(token, api_version=api_version)
        self._state: State = State(self, self.loop)
        self.user: Optional[User] = None

        self.events: Dict[str, List[Callable[..., Any]]] = {}
        self.once_events: Dict[str, List[Callable[..., Any]]] = {}
        self.futures: Dict[str, List[Tuple[asyncio.Future, Callable[..., bool]]]] = {}

    @property
    def channels(self) -> ChannelManager:
        """
        The client-wide [ChannelManager][shoal.managers.ChannelManager].
        """
        return self._state.channels

    @property
    def users(self) -> UserManager:
        """
        The client-wide [UserManager][shoal.managers.UserManager].
        """
        return self._state.users

    @property
    def guilds(self) -> List[Guild]:
        return list(self._state._guilds.values())

    def add_listener(
        self,
        func: Callable[..., Coroutine],
        event_name: Optional[str],
    ) -> None:
        """
        Registers listener, basically connecting an event to a callback.

        Parameters:
            func (Callable[..., Coroutine]): The callback to register for an event.
            event_name (Optional[str]): The event to register, if None it will pass the decorated functions name.

        """
        name = event_name or func.__name__
        if not inspect.iscoroutinefunction(func):
            raise TypeError("Callback must be a coroutine")

        callbacks = self.events.setdefault(name, [])
        callbacks.append(func)

    def on(
        self, event_name: Optional[str] = None
    ) -> Callable[..., Callable[..., Coroutine]]:
        """
        A decorator that registers the decorated function to an event.

        Parameters:
            event_name (Optional[str]): The event to register.

        Note:
            The function being decorated must be a coroutine.
            If no event name is passed it defaults to the functions name.

        Returns:
            The decorated function after registering it as a listener.

        """

        def inner(func: Callable[..., Coroutine]) -> Callable[..., Coroutine]:
            self.add_listener(func, event_name)
            return func

        return inner

    def once(
        self, event_name: Optional[str] = None
    ) -> Callable[..., Callable[..., Coroutine]]:
        """
        A decorator that registers the decorated function to an event.
        Similar to [shoal.Client.on][] but only runs once.

        Parameters:
            event_name (Optional[str]): The event to register.

        Note:
            Functions decorated with [shoal.Client.once][] take precedence over the regular events.

        Returns:
            The decorated function after registering it as a listener.

        """

        def inner(func: Callable[..., Coroutine]) -> Callable[..., Coroutine]:
            name = event_name or func.__name__
            if not inspect.iscoroutinefunction(func):
                raise TypeError("Callback must be a coroutine")

            callbacks = self.once_events.setdefault(name, [])
            callbacks.append(func)
            return func

        return inner

    async def close(self) -> None:
        """
        Closes the HTTP session.
        """
        await self.http.close()

    def get_guild(self, id: int) -> Optional[Guild]:
        """
        Grabs a [shoal.Guild][] instance if cached.

        Parameters:
            id (int): The guild's ID.

        Returns:
            The [shoal.Guild][] instance related to the ID. Else None if not found

        """
        return self._state.get_guild(id)

    def get_channel(self, id: int) -> Optional[Channel]:
        """
        Grabs a [shoal.Channel][] instance if cached.

        Parameters:
            id (int): The channel's ID.

        Returns:
            The [shoal.Channel][] instance related to the ID. Else None if not found

        """
        return self._state.get_channel(id)

    def get_user(self, id: int) -> Optional[User]:
        """
        Grabs a [shoal.User][] instance if cached.

        Parameters:
            id (int): The user's ID.

        Returns:
            The [shoal.User][] instance related to the ID. Else None if not found

        """
        return self._state.get_user(id)

    async def wait_for(
        self, event: str, *, check: Optional[Callable[..., bool]] = None, timeout: Optional[float] = None
    ) -> Any:
        """
        Waits for an event to be dispatched that passes the check.

        Parameters:
            event (str): The event to wait for.
            check (Callable[..., bool]): A function that takes the same args as the event, and returns a bool.
            timeout (float): The time to wait before stopping.

        Returns:
            The payload of the event. Events with more than one argument return a tuple.

        """
        loop = self.loop or asyncio.get_running_loop()
        future = loop.create_future()
        futures = self.futures.setdefault(event, [])

        if check is None:
            check = lambda *args: True

        futures.append((future, check))
        return await asyncio.wait_for(future, timeout=timeout)
