from __future__ import annotations

import aiohttp

import logging

from typing import Any, ClassVar, Dict, List, Optional, Union

from .errors import BadRequest, Forbidden, HTTPException, NotFound, Unauthorized

__all__ = (
    "HTTPClient",
    "Route",
)

logger = logging.getLogger(__name__)

BASE: str = "https://discord.com/api/v{version}"


class Route:
    """A class representing an endpoint.

    Parameters
    ----------
    path: :class:`str`
        The path of the endpoint

    Attributes
    ----------
    path: :class:`str`
        The endpoint path.
    """

    def __init__(self, path: str) -> None:
        self.path: str = path

    def __repr__(self) -> str:
        return f"<Route path={self.path!r}>"

    def url(self, version: int) -> str:
        """The final url of the route."""
        return BASE.format(version=version) + self.path


class HTTPClient:
    """A class used to make requests to the API.

    Failed requests raise the matching :exc:`.HTTPException` and are never retried.

    Parameters
    ----------
    token: :class:`str`
        The token to use for authorization
    api_version: :class:`int`
        The version of the API to use

    Attributes
    ----------
    token: :class:`str`
        The token to use for authorization

    api_version: :class:`int`
        The version of the API being used

    session: :class:`aiohttp.ClientSession`
        The client session to use for making requests
    """

    ERRORS: ClassVar[Dict[int, Any]] = {
        400: BadRequest,
        401: Unauthorized,
        403: Forbidden,
        404: NotFound,
    }

    def __init__(self, token: str, *, api_version: int = 9) -> None:
        self.token: str = token
        self.api_version: int = api_version
        self.session: Optional[aiohttp.ClientSession] = None

    @staticmethod
    async def json_or_text(resp: aiohttp.ClientResponse) -> Union[dict, list, str]:
        """A method which returns a response's text or json.

        Parameters
        ----------
        resp: :class:`aiohttp.ClientResponse`
            The client response returned from a request.

        Returns
        -------
        Union[:class:`dict`, :class:`list`, :class:`str`]
            The data/text returned from :meth:`aiohttp.ClientResponse.json` or
            :meth:`aiohttp.ClientResponse.text`
        """
        try:
            return await resp.json()
        except aiohttp.ContentTypeError:
            return await resp.text()

    async def _create_session(self) -> aiohttp.ClientSession:
        """A method which creates the internal :class:`aiohttp.ClientSession`"""
        return aiohttp.ClientSession()

    async def close(self) -> None:
        """A method which closes the internal :class:`aiohttp.ClientSession`"""
        if self.session is not None and not self.session.closed:
            await self.session.close()

    async def request(self, method: str, route: Route, **kwargs) -> Any:
        """A method which is used to make requests to the API.

        Parameters
        ----------
        method: :class:`str`
            The method to request with. E.g `POST` and `GET`

        route: :class:`.Route`
            The route to make a request from

        **kwargs: Any
            Extra kwargs to pass when making the request. E.g `json = ...`.
            ``reason`` is sent as the audit log reason.

        Raises
        ------
        :exc:`.HTTPException`
            Something went wrong while making the request

        Returns
        -------
        Any
            The return data of the request
        """
        if self.session is None or self.session.closed:
            self.session = await self._create_session()

        headers: Dict = {"Authorization": f"Bot {self.token}"}
        if reason := kwargs.pop("reason", None):
            headers["X-Audit-Log-Reason"] = reason

        url = route.url(self.api_version)

        async with self.session.request(method, url, headers=headers, **kwargs) as resp:
            data = await self.json_or_text(resp)
            logger.debug(f"{method} {url} returned {resp.status}")

            if 300 > resp.status >= 200:
                return data

            error = self.ERRORS.get(resp.status, HTTPException)
            raise error(data, resp.status)

    async def get_channel(self, channel_id: int) -> Dict[str, Any]:
        """A method which makes an API call to fetch a channel.

        Parameters
        ----------
        channel_id: :class:`int`
            The id of the channel to fetch

        Raises
        ------
        :exc:`.Forbidden`
            Your client doesn't have the permissions to
            fetch this channel.

        :exc:`.NotFound`
            The ID passed isn't valid.

        Returns
        -------
        :class:`dict`
            A dict representing the fetched channel.
        """
        return await self.request(
            "GET", Route(f"/channels/{channel_id}")
        )

    async def get_user(self, user_id: int) -> Dict[str, Any]:
        """
        Makes an API call to get a user.

        Parameters:
            user_id (int): The ID of the user.

        Returns:
            The data returned from the API.

        """
        return await self.request("GET", Route(f"/users/{user_id}"))

    async def get_guild_roles(self, guild_id: int) -> List[Dict[str, Any]]:
        """
        Makes an API call to get the roles of a guild.

        Parameters:
            guild_id (int): The ID of the guild.

        Returns:
            The data returned from the API.

        """
        return await self.request(
            "GET", Route(f"/guilds/{guild_id}/roles")
        )

    async def create_guild_role(
        self,
        guild_id: int,
        data: Dict[str, Any],
        *,
        reason: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Makes an API call to create a role in a guild.

        Parameters:
            guild_id (int): The ID of the guild.
            data (Dict): The role's data. E.g `name`, `color`, `permissions`, `hoist`, `mentionable`.
            reason (Optional[str]): The reason shown in the audit log.

        Returns:
            The data returned from the API.

        """
        return await self.request(
            "POST",
            Route(f"/guilds/{guild_id}/roles"),
            json=data,
            reason=reason,
        )

    async def modify_guild_role_positions(
        self,
        guild_id: int,
        positions: List[Dict[str, Any]],
        *,
        reason: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Makes an API call to move roles in a guild.

        Parameters:
            guild_id (int): The ID of the guild.
            positions (List[Dict]): A list of `{"id": ..., "position": ...}` payloads.
            reason (Optional[str]): The reason shown in the audit log.

        Returns:
            Every role of the guild after the change.

        """
        return await self.request(
            "PATCH",
            Route(f"/guilds/{guild_id}/roles"),
            json=positions,
            reason=reason,
        )
