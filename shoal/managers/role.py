from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from .base import BaseManager
from ..objects.flags import Permissions
from ..objects.role import Role
from ..utils import SnowflakeLike, resolve_color

if TYPE_CHECKING:
    from ..objects import Guild

__all__ = ("RoleManager", "RoleResolvable")

RoleResolvable = Union[Role, SnowflakeLike]


class RoleManager(BaseManager[Role]):
    """
    The roles of a guild.

    Attributes:
        guild (shoal.Guild): The guild the roles belong to.
    """

    def __init__(self, guild: Guild) -> None:
        super().__init__(guild._state, Role)
        self.guild = guild

    def __repr__(self) -> str:
        return f"<RoleManager guild={self.guild.id} size={len(self.cache)}>"

    def add(self, data: Dict[str, Any], cache: bool = True) -> Optional[Role]:  # type: ignore[override]
        return super().add(data, cache, extras=(self.guild,))

    async def fetch(self, id: Optional[Union[int, str]] = None, cache: bool = True) -> Union[Role, RoleManager, None]:
        """
        Fetches a role, or every role of the guild.

        The API can't fetch a single role, so a role that isn't cached is looked up
        after fetching all of them.

        Parameters:
            id (Optional[Union[int, str]]): The ID of the role. If not passed, every role is fetched.
            cache (bool): Whether to cache the new roles.

        Returns:
            The role if an ID was passed, None if that role doesn't exist, or the manager
            itself if no ID was passed.

        Raises:
            shoal.HTTPException: The request failed.

        """
        if id is not None:
            existing = self.get(id)
            if existing is not None:
                return existing

        data = await self._state.http.get_guild_roles(self.guild.id)
        for role in data:
            self.add(role, cache)

        if id is not None:
            return self.get(id)

        return self

    async def create(self, *, data: Optional[Dict[str, Any]] = None, reason: Optional[str] = None) -> Role:
        """
        Creates a new role in the guild.

        Parameters:
            data (Optional[Dict]): The data of the role. `color` may be anything
                [shoal.utils.resolve_color][] accepts, and `permissions` anything
                [shoal.Permissions.resolve][] accepts. If `position` is passed, the
                role is moved there after being created.
            reason (Optional[str]): The reason shown in the audit log.

        Returns:
            The created role.

        Raises:
            shoal.HTTPException: The request failed.

        """
        data = dict(data or {})

        if data.get("color") is not None:
            data["color"] = resolve_color(data["color"])

        if data.get("permissions") is not None:
            data["permissions"] = str(Permissions.resolve(data["permissions"]).value)

        position = data.pop("position", None)

        payload = await self._state.http.create_guild_role(self.guild.id, data, reason=reason)
        role = self._state.handle_guild_role_create(
            {"guild_id": str(self.guild.id), "role": payload}, self.guild
        )

        if position:
            return await role.edit_position(position, reason=reason)

        return role

    @property
    def everyone(self) -> Optional[Role]:
        """
        The `@everyone` role of the guild. It shares its ID with the guild.
        """
        return self.cache.get(self.guild.id)

    @property
    def highest(self) -> Optional[Role]:
        """
        The highest cached role, or None if no roles are cached.
        """
        return max(self.cache.values(), key=cmp_to_key(Role.compare_positions), default=None)
