from __future__ import annotations

import typing

from .flags import Permissions

if typing.TYPE_CHECKING:
    from .guild import Guild
    from ..state import State

__all__ = ("Role",)


class Role:
    def __init__(self, state: State, data: typing.Dict[str, typing.Any], guild: Guild) -> None:
        self._state = state
        self._data = data
        self._guild = guild

    def __repr__(self) -> str:
        return f"<Role id={self.id} name={self.name!r} position={self.position}>"

    def _patch(self, data: typing.Dict[str, typing.Any]) -> Role:
        self._data.update(data)
        return self

    def _copy(self) -> Role:
        return self.__class__(self._state, self._data.copy(), self._guild)

    @staticmethod
    def compare_positions(first: Role, second: Role) -> int:
        """
        Compares the positions of two roles.

        A higher position ranks higher. When the positions are equal the role with
        the lower ID, the older one, ranks higher.

        Returns:
            A positive number if `first` ranks above `second`, a negative number if it
            ranks below, and `0` if they are the same role.

        """
        if first.position == second.position:
            return second.id - first.id

        return first.position - second.position

    def compare_position_to(self, other: Role) -> int:
        return self.compare_positions(self, other)

    async def edit_position(self, position: int, *, reason: typing.Optional[str] = None) -> Role:
        """
        Moves the role to another position.

        Every role payload the API answers with is routed through the guild's role manager,
        so the other roles whose position shifted are updated as well.

        Parameters:
            position (int): The new position of the role.
            reason (Optional[str]): The reason shown in the audit log.

        Returns:
            The role after being moved.

        """
        data = await self._state.http.modify_guild_role_positions(
            self.guild.id, [{"id": str(self.id), "position": position}], reason=reason
        )

        for role in data:
            self.guild.roles.add(role)

        return self

    @property
    def partial(self) -> bool:
        return False

    @property
    def guild(self) -> Guild:
        return self._guild

    @property
    def id(self) -> int:
        return int(self._data['id'])

    @property
    def name(self) -> str:
        return self._data.get('name', '')

    @property
    def color(self) -> int:
        return int(self._data.get('color', 0))

    @property
    def hoist(self) -> bool:
        return self._data.get('hoist', False)

    @property
    def position(self) -> int:
        return int(self._data.get('position', 0))

    @property
    def permissions(self) -> Permissions:
        return Permissions(int(self._data.get('permissions', 0)))

    @property
    def managed(self) -> bool:
        return self._data.get('managed', False)

    @property
    def mentionable(self) -> bool:
        return self._data.get('mentionable', False)

    @property
    def is_default(self) -> bool:
        return self.id == self.guild.id

    @property
    def mention(self) -> str:
        if self.is_default:
            return '@everyone'

        return f'<@&{self.id}>'
