from __future__ import annotations

from enum import IntFlag
from typing import Any, Iterable, List, Optional, Tuple, Union

__all__ = ("Flag", "UserFlags", "Permissions", "PermissionResolvable")

PermissionResolvable = Union["Permissions", int, str, Iterable[Any]]


class Flag(IntFlag):
    def items(self) -> List[Tuple[Optional[str], int]]:
        return [(flag.name, flag.value) for flag in self.__class__ if self & flag]

    def __iter__(self):
        return iter(self.items())


class UserFlags(Flag):
    NONE = 0
    EMPLOYEE = 1 << 0
    PARTNERED_SERVER_OWNER = 1 << 1
    HYPERSQUAD_EVENTS = 1 << 2
    BUG_HUNTER_LEVEL_1 = 1 << 3
    HOUSE_BRAVERY = 1 << 6
    HOUSE_BRILLIANCE = 1 << 7
    HOUSE_BALANCE = 1 << 8
    EARLY_SUPPORTER = 1 << 9
    TEAM_USER = 1 << 10
    BUG_HUNTER_LEVEL_2 = 1 << 14
    VERIFIED_BOT = 1 << 16
    VERIFIED_DEVELOPER = 1 << 17
    CERTIFIED_MODERATOR = 1 << 18


class Permissions(Flag):
    CREATE_INSTANT_INVITE = 1 << 0
    KICK_MEMBERS = 1 << 1
    BAN_MEMBERS = 1 << 2
    ADMINISTRATOR = 1 << 3
    MANAGE_CHANNELS = 1 << 4
    MANAGE_GUILD = 1 << 5
    ADD_REACTIONS = 1 << 6
    VIEW_AUDIT_LOG = 1 << 7
    PRIORITY_SPEAKER = 1 << 8
    STREAM = 1 << 9
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    SEND_TTS_MESSAGES = 1 << 12
    MANAGE_MESSAGES = 1 << 13
    EMBED_LINKS = 1 << 14
    ATTACH_FILES = 1 << 15
    READ_MESSAGE_HISTORY = 1 << 16
    MENTION_EVERYONE = 1 << 17
    USE_EXTERNAL_EMOJIS = 1 << 18
    VIEW_GUILD_INSIGHTS = 1 << 19
    CONNECT = 1 << 20
    SPEAK = 1 << 21
    MUTE_MEMBERS = 1 << 22
    DEAFEN_MEMBERS = 1 << 23
    MOVE_MEMBERS = 1 << 24
    USE_VAD = 1 << 25
    CHANGE_NICKNAME = 1 << 26
    MANAGE_NICKNAMES = 1 << 27
    MANAGE_ROLES = 1 << 28
    MANAGE_WEBHOOKS = 1 << 29
    MANAGE_EMOJIS_AND_STICKERS = 1 << 30
    USE_APPLICATION_COMMANDS = 1 << 31
    REQUEST_TO_SPEAK = 1 << 32
    MANAGE_THREADS = 1 << 34
    CREATE_PUBLIC_THREADS = 1 << 35
    CREATE_PRIVATE_THREADS = 1 << 36
    USE_EXTERNAL_STICKERS = 1 << 37
    SEND_MESSAGES_IN_THREADS = 1 << 38
    START_EMBEDDED_ACTIVITIES = 1 << 39

    @classmethod
    def resolve(cls, value: PermissionResolvable) -> Permissions:
        """
        Resolves a value into a [Permissions][] bitset.

        Parameters:
            value (PermissionResolvable): A Permissions instance, an int, a permission name
                such as `"SEND_MESSAGES"`, a numeric string, or an iterable of any of those.

        Returns:
            The resolved [Permissions][].

        Raises:
            ValueError: A permission name is unknown.
            TypeError: The value can't be resolved.

        """
        if isinstance(value, cls):
            return value

        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)

        if isinstance(value, str):
            if value.isascii() and value.isdigit():
                return cls(int(value))

            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f"Unknown permission {value!r}") from None

        if isinstance(value, Iterable):
            resolved = cls(0)
            for item in value:
                resolved |= cls.resolve(item)

            return resolved

        raise TypeError(f"Unable to resolve {value!r} to permissions")
