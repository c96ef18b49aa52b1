from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Union

__all__ = ("Snowflake", "SnowflakeLike", "to_snowflake", "parse_snowflake")

SnowflakeLike = Union[int, str]


class Snowflake(Protocol):
    """
    A class that represents a Snowflake.

    Attributes:
        id (int): The Snowflake ID.
    """

    id: int


def to_snowflake(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if not value:
        return None

    return int(value)


def parse_snowflake(value: Any) -> Optional[int]:
    """
    Turns an int or a numeric string into a snowflake.

    Parameters:
        value (Any): The value to convert.

    Returns:
        The snowflake, or None if the value isn't one.

    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)

    return None
