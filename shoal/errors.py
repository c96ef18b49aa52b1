from __future__ import annotations

from typing import Any, Dict, Union

__all__ = (
    "ShoalException",
    "HTTPException",
    "Unauthorized",
    "BadRequest",
    "Forbidden",
    "NotFound",
    "EntityNotCached",
)


class ShoalException(Exception):
    pass


class HTTPException(ShoalException):
    def __init__(self, data: Union[Dict[str, Any], str], status: int = 0) -> None:
        self.data = data
        self.status = status
        self.message: str = ""
        self.code: int = 0

        if isinstance(data, dict):
            self.code = data.get("code", 0)
            self.message = data.get("message", self.message)
        else:
            self.code = 0
            self.message = data

        super().__init__(f"{status} (code: {self.code}) {self.message}")


class Unauthorized(HTTPException):
    pass


class BadRequest(HTTPException):
    pass


class Forbidden(HTTPException):
    pass


class NotFound(HTTPException):
    pass


class EntityNotCached(ShoalException, LookupError):
    """
    Raised when removing an entity which the manager doesn't hold.

    Attributes:
        id (int): The ID that was looked up.
    """

    def __init__(self, manager: str, id: Any) -> None:
        self.id = id
        super().__init__(f"{manager} has no cached entry for {id!r}")
