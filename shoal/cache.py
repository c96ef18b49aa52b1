from __future__ import annotations

import collections
from typing import Optional, TypeVar

__all__ = ("Cache",)

T = TypeVar("T")


class Cache(collections.OrderedDict[int, T]):
    """
    A class which acts as a cache for objects.

    Attributes:
        maxlen (Optional[int]): The max amount the cache can hold.
    """

    def __init__(self, maxlen: Optional[int] = None, *args, **kwargs):
        """
        Parameters:
            maxlen (Optional[int]): The max amount the cache can hold.
        """
        self.maxlen: Optional[int] = maxlen
        super().__init__(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<Cache maxlen={self.maxlen} size={len(self)}>"

    def __setitem__(self, key: int, value: T) -> None:
        super().__setitem__(key, value)

        if self.maxlen and len(self) > self.maxlen:
            self.popitem(False)
