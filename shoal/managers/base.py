from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Generic,
    Iterator,
    Optional,
    Sequence,
    Type,
    TypeVar,
)

from ..cache import Cache
from ..errors import EntityNotCached
from ..utils import Snowflake, parse_snowflake

if TYPE_CHECKING:
    from ..state import State

__all__ = ("BaseManager",)

T = TypeVar("T", bound=Snowflake)


class BaseManager(Generic[T]):
    """
    Holds the cache of one kind of entity and resolves references to it.

    Every ID present in the cache maps to exactly one live instance. Adding data for
    a cached ID patches that instance in place instead of replacing it, so anything
    holding a reference to it sees the update.

    Attributes:
        holds (Type): The class of the entities held by the manager.
        cache (shoal.Cache): The cached entities, keyed by ID.
    """

    def __init__(self, state: State, holds: Type[T], cache: Optional[Cache[T]] = None) -> None:
        """
        Parameters:
            state (shoal.State): The state of the client.
            holds (Type): The class of the entities held by the manager.
            cache (Optional[shoal.Cache]): The cache to use. A new one is created if not passed.
        """
        self._state = state
        self.holds: Type[T] = holds
        self.cache: Cache[T] = cache if cache is not None else Cache[T]()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} size={len(self.cache)}>"

    def __len__(self) -> int:
        return len(self.cache)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self.cache.values()))

    def __contains__(self, ref: Any) -> bool:
        id = self.resolve_id(ref)
        return id is not None and id in self.cache

    def _construct(self, data: Dict[str, Any], *extras: Any) -> Optional[T]:
        return self.holds(self._state, data, *extras)  # type: ignore

    def _unlink(self, entry: T) -> None:
        """
        Removes an entry from the indexes of its owner. Called right before the entry
        leaves the cache.
        """

    def get(self, id: Any) -> Optional[T]:
        """
        Grabs an entity from the cache.

        Parameters:
            id (Union[int, str]): The ID of the entity.

        Returns:
            The cached entity, or None if it isn't cached.

        """
        key = parse_snowflake(id)
        if key is None:
            return None

        return self.cache.get(key)

    def add(
        self,
        data: Dict[str, Any],
        cache: bool = True,
        *,
        id: Any = None,
        extras: Sequence[Any] = (),
    ) -> Optional[T]:
        """
        Adds data to the cache.

        If an entity with the same ID is cached, it is patched with the data and returned.
        Otherwise a new entity is created, and cached if `cache` is True.

        Parameters:
            data (Dict): The raw data of the entity.
            cache (bool): Whether to cache a new entity, and whether to patch an existing one.
            id (Optional[Union[int, str]]): The key to use instead of `data["id"]`.
            extras (Sequence[Any]): Extra arguments passed to the entity's constructor.

        Returns:
            The cached or created entity, or None if the data can't be represented.

        """
        key = parse_snowflake(id if id is not None else data["id"])

        existing = self.cache.get(key)  # type: ignore
        if existing is not None:
            if cache and hasattr(existing, "_patch"):
                existing._patch(data)  # type: ignore

            return existing

        entry = self._construct(data, *extras)
        if entry is None:
            return None

        if cache:
            self.cache[key] = entry  # type: ignore

        return entry

    def remove(self, id: Any) -> None:
        """
        Removes an entity from the cache.

        Parameters:
            id (Union[int, str]): The ID of the entity.

        Raises:
            shoal.EntityNotCached: The entity isn't cached.

        """
        key = parse_snowflake(id)
        entry = self.cache.get(key) if key is not None else None  # type: ignore

        if entry is None:
            raise EntityNotCached(self.__class__.__name__, id)

        self._unlink(entry)
        del self.cache[key]  # type: ignore

    def resolve(self, ref: Any) -> Optional[T]:
        """
        Resolves an entity or an ID to a cached entity. Never makes a request.

        Parameters:
            ref (Any): The entity or its ID.

        Returns:
            The entity, or None if it couldn't be resolved.

        """
        if isinstance(ref, self.holds):
            return ref

        return self.get(ref)

    def resolve_id(self, ref: Any) -> Optional[int]:
        """
        Resolves an entity or an ID to an ID. Never makes a request.

        Parameters:
            ref (Any): The entity or its ID.

        Returns:
            The ID, or None if it couldn't be resolved.

        """
        if isinstance(ref, self.holds):
            return ref.id  # type: ignore

        return parse_snowflake(ref)
