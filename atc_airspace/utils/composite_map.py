"""
Order-preserving map keyed by tuples of scalars.

Used where an identity has several parts, e.g. approaches identified by
(runway, beacon), while keeping declaration order for deterministic output.
"""

from typing import Dict, Hashable, Iterable, Iterator, MutableMapping, Optional, Tuple, TypeVar

V = TypeVar('V')
Key = Tuple[Hashable, ...]


class CompositeMap(MutableMapping[Key, V]):
    """
    A dict-like map whose keys are tuples of scalars.

    Lists are accepted as keys and stored as tuples, so ``m[["27L", "OCK"]]``
    and ``m[("27L", "OCK")]`` address the same entry.

    Example:
        >>> approaches = CompositeMap()
        >>> approaches["27L", "OCK"] = ["route1"]
        >>> ("27L", "OCK") in approaches
        True
    """

    def __init__(self, entries: Optional[Iterable[Tuple[Iterable[Hashable], V]]] = None):
        self._map: Dict[Key, V] = {}
        if entries is not None:
            for key, value in entries:
                self[key] = value

    @staticmethod
    def _encode(key: Iterable[Hashable]) -> Key:
        if isinstance(key, (str, bytes)):
            raise TypeError(f"CompositeMap keys must be sequences of scalars, got {key!r}")
        return tuple(key)

    def __getitem__(self, key: Iterable[Hashable]) -> V:
        return self._map[self._encode(key)]

    def __setitem__(self, key: Iterable[Hashable], value: V) -> None:
        self._map[self._encode(key)] = value

    def __delitem__(self, key: Iterable[Hashable]) -> None:
        del self._map[self._encode(key)]

    def __contains__(self, key) -> bool:
        try:
            return self._encode(key) in self._map
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Key]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._map.items())!r})"
