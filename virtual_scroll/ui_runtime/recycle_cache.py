"""Bounded least-recently-used store of retired cell views."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class RecycleCache(Generic[K, V]):
    """LRU map that hands evicted entries to a dispose callback.

    "Use" means being put into or taken out of the cache. Entries leaving by
    eviction or `clear` are disposed exactly once; entries leaving through
    `take` are returned to the caller undisposed.
    """

    def __init__(self, capacity: int, on_evict: Callable[[K, V], None]) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = int(capacity)
        self._on_evict = on_evict
        self._entries: OrderedDict[K, V] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def keys(self) -> Iterator[K]:
        """Iterate keys from least to most recently used."""
        return iter(tuple(self._entries))

    def put(self, key: K, value: V) -> None:
        if key in self._entries:
            raise KeyError(f"key already cached: {key!r}")
        if self._capacity == 0:
            self._on_evict(key, value)
            return
        while len(self._entries) >= self._capacity:
            self._evict_oldest()
        self._entries[key] = value

    def take(self, key: K) -> V | None:
        """Remove and return the entry for `key`; a miss returns `None`."""
        return self._entries.pop(key, None)

    def set_capacity(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = int(capacity)
        while len(self._entries) > self._capacity:
            self._evict_oldest()

    def clear(self) -> None:
        drained = list(self._entries.items())
        self._entries.clear()
        for key, value in drained:
            self._on_evict(key, value)

    def _evict_oldest(self) -> None:
        key, value = self._entries.popitem(last=False)
        self._on_evict(key, value)
