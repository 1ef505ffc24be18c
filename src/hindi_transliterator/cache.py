from __future__ import annotations

import threading
from collections import OrderedDict
from contextlib import nullcontext
from typing import ContextManager, NamedTuple, Optional

from .errors import InvalidConfigError

DEFAULT_CACHE_CAPACITY = 200


class CacheStats(NamedTuple):
    size: int
    capacity: int


class LRUCache:
    """
    Bounded least-recently-used memo of whole-word transliterations.

    A `get` hit promotes the entry, so a read is a write to the recency order. When the
    cache is shared across threads, pass a lock (or use `LRUCache.thread_safe`): every
    operation then runs under it.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CACHE_CAPACITY,
        *,
        lock: Optional[ContextManager[object]] = None,
    ) -> None:
        capacity = int(capacity)
        if capacity < 1:
            raise InvalidConfigError("cache capacity must be >= 1")
        self._capacity = capacity
        self._data: OrderedDict[str, str] = OrderedDict()
        self._lock: ContextManager[object] = lock if lock is not None else nullcontext()

    @classmethod
    def thread_safe(cls, capacity: int = DEFAULT_CACHE_CAPACITY) -> "LRUCache":
        return cls(capacity, lock=threading.Lock())

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._data.get(key)
            if value is not None:
                self._data.move_to_end(key)
            return value

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            while len(self._data) > self._capacity:
                self._data.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(size=len(self._data), capacity=self._capacity)

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        # Membership does not count as a use.
        with self._lock:
            return key in self._data
