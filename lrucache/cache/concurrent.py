"""
Thread-safe LRU cache wrapper.

Every get() also reorders the recency list, so reads and writes both
mutate shared state. A single lock around the whole cache is held for
the full duration of each call.
"""

import threading
from typing import Any, Dict, Hashable, List, Optional

from .lru import Lookup, LRUCache


class SynchronizedLRUCache:
    """
    LRUCache guarded by one mutual-exclusion lock.

    Usage:
        cache = SynchronizedLRUCache(capacity=100)
        cache.put("key1", "value1")  # safe from any thread
    """

    def __init__(self, capacity: int = None):
        self._cache = LRUCache(capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._cache.capacity

    def get(self, key: Hashable) -> Lookup:
        with self._lock:
            return self._cache.get(key)

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._cache.put(key, value)

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            return self._cache.delete(key)

    def contains(self, key: Hashable) -> bool:
        with self._lock:
            return self._cache.contains(key)

    def peek(self, key: Hashable) -> Lookup:
        with self._lock:
            return self._cache.peek(key)

    def lru_key(self) -> Optional[Hashable]:
        with self._lock:
            return self._cache.lru_key()

    def mru_key(self) -> Optional[Hashable]:
        with self._lock:
            return self._cache.mru_key()

    def keys(self) -> List[Hashable]:
        with self._lock:
            return self._cache.keys()

    def size(self) -> int:
        with self._lock:
            return self._cache.size()

    def is_full(self) -> bool:
        with self._lock:
            return self._cache.is_full()

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return self._cache.get_stats()

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"SynchronizedLRUCache(capacity={self.capacity}, size={len(self)})"
