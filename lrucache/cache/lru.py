"""
LRU Cache Module

This module implements the Least Recently Used (LRU) cache facade.

LRU Concept:
- Most recently accessed entries sit at the HEAD of the recency list
- Least recently accessed entries sit at the TAIL
- On access (get/put), move the entry to the head
- On eviction, remove from the tail

The facade coordinates two structures: a KeyIndex for O(1) lookup and a
RecencyList for O(1) reordering. A key is in the index if and only if
its entry is linked in the list.
"""

import logging
from typing import Any, Dict, Hashable, List, NamedTuple, Optional

from ..config.settings import settings
from .index import KeyIndex
from .recency import RecencyList

logger = logging.getLogger(__name__)


class InvalidCapacityError(ValueError):
    """Raised when a cache is constructed with a non-positive capacity."""


class Lookup(NamedTuple):
    """
    Result of a cache read.

    Attributes:
        value: The stored value (None on a miss)
        found: True if the key was present
    """
    value: Any
    found: bool


MISS = Lookup(None, False)


class LRUCache:
    """
    Fixed-capacity Least Recently Used cache.

    Every public read and write is O(1) average time. When a new key
    would push the cache past its capacity, exactly one entry, the
    least recently used one, is evicted.

    Usage:
        cache = LRUCache(capacity=100)
        cache.put("key1", "value1")
        value, found = cache.get("key1")  # ("value1", True), marks as recently used

    Attributes:
        capacity: Maximum number of entries (fixed at construction)
    """

    def __init__(self, capacity: int = None):
        """
        Initialize an empty cache.

        Args:
            capacity: Maximum number of entries (default from settings.DEFAULT_CAPACITY)

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
        """
        if capacity is None:
            capacity = settings.DEFAULT_CAPACITY
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(f"capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._index = KeyIndex()
        self._recency = RecencyList()

        self._hits = 0
        self._misses = 0
        self._evictions = 0

        logger.debug("Created LRU cache with capacity %d", capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable) -> Lookup:
        """
        Get a value and mark its key as most recently used.

        Args:
            key: The key to retrieve

        Returns:
            Lookup(value, True) if found, Lookup(None, False) otherwise

        Time Complexity: O(1) average
        """
        locator = self._index.lookup(key)
        if locator is None:
            self._misses += 1
            return MISS

        self._recency.move_to_front(locator)
        self._hits += 1
        return Lookup(self._recency.entry(locator).value, True)

    def put(self, key: Hashable, value: Any) -> None:
        """
        Insert or update a key, evicting the LRU entry if over capacity.

        Args:
            key: The key to store
            value: The value to store (kept verbatim)

        Time Complexity: O(1) average
        """
        locator = self._index.lookup(key)
        if locator is not None:
            self._recency.entry(locator).value = value
            self._recency.move_to_front(locator)
            return

        locator = self._recency.allocate(key, value)
        self._recency.insert_at_front(locator)
        self._index.insert(key, locator)

        if len(self._index) > self._capacity:
            self._evict()

    def _evict(self) -> None:
        """Drop the least recently used entry."""
        locator = self._recency.remove_tail()
        key = self._recency.entry(locator).key
        self._index.remove(key)
        self._recency.release(locator)
        self._evictions += 1
        logger.debug("Evicted LRU key %r", key)

    def delete(self, key: Hashable) -> bool:
        """
        Remove a key from the cache.

        Args:
            key: The key to delete

        Returns:
            True if deleted, False if not found

        Time Complexity: O(1) average
        """
        locator = self._index.lookup(key)
        if locator is None:
            return False

        self._recency.remove(locator)
        self._index.remove(key)
        self._recency.release(locator)
        logger.debug("Deleted key %r", key)
        return True

    def contains(self, key: Hashable) -> bool:
        """
        Check if a key is present (without updating LRU order).

        Time Complexity: O(1) average
        """
        return key in self._index

    def peek(self, key: Hashable) -> Lookup:
        """
        Get a value without updating LRU order.

        Note: Unlike get(), this does NOT move the key to the MRU position
        and is not counted as a hit or miss.
        """
        locator = self._index.lookup(key)
        if locator is None:
            return MISS
        return Lookup(self._recency.entry(locator).value, True)

    def lru_key(self) -> Optional[Hashable]:
        """Get the key that would be evicted next, or None if empty."""
        locator = self._recency.back()
        return None if locator is None else self._recency.entry(locator).key

    def mru_key(self) -> Optional[Hashable]:
        """Get the most recently used key, or None if empty."""
        locator = self._recency.front()
        return None if locator is None else self._recency.entry(locator).key

    def keys(self) -> List[Hashable]:
        """
        Get all keys in eviction order.

        Returns:
            List of keys from LRU (oldest) to MRU (newest)
        """
        keys = [self._recency.entry(locator).key for locator in self._recency]
        keys.reverse()
        return keys

    def size(self) -> int:
        """Get current number of entries in the cache."""
        return len(self._index)

    def is_full(self) -> bool:
        """Check if the cache is at capacity."""
        return len(self._index) >= self._capacity

    def clear(self) -> None:
        """Remove all entries from the cache."""
        self._index.clear()
        self._recency.clear()
        logger.debug("Cleared LRU cache")

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "size": len(self._index),
            "capacity": self._capacity,
            "utilization": len(self._index) / self._capacity,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "lru_key": self.lru_key(),
            "mru_key": self.mru_key(),
        }

    def __contains__(self, key: Hashable) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self._index)})"
