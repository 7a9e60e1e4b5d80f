"""
LRU Arena Cache: Fixed-Capacity Least-Recently-Used Cache

An in-memory key-value cache that evicts the least recently used
entry once it reaches capacity, with O(1) get and put backed by an
index-linked arena of entries.
"""

from .cache import InvalidCapacityError, Lookup, LRUCache, SynchronizedLRUCache

__version__ = "1.0.0"

__all__ = ["InvalidCapacityError", "Lookup", "LRUCache", "SynchronizedLRUCache"]
