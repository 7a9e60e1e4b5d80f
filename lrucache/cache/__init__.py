"""Cache module for the LRU cache."""

from .concurrent import SynchronizedLRUCache
from .lru import InvalidCapacityError, Lookup, LRUCache

__all__ = ["InvalidCapacityError", "Lookup", "LRUCache", "SynchronizedLRUCache"]
