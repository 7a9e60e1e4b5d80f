"""
Entry slots stored in the recency arena.

Adjacency is expressed as integer locators into the arena rather than
object references, so the key index and the recency list never share
ownership of an entry.
"""

from typing import Any, Hashable, Optional

# Permanent sentinel slots
HEAD = 0
TAIL = 1

# Adjacency of an unlinked slot
NIL = -1


class Entry:
    """
    A stored key/value pair plus its position in the recency ordering.

    Attributes:
        key: The cached key (None for sentinels and free slots)
        value: The cached value, stored verbatim
        newer: Locator of the neighbour closer to the head
        older: Locator of the neighbour closer to the tail
    """

    __slots__ = ("key", "value", "newer", "older")

    def __init__(self, key: Optional[Hashable] = None, value: Any = None):
        self.key = key
        self.value = value
        self.newer = NIL
        self.older = NIL

    def reset(self) -> None:
        """Drop the payload and links so the slot can be reused."""
        self.key = None
        self.value = None
        self.newer = NIL
        self.older = NIL

    def __repr__(self) -> str:
        return f"Entry(key={self.key!r}, newer={self.newer}, older={self.older})"
