"""
Key Index Module

Hash mapping from key to the locator of its entry in the recency arena.
"""

from typing import Dict, Hashable, Optional


class KeyIndex:
    """
    O(1) average translation from key to arena locator.

    The index never owns entries; it only holds the integer locator
    handed out by RecencyList.allocate().
    """

    def __init__(self):
        self._locators: Dict[Hashable, int] = {}

    def lookup(self, key: Hashable) -> Optional[int]:
        """Get the locator for a key, or None if absent."""
        return self._locators.get(key)

    def insert(self, key: Hashable, locator: int) -> None:
        """Map a key to a locator, replacing any previous mapping."""
        self._locators[key] = locator

    def remove(self, key: Hashable) -> None:
        """Delete the mapping for a key that is known to be present."""
        del self._locators[key]

    def clear(self) -> None:
        self._locators.clear()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._locators

    def __len__(self) -> int:
        return len(self._locators)
