"""
Recency List Module

A doubly-linked list of entries ordered from most recently used (head)
to least recently used (tail), stored in a growable arena.

Layout:
- Slot 0 is the head sentinel, slot 1 is the tail sentinel
- Every other slot is either linked between the sentinels or on the free list
- Links are arena indices, so removing an entry never invalidates another

Because both sentinels are always present, none of the structural
operations need an empty-list or single-element special case.
"""

from typing import Any, Hashable, Iterator, List, Optional

from .entry import HEAD, NIL, TAIL, Entry


class RecencyList:
    """
    Arena-backed recency ordering with O(1) structural operations.

    The list owns every Entry. Callers hold plain integer locators and
    must only pass locators that were returned by allocate() and not
    yet released.

    Usage:
        recency = RecencyList()
        slot = recency.allocate("key", "value")
        recency.insert_at_front(slot)
        recency.move_to_front(slot)
        oldest = recency.remove_tail()
        recency.release(oldest)
    """

    def __init__(self):
        self._slots: List[Entry] = [Entry(), Entry()]
        self._slots[HEAD].older = TAIL
        self._slots[TAIL].newer = HEAD
        self._free: List[int] = []
        self._length = 0

    def allocate(self, key: Hashable, value: Any) -> int:
        """
        Reserve a slot for a new entry.

        Args:
            key: The entry key
            value: The entry value

        Returns:
            Locator of the (still unlinked) slot

        Time Complexity: O(1) amortized
        """
        if self._free:
            locator = self._free.pop()
            entry = self._slots[locator]
            entry.key = key
            entry.value = value
            return locator

        self._slots.append(Entry(key, value))
        return len(self._slots) - 1

    def release(self, locator: int) -> None:
        """Return an unlinked slot to the free list."""
        self._slots[locator].reset()
        self._free.append(locator)

    def entry(self, locator: int) -> Entry:
        """Get the entry stored at a locator."""
        return self._slots[locator]

    def insert_at_front(self, locator: int) -> None:
        """
        Link an entry immediately after the head sentinel.

        Time Complexity: O(1)
        """
        slots = self._slots
        entry = slots[locator]
        first = slots[HEAD].older

        entry.newer = HEAD
        entry.older = first
        slots[first].newer = locator
        slots[HEAD].older = locator
        self._length += 1

    def remove(self, locator: int) -> None:
        """
        Unlink an entry by joining its neighbours.

        Time Complexity: O(1)
        """
        slots = self._slots
        entry = slots[locator]

        slots[entry.newer].older = entry.older
        slots[entry.older].newer = entry.newer
        entry.newer = NIL
        entry.older = NIL
        self._length -= 1

    def move_to_front(self, locator: int) -> None:
        """
        Mark an entry as most recently used.

        Time Complexity: O(1)
        """
        slots = self._slots
        entry = slots[locator]
        if entry.newer == HEAD:
            return

        # Unlink
        slots[entry.newer].older = entry.older
        slots[entry.older].newer = entry.newer

        # Relink after head
        first = slots[HEAD].older
        entry.newer = HEAD
        entry.older = first
        slots[first].newer = locator
        slots[HEAD].older = locator

    def remove_tail(self) -> int:
        """
        Unlink and return the least recently used entry.

        Must only be called on a non-empty list.

        Returns:
            Locator of the removed entry (still allocated)

        Time Complexity: O(1)
        """
        locator = self._slots[TAIL].newer
        self.remove(locator)
        return locator

    def front(self) -> Optional[int]:
        """Locator of the most recently used entry, or None if empty."""
        locator = self._slots[HEAD].older
        return None if locator == TAIL else locator

    def back(self) -> Optional[int]:
        """Locator of the least recently used entry, or None if empty."""
        locator = self._slots[TAIL].newer
        return None if locator == HEAD else locator

    def clear(self) -> None:
        """Drop every entry, keeping only the sentinels."""
        del self._slots[TAIL + 1:]
        self._slots[HEAD].older = TAIL
        self._slots[TAIL].newer = HEAD
        self._free.clear()
        self._length = 0

    def __iter__(self) -> Iterator[int]:
        """Iterate locators from most to least recently used."""
        locator = self._slots[HEAD].older
        while locator != TAIL:
            yield locator
            locator = self._slots[locator].older

    def __len__(self) -> int:
        return self._length

    @property
    def arena_size(self) -> int:
        """Number of slots in the arena, sentinels included."""
        return len(self._slots)

    @property
    def free_slots(self) -> int:
        """Number of reclaimed slots waiting for reuse."""
        return len(self._free)
