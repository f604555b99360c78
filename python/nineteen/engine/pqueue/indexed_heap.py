"""Indexed binary min-heap with decrease-key.

Every entry is identified by an integer *number* that stays stable for the
lifetime of the entry.  A ``number -> slot`` index lets the heap find an
entry in O(1) and restore heap order in O(log n) after its key drops,
which plain ``heapq`` cannot do without leaving stale duplicates behind.

Entries are ordered by ``(key, number)``: equal keys come out in
ascending number order, so results never depend on heap layout.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class IndexedMinPQ(Generic[T]):
    """Min-priority queue over items addressed by a stable integer number."""

    def __init__(self) -> None:
        self._heap: list[int] = []          # numbers, heap-ordered
        self._slot: dict[int, int] = {}     # number -> index in _heap
        self._key: dict[int, int] = {}
        self._item: dict[int, T] = {}

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, number: object) -> bool:
        return number in self._slot

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def key_of(self, number: int) -> int:
        return self._key[number]

    def min_key(self) -> int:
        if not self._heap:
            raise IndexError("min_key from an empty queue")
        return self._key[self._heap[0]]

    # -- updates --------------------------------------------------------------

    def insert(self, number: int, key: int, item: T) -> None:
        if number in self._slot:
            raise ValueError(f"Entry {number} is already queued.")
        self._slot[number] = len(self._heap)
        self._heap.append(number)
        self._key[number] = key
        self._item[number] = item
        self._swim(len(self._heap) - 1)

    def extract_min(self) -> T:
        """Remove and return the item with the smallest key."""
        if not self._heap:
            raise IndexError("extract_min from an empty queue")
        top = self._heap[0]
        self._exchange(0, len(self._heap) - 1)
        self._heap.pop()
        if self._heap:
            self._sink(0)
        del self._slot[top]
        del self._key[top]
        return self._item.pop(top)

    def decrease_key(self, number: int, key: int, item: T | None = None) -> None:
        """Lower the key of a queued entry, optionally replacing its item.

        Raises ``KeyError`` for an unknown number and ``ValueError`` when
        *key* is not strictly below the current key.
        """
        if number not in self._slot:
            raise KeyError(number)
        if key >= self._key[number]:
            raise ValueError(
                f"New key {key} is not below current key {self._key[number]}."
            )
        self._key[number] = key
        if item is not None:
            self._item[number] = item
        self._swim(self._slot[number])

    # -- heap helpers ---------------------------------------------------------

    def _less(self, i: int, j: int) -> bool:
        a, b = self._heap[i], self._heap[j]
        return (self._key[a], a) < (self._key[b], b)

    def _exchange(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._slot[heap[i]] = i
        self._slot[heap[j]] = j

    def _swim(self, k: int) -> None:
        while k > 0:
            parent = (k - 1) // 2
            if not self._less(k, parent):
                break
            self._exchange(k, parent)
            k = parent

    def _sink(self, k: int) -> None:
        n = len(self._heap)
        while 2 * k + 1 < n:
            child = 2 * k + 1
            if child + 1 < n and self._less(child + 1, child):
                child += 1
            if not self._less(child, k):
                break
            self._exchange(k, child)
            k = child
