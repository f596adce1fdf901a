"""
Binary min-heap priority queue with decrease-key.

The heap is stored as a flat list. A ``key -> index`` map is kept in step with
every swap so ``decrease_key`` locates its entry in O(1) and repositions it in
O(log n), instead of scanning the array.

Example:
    >>> pq = MinPriorityQueue()
    >>> pq.insert("A", 4)
    >>> pq.insert("B", 7)
    >>> pq.decrease_key("B", 1)
    >>> pq.extract_min()
    ('B', 1)
"""

from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Tuple

from ..exceptions import EmptyQueueError
from ..models import Distance, is_better_cost


@dataclass
class HeapEntry:
    """Heap slot holding a key, its priority and its insertion sequence."""

    __slots__ = ("key", "priority", "sequence")

    key: Hashable
    priority: Distance
    sequence: int

    def precedes(self, other: "HeapEntry") -> bool:
        """Order by priority, then by insertion sequence."""
        if is_better_cost(self.priority, other.priority):
            return True
        if is_better_cost(other.priority, self.priority):
            return False
        return self.sequence < other.sequence


class MinPriorityQueue:
    """
    Min-heap keyed by mutable priorities.

    Each key appears at most once. Entries with equal priority come out in
    insertion order; callers must not depend on that for correctness.
    """

    def __init__(self):
        self._heap: List[HeapEntry] = []
        self._index: Dict[Hashable, int] = {}
        self._counter = 0  # Unique counter to break ties

    def insert(self, key: Hashable, priority: Distance) -> None:
        """
        Add a key with the given priority.

        Raises:
            ValueError: If the key is already queued
        """
        if key in self._index:
            raise ValueError(f"Key {key!r} is already in the queue")
        self._heap.append(HeapEntry(key, priority, self._counter))
        self._counter += 1
        self._index[key] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> Tuple[Hashable, Distance]:
        """
        Remove and return the ``(key, priority)`` pair with the lowest priority.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if not self._heap:
            raise EmptyQueueError("extract_min from an empty priority queue")

        last = len(self._heap) - 1
        self._swap(0, last)
        entry = self._heap.pop()
        del self._index[entry.key]
        if self._heap:
            self._sift_down(0)
        return entry.key, entry.priority

    def decrease_key(self, key: Hashable, new_priority: Distance) -> bool:
        """
        Lower the priority of a queued key.

        Only strictly smaller priorities are applied; anything else is a no-op.

        Returns:
            True if the priority was lowered

        Raises:
            KeyError: If the key is not queued
        """
        index = self._index[key]
        entry = self._heap[index]
        if not is_better_cost(new_priority, entry.priority):
            return False
        entry.priority = new_priority
        self._sift_up(index)
        return True

    def add_or_update(self, key: Hashable, priority: Distance) -> None:
        """Insert the key, or decrease its priority if it is already queued."""
        if key in self._index:
            self.decrease_key(key, priority)
        else:
            self.insert(key, priority)

    def peek(self) -> Optional[Tuple[Hashable, Distance]]:
        """Return the minimum ``(key, priority)`` pair without removing it."""
        if not self._heap:
            return None
        entry = self._heap[0]
        return entry.key, entry.priority

    def priority(self, key: Hashable) -> Distance:
        """Get the current priority of a queued key."""
        return self._heap[self._index[key]].priority

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._heap

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].key] = i
        self._index[heap[j].key] = j

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._heap[index].precedes(self._heap[parent]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and self._heap[left].precedes(self._heap[smallest]):
                smallest = left
            if right < size and self._heap[right].precedes(self._heap[smallest]):
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest
