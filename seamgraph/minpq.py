"""
Min-priority queues with extrinsic priorities.

Three implementations share one contract:
1. OptimizedHeapMinPQ: binary heap plus an item -> slot index (O(log n) everywhere)
2. HeapMinPQ: binary heap only, so contains/change_priority scan (O(n))
3. UnsortedArrayMinPQ: plain list, every query scans (O(n))

Only the first is meant for real work; the other two are baselines for
benchmarks and cross-checks in the tests.
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

from .errors import DuplicateItemError, EmptyQueueError, NotFoundError

T = TypeVar('T', bound=Hashable)


@dataclass(frozen=True)
class PriorityNode(Generic[T]):
    """An item paired with its priority. Priority updates replace the node."""
    item: T
    priority: float

    def with_priority(self, priority: float) -> 'PriorityNode[T]':
        return replace(self, priority=priority)


class ExtrinsicMinPQ(ABC, Generic[T]):
    """
    Priority queue of unique items, each carrying a float priority.

    Ties between equal priorities come out in whatever order the
    implementation happens to compare them.
    """

    @abstractmethod
    def add(self, item: T, priority: float) -> None:
        """
        Add an item with the given priority.

        Raises:
            DuplicateItemError: if the item is already present. The queue
                is left unchanged.
        """
        raise NotImplementedError

    @abstractmethod
    def contains(self, item: T) -> bool:
        raise NotImplementedError

    @abstractmethod
    def peek_min(self) -> T:
        """
        Return the item with the smallest priority without removing it.

        Raises:
            EmptyQueueError: if the queue is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_min(self) -> T:
        """
        Remove and return the item with the smallest priority.

        Raises:
            EmptyQueueError: if the queue is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def change_priority(self, item: T, priority: float) -> None:
        """
        Replace the priority of an item already in the queue.

        Raises:
            NotFoundError: if the item is not present.
        """
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, item) -> bool:
        return self.contains(item)


class OptimizedHeapMinPQ(ExtrinsicMinPQ[T]):
    """
    Indexed binary heap.

    Slots are 1-indexed (slot 0 is unused) so the children of slot i are
    2i and 2i + 1. `_index` maps every held item to its current slot and is
    rewritten on every swap, so change_priority can find its node in O(1).
    """

    def __init__(self):
        self._heap: List[Optional[PriorityNode[T]]] = [None]
        self._index: Dict[T, int] = {}

    def add(self, item: T, priority: float) -> None:
        if item in self._index:
            raise DuplicateItemError(f"Already contains {item!r}")
        self._heap.append(PriorityNode(item, priority))
        slot = len(self._heap) - 1
        self._index[item] = slot
        self._swim(slot)

    def contains(self, item: T) -> bool:
        return item in self._index

    def peek_min(self) -> T:
        if self.is_empty():
            raise EmptyQueueError("PQ is empty")
        return self._heap[1].item

    def remove_min(self) -> T:
        if self.is_empty():
            raise EmptyQueueError("PQ is empty")
        self._swap(1, self.size())
        node = self._heap.pop()
        del self._index[node.item]
        if not self.is_empty():
            self._sink(1)
        return node.item

    def change_priority(self, item: T, priority: float) -> None:
        slot = self._index.get(item)
        if slot is None:
            raise NotFoundError(f"PQ does not contain {item!r}")
        self._heap[slot] = self._heap[slot].with_priority(priority)
        # Direction of the change is unknown; at most one of these moves it.
        self._swim(slot)
        self._sink(self._index[item])

    def size(self) -> int:
        return len(self._heap) - 1

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i].priority < self._heap[j].priority

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].item] = i
        self._index[heap[j].item] = j

    def _swim(self, slot: int) -> None:
        while slot > 1 and self._less(slot, slot // 2):
            self._swap(slot, slot // 2)
            slot //= 2

    def _sink(self, slot: int) -> None:
        n = self.size()
        while 2 * slot <= n:
            child = 2 * slot
            if child < n and self._less(child + 1, child):
                child += 1
            if not self._less(child, slot):
                break
            self._swap(slot, child)
            slot = child


class HeapMinPQ(ExtrinsicMinPQ[T]):
    """
    heapq-backed queue without an index.

    contains and change_priority scan the whole heap; change_priority
    re-heapifies after editing the entry.
    """

    def __init__(self):
        # Entries are [priority, sequence, item]; the sequence keeps heapq
        # from ever comparing items.
        self._heap: List[list] = []
        self._counter = itertools.count()

    def add(self, item: T, priority: float) -> None:
        if self.contains(item):
            raise DuplicateItemError(f"Already contains {item!r}")
        heapq.heappush(self._heap, [priority, next(self._counter), item])

    def contains(self, item: T) -> bool:
        return self._find(item) is not None

    def peek_min(self) -> T:
        if self.is_empty():
            raise EmptyQueueError("PQ is empty")
        return self._heap[0][2]

    def remove_min(self) -> T:
        if self.is_empty():
            raise EmptyQueueError("PQ is empty")
        return heapq.heappop(self._heap)[2]

    def change_priority(self, item: T, priority: float) -> None:
        entry = self._find(item)
        if entry is None:
            raise NotFoundError(f"PQ does not contain {item!r}")
        entry[0] = priority
        heapq.heapify(self._heap)

    def size(self) -> int:
        return len(self._heap)

    def _find(self, item: T) -> Optional[list]:
        for entry in self._heap:
            if entry[2] == item:
                return entry
        return None


class UnsortedArrayMinPQ(ExtrinsicMinPQ[T]):
    """Unordered list of nodes; every query is a linear scan."""

    def __init__(self):
        self._items: List[PriorityNode[T]] = []

    def add(self, item: T, priority: float) -> None:
        if self.contains(item):
            raise DuplicateItemError(f"Already contains {item!r}")
        self._items.append(PriorityNode(item, priority))

    def contains(self, item: T) -> bool:
        return any(node.item == item for node in self._items)

    def peek_min(self) -> T:
        if self.is_empty():
            raise EmptyQueueError("PQ is empty")
        return self._items[self._min_slot()].item

    def remove_min(self) -> T:
        if self.is_empty():
            raise EmptyQueueError("PQ is empty")
        return self._items.pop(self._min_slot()).item

    def change_priority(self, item: T, priority: float) -> None:
        for i, node in enumerate(self._items):
            if node.item == item:
                self._items[i] = node.with_priority(priority)
                return
        raise NotFoundError(f"PQ does not contain {item!r}")

    def size(self) -> int:
        return len(self._items)

    def _min_slot(self) -> int:
        best = 0
        for i in range(1, len(self._items)):
            if self._items[i].priority < self._items[best].priority:
                best = i
        return best
