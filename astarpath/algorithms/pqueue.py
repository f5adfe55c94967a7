"""Min-priority queue of candidate paths.

Entries are ordered by priority and then by insertion sequence, so items with
equal priority are returned first-in first-out and the items themselves are
never compared. Only insertion and extraction of the minimum are supported;
there is no decrease-key.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Any, Iterator, List, Tuple


@dataclass
class QueueItem:
    """A value held in the queue together with its priority.

    Attributes:
        value: The queued payload (a ``Path`` during search).
        priority: Ordering key; smaller is extracted first. May be negative.
        cost: Accumulated cost of ``value``, carried alongside it by the
            search so the path cost is not re-summed on every extension.
    """

    value: Any
    priority: float = 0.0
    cost: float = 0.0


class PriorityQueue:
    """Binary min-heap over ``QueueItem`` objects keyed by ``priority``."""

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, QueueItem]] = []
        self._counter: Iterator[int] = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._heap

    def push(self, item: QueueItem) -> None:
        """Insert ``item`` in O(log n)."""
        heappush(self._heap, (item.priority, next(self._counter), item))

    def pop(self) -> QueueItem:
        """Remove and return the item with the smallest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heappop(self._heap)[2]

    def peek(self) -> QueueItem:
        """Return the item with the smallest priority without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0][2]
