"""
Min-priority frontier for greedy graph searches.

Wraps heapq with an insertion counter so equal keys pop in insertion order
and vertices never have to be mutually comparable. There is no decrease-key:
callers push again when a cost improves and discard stale entries on pop.
"""

from __future__ import annotations

from typing import Generic, List, Tuple, TypeVar
import heapq
import itertools

from errors import EmptyFrontierError

T = TypeVar("T")


class PriorityFrontier(Generic[T]):
    """
    Binary-heap priority queue of (vertex, key) entries.

    Duplicate entries for the same vertex may coexist.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()
        self.pushes = 0
        self.pops = 0

    def push(self, vertex: T, key: float) -> None:
        heapq.heappush(self._heap, (key, next(self._counter), vertex))
        self.pushes += 1

    def pop_min(self) -> Tuple[T, float]:
        """Remove and return (vertex, key) with the smallest key."""
        if not self._heap:
            raise EmptyFrontierError("pop_min() called on an empty frontier")
        key, _, vertex = heapq.heappop(self._heap)
        self.pops += 1
        return vertex, key

    def peek_key(self) -> float:
        if not self._heap:
            raise EmptyFrontierError("peek_key() called on an empty frontier")
        return self._heap[0][0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
