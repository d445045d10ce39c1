"""
Per-run search state for the greedy frontier algorithms.

Each run assigns every vertex a dense integer index the first time it is
seen and keeps g-cost, h-cost, parent and visited flags in parallel lists.
Nothing here is stored on the Graph, so repeated or concurrent runs over the
same graph never interfere.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple
import math

from graph import Vertex

NO_PARENT = -1


class SearchState:
    """Transient search records owned by a single algorithm run."""

    def __init__(self) -> None:
        self._index: Dict[Vertex, int] = {}
        self.vertices: List[Vertex] = []
        self.g_cost: List[float] = []
        self.h_cost: List[Optional[float]] = []
        self.parent: List[int] = []
        self.visited: List[bool] = []

    def index_of(self, vertex: Vertex) -> int:
        """Return the dense index of vertex, allocating a fresh record if new."""
        idx = self._index.get(vertex)
        if idx is None:
            idx = len(self.vertices)
            self._index[vertex] = idx
            self.vertices.append(vertex)
            self.g_cost.append(math.inf)
            self.h_cost.append(None)
            self.parent.append(NO_PARENT)
            self.visited.append(False)
        return idx

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._index

    def cost(self, vertex: Vertex) -> float:
        idx = self._index.get(vertex)
        return math.inf if idx is None else self.g_cost[idx]

    def parent_of(self, vertex: Vertex) -> Optional[Vertex]:
        idx = self._index.get(vertex)
        if idx is None or self.parent[idx] == NO_PARENT:
            return None
        return self.vertices[self.parent[idx]]

    def is_visited(self, vertex: Vertex) -> bool:
        idx = self._index.get(vertex)
        return idx is not None and self.visited[idx]

    def reconstruct_path(self, goal: Vertex) -> Optional[Tuple[Vertex, ...]]:
        """
        Walk parent pointers from goal back to the source.

        Returns None if goal was never reached (infinite g-cost).
        """
        idx = self._index.get(goal)
        if idx is None or math.isinf(self.g_cost[idx]):
            return None

        path: List[Vertex] = []
        while idx != NO_PARENT:
            path.append(self.vertices[idx])
            idx = self.parent[idx]
        path.reverse()
        return tuple(path)

    def distances(self) -> Dict[Vertex, float]:
        """Finite g-costs keyed by vertex."""
        return {v: g for v, g in zip(self.vertices, self.g_cost) if not math.isinf(g)}

    def predecessors(self) -> Dict[Vertex, Vertex]:
        """Parent map; the source (and unreached vertices) are omitted."""
        return {
            v: self.vertices[p]
            for v, p in zip(self.vertices, self.parent)
            if p != NO_PARENT
        }
