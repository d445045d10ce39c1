"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using an adjacency list: each vertex maps to
an ordered list of (destination, weight) pairs, so parallel edges survive and
iteration order follows insertion order.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Sequence, Tuple
import math
import numbers

from graph import Graph, Vertex


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a vertex -> [(neighbor, weight)] map.
    """

    def __init__(self, edges: Iterable[Tuple[Vertex, Vertex, float]] = ()) -> None:
        self._adj: Dict[Vertex, List[Tuple[Vertex, float]]] = {}
        for src, dst, weight in edges:
            self.add_edge(src, dst, weight)

    @classmethod
    def undirected(cls, edges: Iterable[Tuple[Vertex, Vertex, float]]) -> "AdjacencyListGraph":
        """Build a graph storing both orientations of every edge."""
        g = cls()
        for a, b, weight in edges:
            g.add_undirected_edge(a, b, weight)
        return g

    # --- Mutation API ---------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Ensure vertex exists in the graph."""
        self._adj.setdefault(vertex, [])

    def add_edge(self, src: Vertex, dst: Vertex, weight: float) -> None:
        """
        Append a directed edge src -> dst.

        Auto-adds both endpoints. The weight must be a finite real number;
        negative weights are stored, individual algorithms decide whether
        they accept them.
        """
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise ValueError(f"Edge weight must be a real number, got {weight!r}")
        if not math.isfinite(weight):
            raise ValueError(f"Edge weight must be finite, got {weight!r}")
        self.add_vertex(src)
        self.add_vertex(dst)
        self._adj[src].append((dst, weight))

    def add_undirected_edge(self, a: Vertex, b: Vertex, weight: float) -> None:
        self.add_edge(a, b, weight)
        self.add_edge(b, a, weight)

    # --- Graph interface ------------------------------------------------------

    def nodes(self) -> Iterable[Vertex]:
        return self._adj.keys()

    def neighbors(self, vertex: Vertex) -> Iterator[Tuple[Vertex, float]]:
        return iter(self._adj.get(vertex, ()))

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    # --- Helpers --------------------------------------------------------------

    def edge_count(self) -> int:
        return sum(len(out) for out in self._adj.values())

    def path_cost(self, path: Sequence[Vertex]) -> float:
        """Return the total cost of walking along the given vertex sequence."""
        if len(path) < 2:
            return 0.0

        total = 0.0
        for u, v in zip(path[:-1], path[1:]):
            # cheapest parallel edge
            weights = [w for dst, w in self._adj.get(u, ()) if dst == v]
            if not weights:
                raise ValueError(f"Edge {u!r} -> {v!r} not present in graph.")
            total += min(weights)
        return total
