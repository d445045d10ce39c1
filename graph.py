"""
Directed, weighted graph abstraction.

Vertices are any hashable identifiers (ints, strings, frozen dataclasses).
Edges are directed: u -> v with a real-valued weight. Undirected graphs are
modelled by storing both orientations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Hashable, Iterable, Iterator, Tuple

Vertex = Hashable


@dataclass(frozen=True)
class Edge:
    """Directed weighted edge."""

    source: Vertex
    destination: Vertex
    weight: float

    def reversed(self) -> "Edge":
        return Edge(self.destination, self.source, self.weight)


class Graph(ABC):
    """Read-only view of a directed, weighted graph."""

    @abstractmethod
    def nodes(self) -> Iterable[Vertex]:
        """Return all known vertices in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, vertex: Vertex) -> Iterator[Tuple[Vertex, float]]:
        """
        Lazily yield (destination, weight) pairs leaving vertex.

        A vertex with no outgoing edges, or one the graph has never seen,
        yields nothing.
        """
        raise NotImplementedError

    @abstractmethod
    def has_vertex(self, vertex: Vertex) -> bool:
        raise NotImplementedError

    def edges(self) -> Iterator[Edge]:
        """Yield every directed edge, grouped by source in insertion order."""
        for u in self.nodes():
            for v, w in self.neighbors(u):
                yield Edge(u, v, w)

    def __contains__(self, vertex: object) -> bool:
        try:
            return self.has_vertex(vertex)  # type: ignore[arg-type]
        except TypeError:
            # unhashable
            return False
