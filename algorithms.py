"""
Algorithm interfaces and result types.

Keeps graph algorithms separate from graph storage and from the YAML runner.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple

from graph import Edge, Graph, Vertex
from union_find import UnionFind


@dataclass(frozen=True)
class PathResult:
    """
    A found path and its total cost.

    A path from a vertex to itself has one element and cost 0; "no path"
    is represented by the engines returning None instead.
    """
    path: Tuple[Vertex, ...]
    cost: float

    def __len__(self) -> int:
        return len(self.path)


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a minimum spanning tree (or forest) and their total weight."""
    edges: FrozenSet[Edge]
    total_weight: float
    vertex_count: int = 0

    @property
    def is_spanning(self) -> bool:
        """True when the edges connect every vertex of the source graph."""
        return len(self.edges) == max(self.vertex_count - 1, 0)

    def is_acyclic(self) -> bool:
        uf = UnionFind()
        return all(uf.union(e.source, e.destination) for e in self.edges)


@dataclass
class BellmanFordResult:
    """
    Single-source distances that tolerate negative weights.

    negative_cycle is True when a negative cycle is reachable from the
    source; distances are then not well defined and path_to() returns None.
    """
    source: Vertex
    distances: Dict[Vertex, float] = field(default_factory=dict)
    predecessors: Dict[Vertex, Vertex] = field(default_factory=dict)
    negative_cycle: bool = False

    def path_to(self, goal: Vertex) -> Optional[PathResult]:
        if self.negative_cycle or goal not in self.distances:
            return None
        path = [goal]
        while path[-1] != self.source:
            path.append(self.predecessors[path[-1]])
        path.reverse()
        return PathResult(tuple(path), self.distances[goal])


class ShortestPathEngine(ABC):
    """
    Interface for point-to-point shortest-path search.
    """

    @abstractmethod
    def shortest_path(self, graph: Graph, source: Vertex, goal: Vertex) -> Optional[PathResult]:
        """
        Compute a minimum-cost path from source to goal.

        Returns:
            PathResult, or None when goal is unreachable from source.
        """
        raise NotImplementedError


class DijkstraEngine(ShortestPathEngine):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, float]:
        """
        Compute shortest-path costs from source to all reachable vertices.

        Returns:
            Mapping dest -> path_cost(source -> dest).
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> Tuple[Dict[Vertex, float], Dict[Vertex, Vertex]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError


class SpanningTreeEngine(ABC):
    """
    Interface for minimum spanning tree construction.

    The graph is read as undirected: an edge u -> v and its reverse are the
    same candidate.
    """

    @abstractmethod
    def minimum_spanning_tree(self, graph: Graph) -> SpanningTree:
        raise NotImplementedError
