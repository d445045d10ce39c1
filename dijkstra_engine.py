"""
Heap-based DijkstraEngine implementation.

Runs the shared greedy frontier loop over any Graph implementation. Edge
weights must be non-negative; graphs with negative weights belong to
BellmanFordEngine.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple
import logging

from algorithms import DijkstraEngine, PathResult
from errors import InvalidVertexError
from graph import Graph, Vertex
from relaxation import SearchStats, greedy_search

logger = logging.getLogger(__name__)


def require_vertex(graph: Graph, vertex: Vertex, role: str) -> None:
    if vertex not in graph:
        raise InvalidVertexError(vertex, role)


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    Complexity:
        O(E log V) over the vertices reachable from the source.

    The last_* attributes describe the most recent run and are diagnostics
    only; all search state lives inside each call.
    """

    def __init__(self, should_stop: Optional[Callable[[], bool]] = None) -> None:
        self.should_stop = should_stop
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_pops = 0
        self.last_finalized: List[Tuple[Vertex, float]] = []

    def _record(self, stats: SearchStats) -> None:
        self.last_edges_examined = stats.edges_examined
        self.last_relaxed = stats.relaxed
        self.last_heap_pops = stats.heap_pops
        self.last_heap_pushes = stats.heap_pushes
        self.last_stale_pops = stats.stale_pops
        self.last_finalized = stats.finalized

    def shortest_path(self, graph: Graph, source: Vertex, goal: Vertex) -> Optional[PathResult]:
        """
        Minimum-cost path from source to goal, or None if goal is unreachable.

        The search stops as soon as goal is finalised.
        """
        require_vertex(graph, source, "source")
        require_vertex(graph, goal, "goal")
        self._reset_counters()

        stats = SearchStats()
        state = greedy_search(
            graph.neighbors, source, goal=goal, should_stop=self.should_stop, stats=stats
        )
        self._record(stats)

        path = state.reconstruct_path(goal)
        if path is None:
            logger.debug("no path %r -> %r", source, goal)
            return None
        return PathResult(path, state.cost(goal))

    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Dict[Vertex, float]:
        """
        Compute only the cost map for all reachable vertices from source.
        """
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> Tuple[Dict[Vertex, float], Dict[Vertex, Vertex]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Returns the distance map (dest -> cost from source) plus a predecessor
        map that lets you walk back from any reachable vertex to the source.
        Unreachable vertices are absent from both maps, and the predecessor
        map omits the source itself because it has no parent.
        """
        require_vertex(graph, source, "source")
        self._reset_counters()

        stats = SearchStats()
        state = greedy_search(graph.neighbors, source, should_stop=self.should_stop, stats=stats)
        self._record(stats)
        return state.distances(), state.predecessors()
