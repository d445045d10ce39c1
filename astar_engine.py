"""
A* search over any Graph.

Expands the frontier vertex with the smallest f = g + h, where g is the cost
so far and h the injected heuristic's estimate of the remaining cost. With an
admissible, consistent heuristic the returned cost equals Dijkstra's.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple
import logging

from algorithms import PathResult
from dijkstra_engine import SimpleDijkstraEngine, require_vertex
from graph import Graph, Vertex
from heuristics import Heuristic, zero_heuristic
from relaxation import SearchStats, greedy_search

logger = logging.getLogger(__name__)


class AStarEngine(SimpleDijkstraEngine):
    """
    A* with lazy deletion and a closed set.

    Single-source queries (shortest_paths, shortest_path_costs) have no goal
    to aim at and run as plain Dijkstra, still charging node_cost.

    Args:
        heuristic: h(vertex, goal) -> float, must be >= 0. Admissibility and
            consistency are the caller's responsibility; an inconsistent
            heuristic still terminates but may return a suboptimal path.
        node_cost: optional per-vertex traversal cost charged on entering a
            vertex (weighted terrain). Must be non-negative; a negative
            value raises NegativeWeightError.
    """

    def __init__(
        self,
        heuristic: Heuristic = zero_heuristic,
        node_cost: Optional[Callable[[Vertex], float]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        super().__init__(should_stop=should_stop)
        self.heuristic = heuristic
        self.node_cost = node_cost

    def shortest_path(self, graph: Graph, source: Vertex, goal: Vertex) -> Optional[PathResult]:
        require_vertex(graph, source, "source")
        require_vertex(graph, goal, "goal")
        self._reset_counters()

        heuristic = self.heuristic
        stats = SearchStats()
        state = greedy_search(
            graph.neighbors,
            source,
            goal=goal,
            heuristic=lambda v: heuristic(v, goal),
            node_cost=self.node_cost,
            should_stop=self.should_stop,
            stats=stats,
        )
        self._record(stats)

        path = state.reconstruct_path(goal)
        if path is None:
            logger.debug("A*: no path %r -> %r after %d pops", source, goal, stats.heap_pops)
            return None
        return PathResult(path, state.cost(goal))

    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> Tuple[Dict[Vertex, float], Dict[Vertex, Vertex]]:
        require_vertex(graph, source, "source")
        self._reset_counters()

        stats = SearchStats()
        state = greedy_search(
            graph.neighbors,
            source,
            node_cost=self.node_cost,
            should_stop=self.should_stop,
            stats=stats,
        )
        self._record(stats)
        return state.distances(), state.predecessors()
