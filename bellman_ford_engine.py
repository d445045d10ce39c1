"""
Bellman–Ford single-source shortest paths.

Handles negative edge weights. A negative cycle reachable from the source is
reported on the result (negative_cycle=True) rather than raised, since it is
a property of the input the caller is expected to check.
"""

from __future__ import annotations

from typing import Dict, Optional
import logging
import math

from algorithms import BellmanFordResult, PathResult, ShortestPathEngine
from dijkstra_engine import require_vertex
from graph import Graph, Vertex

logger = logging.getLogger(__name__)


class BellmanFordEngine(ShortestPathEngine):
    """
    Round-based edge relaxation.

    Complexity:
        O(V * E); rounds stop early once nothing changes.
    """

    def __init__(self) -> None:
        self.last_rounds = 0
        self.last_relaxed = 0

    def relax_vertex(
        self,
        graph: Graph,
        vertex: Vertex,
        dist: Dict[Vertex, float],
        prev: Dict[Vertex, Vertex],
    ) -> int:
        """
        Relax every edge leaving vertex against the current cost map.

        Combines the known cost of vertex with each outgoing link cost; if the
        combined cost beats the destination's current estimate, the estimate
        and its predecessor are updated in place.

        Returns:
            Number of destinations whose cost improved.
        """
        d_u = dist.get(vertex, math.inf)
        if math.isinf(d_u):
            return 0

        updated = 0
        for v, w in graph.neighbors(vertex):
            candidate = d_u + w
            if candidate < dist.get(v, math.inf):
                dist[v] = candidate
                prev[v] = vertex
                updated += 1
        return updated

    def shortest_paths(self, graph: Graph, source: Vertex) -> BellmanFordResult:
        require_vertex(graph, source, "source")

        vertices = list(graph.nodes())
        dist: Dict[Vertex, float] = {source: 0.0}
        prev: Dict[Vertex, Vertex] = {}

        self.last_rounds = 0
        self.last_relaxed = 0
        for _ in range(max(len(vertices) - 1, 0)):
            self.last_rounds += 1
            changed = sum(self.relax_vertex(graph, u, dist, prev) for u in vertices)
            self.last_relaxed += changed
            if not changed:
                break

        # One more pass: any further improvement means a reachable negative cycle.
        negative_cycle = any(
            dist.get(u, math.inf) + w < dist.get(v, math.inf)
            for u in vertices
            if u in dist
            for v, w in graph.neighbors(u)
        )
        if negative_cycle:
            logger.debug("negative cycle reachable from %r", source)

        return BellmanFordResult(
            source=source,
            distances=dist,
            predecessors=prev,
            negative_cycle=negative_cycle,
        )

    def shortest_path(self, graph: Graph, source: Vertex, goal: Vertex) -> Optional[PathResult]:
        """
        Path from source to goal, or None when unreachable or a negative
        cycle makes the cost undefined.
        """
        require_vertex(graph, goal, "goal")
        return self.shortest_paths(graph, source).path_to(goal)
