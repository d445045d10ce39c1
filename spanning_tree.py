"""
Minimum spanning tree engines: Prim, Kruskal and Boruvka.

Graphs are read as undirected; a directed edge u -> v offers the connection
u - v. On a disconnected graph every engine returns a minimum spanning
forest (SpanningTree.is_spanning is then False).
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple
import logging

from algorithms import SpanningTree, SpanningTreeEngine
from errors import InvalidVertexError
from graph import Edge, Graph, Vertex
from relaxation import SearchStats, greedy_search
from search_state import NO_PARENT, SearchState
from union_find import UnionFind

logger = logging.getLogger(__name__)


def undirected_adjacency(graph: Graph) -> Dict[Vertex, List[Tuple[Vertex, float]]]:
    """Adjacency lists holding every edge in both orientations."""
    adj: Dict[Vertex, List[Tuple[Vertex, float]]] = {v: [] for v in graph.nodes()}
    for e in graph.edges():
        adj[e.source].append((e.destination, e.weight))
        adj.setdefault(e.destination, []).append((e.source, e.weight))
    return adj


def _tree(edges: List[Edge], vertex_count: int) -> SpanningTree:
    return SpanningTree(
        edges=frozenset(edges),
        total_weight=sum(e.weight for e in edges),
        vertex_count=vertex_count,
    )


class PrimEngine(SpanningTreeEngine):
    """
    Prim's algorithm on the shared frontier loop.

    The priority of a vertex is the weight of the cheapest edge linking it to
    the tree grown so far. Negative weights raise NegativeWeightError.

    Complexity:
        O(E log V)
    """

    def __init__(self, should_stop: Optional[Callable[[], bool]] = None) -> None:
        self.should_stop = should_stop
        self.last_heap_pops = 0
        self.last_stale_pops = 0

    def minimum_spanning_tree(self, graph: Graph, start: Optional[Vertex] = None) -> SpanningTree:
        if start is not None and start not in graph:
            raise InvalidVertexError(start, "start")

        adj = undirected_adjacency(graph)
        roots = list(adj)
        if start is not None:
            roots.insert(0, start)

        def neighbors(v: Vertex) -> List[Tuple[Vertex, float]]:
            return adj.get(v, [])

        state = SearchState()
        stats = SearchStats()
        for root in roots:
            if state.is_visited(root):
                continue
            greedy_search(
                neighbors,
                root,
                accumulate=False,
                should_stop=self.should_stop,
                state=state,
                stats=stats,
            )
        self.last_heap_pops = stats.heap_pops
        self.last_stale_pops = stats.stale_pops

        edges = [
            Edge(state.vertices[p], v, g)
            for v, p, g in zip(state.vertices, state.parent, state.g_cost)
            if p != NO_PARENT
        ]
        return _tree(edges, len(adj))


class KruskalEngine(SpanningTreeEngine):
    """
    Kruskal's algorithm: scan edges by ascending weight and keep those that
    join two different components. Ties keep the graph's edge order.

    Complexity:
        O(E log E)
    """

    def minimum_spanning_tree(self, graph: Graph) -> SpanningTree:
        vertices = list(graph.nodes())
        uf = UnionFind(vertices)
        mst: List[Edge] = []
        for edge in sorted(graph.edges(), key=lambda e: e.weight):
            if uf.union(edge.source, edge.destination):
                mst.append(edge)
                if len(mst) == len(vertices) - 1:
                    break
        logger.debug("kruskal: %d edges, %d components", len(mst), uf.component_count)
        return _tree(mst, len(vertices))


class BoruvkaEngine(SpanningTreeEngine):
    """
    Boruvka's algorithm: every round, each component picks its cheapest
    outgoing edge and all picks are merged at once.

    Ties are broken by edge position so all components agree on a single
    total order, which keeps the picks cycle-free.

    Complexity:
        O(E log V)
    """

    def __init__(self) -> None:
        self.last_rounds = 0

    def minimum_spanning_tree(self, graph: Graph) -> SpanningTree:
        vertices = list(graph.nodes())
        edges = list(graph.edges())
        uf = UnionFind(vertices)
        mst: List[Edge] = []

        self.last_rounds = 0
        while True:
            self.last_rounds += 1
            cheapest: Dict[Vertex, Tuple[float, int]] = {}
            for idx, edge in enumerate(edges):
                c1 = uf.find(edge.source)
                c2 = uf.find(edge.destination)
                if c1 == c2:
                    continue
                rank = (edge.weight, idx)
                for comp in (c1, c2):
                    if comp not in cheapest or rank < cheapest[comp]:
                        cheapest[comp] = rank

            added = 0
            for _, idx in cheapest.values():
                edge = edges[idx]
                if uf.union(edge.source, edge.destination):
                    mst.append(edge)
                    added += 1
            if not added:
                break

        logger.debug("boruvka: %d rounds, %d edges", self.last_rounds, len(mst))
        return _tree(mst, len(vertices))
