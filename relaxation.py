"""
Greedy frontier loop shared by Dijkstra, A* and Prim.

All three algorithms pop the cheapest frontier vertex, finalise it, and relax
its outgoing edges. They differ only in how a tentative cost is formed
(path sum vs. single edge weight), whether a heuristic is added to the
priority key, and whether the loop stops at a goal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple
import logging

from errors import NegativeWeightError, SearchCancelled
from frontier import PriorityFrontier
from graph import Vertex
from search_state import SearchState

logger = logging.getLogger(__name__)

NeighborFn = Callable[[Vertex], Iterable[Tuple[Vertex, float]]]

_NO_GOAL = object()


@dataclass
class SearchStats:
    """Instrumentation counters for one run."""
    heap_pops: int = 0
    heap_pushes: int = 0
    edges_examined: int = 0
    relaxed: int = 0
    stale_pops: int = 0
    finalized: List[Tuple[Vertex, float]] = field(default_factory=list)


def greedy_search(
    neighbors: NeighborFn,
    source: Vertex,
    *,
    goal: object = _NO_GOAL,
    accumulate: bool = True,
    heuristic: Optional[Callable[[Vertex], float]] = None,
    node_cost: Optional[Callable[[Vertex], float]] = None,
    should_stop: Optional[Callable[[], bool]] = None,
    state: Optional[SearchState] = None,
    stats: Optional[SearchStats] = None,
) -> SearchState:
    """
    Run the frontier loop from source and return the populated SearchState.

    Args:
        neighbors: vertex -> iterable of (neighbor, weight).
        source: start vertex; its cost is set to 0.
        goal: stop as soon as this vertex is popped. Without a goal the loop
            runs until the frontier is empty.
        accumulate: tentative cost is g[u] + w when True (shortest paths),
            w alone when False (Prim).
        heuristic: v -> estimate of remaining cost; priority becomes g + h.
        node_cost: extra cost charged for entering v; must be >= 0.
        should_stop: polled once per iteration; a True result raises
            SearchCancelled.
        state: an existing state to extend (Prim grows a forest this way).
            A source that is already finalised in it leaves it unchanged.
        stats: counters to update in place.

    Raises:
        NegativeWeightError: on the first negative edge or node cost met
            while expanding.
    """
    if state is None:
        state = SearchState()
    if stats is None:
        stats = SearchStats()

    def key_for(idx: int) -> float:
        g = state.g_cost[idx]
        if heuristic is None:
            return g
        h = state.h_cost[idx]
        if h is None:
            h = heuristic(state.vertices[idx])
            if h < 0:
                raise ValueError(
                    f"Heuristic returned {h} for {state.vertices[idx]!r}; estimates must be >= 0"
                )
            state.h_cost[idx] = h
        return g + h

    frontier: PriorityFrontier[int] = PriorityFrontier()
    src = state.index_of(source)
    if state.visited[src]:
        # Already finalised by an earlier run on this state.
        return state
    state.g_cost[src] = 0.0
    frontier.push(src, key_for(src))
    stats.heap_pushes += 1

    while frontier:
        if should_stop is not None and should_stop():
            raise SearchCancelled(f"Search from {source!r} cancelled")

        u, _ = frontier.pop_min()
        stats.heap_pops += 1

        # Stale entry: u was already finalised by a cheaper one.
        if state.visited[u]:
            stats.stale_pops += 1
            continue

        state.visited[u] = True
        g_u = state.g_cost[u]
        vertex = state.vertices[u]
        stats.finalized.append((vertex, g_u))

        if goal is not _NO_GOAL and vertex == goal:
            break

        for v_vertex, w in neighbors(vertex):
            stats.edges_examined += 1
            if w < 0:
                raise NegativeWeightError(vertex, v_vertex, w)

            v = state.index_of(v_vertex)
            if state.visited[v]:
                continue

            tentative = g_u + w if accumulate else w
            if node_cost is not None:
                extra = node_cost(v_vertex)
                if extra < 0:
                    raise NegativeWeightError(vertex, v_vertex, extra)
                tentative += extra

            if tentative < state.g_cost[v]:
                state.g_cost[v] = tentative
                state.parent[v] = u
                frontier.push(v, key_for(v))
                stats.heap_pushes += 1
                stats.relaxed += 1

    logger.debug(
        "search from %r: pops=%d pushes=%d stale=%d relaxed=%d finalized=%d",
        source,
        stats.heap_pops,
        stats.heap_pushes,
        stats.stale_pops,
        stats.relaxed,
        len(stats.finalized),
    )
    return state

