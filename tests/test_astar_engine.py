"""
Unit tests for AStarEngine.
"""

import math
import random

import pytest

from adjacency_list_graph import AdjacencyListGraph
from astar_engine import AStarEngine
from dijkstra_engine import SimpleDijkstraEngine
from errors import InvalidVertexError, NegativeWeightError
from heuristics import euclidean, manhattan, zero_heuristic


def grid_graph(width: int, height: int, walls=frozenset()):
    """4-connected unit-cost grid; returns (graph, coords)."""
    g = AdjacencyListGraph()
    coords = {}
    for x in range(width):
        for y in range(height):
            if (x, y) in walls:
                continue
            coords[(x, y)] = (x, y)
            g.add_vertex((x, y))
            for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                nxt = (x + dx, y + dy)
                if 0 <= nxt[0] < width and 0 <= nxt[1] < height and nxt not in walls:
                    g.add_edge((x, y), nxt, 1)
    return g, coords


def test_spatial_example_finds_shortest_route():
    coords = {"A": (0, 0), "B": (1, 0), "C": (2, 0), "D": (1, 1), "E": (2, 1)}
    g = AdjacencyListGraph(
        [("A", "B", 1), ("A", "C", 4), ("B", "D", 2), ("C", "E", 3), ("D", "E", 1)]
    )

    result = AStarEngine(euclidean(coords)).shortest_path(g, "A", "E")

    assert result is not None
    assert result.path == ("A", "B", "D", "E")
    assert result.cost == 4


def test_node_cost_changes_the_route():
    """Entering a vertex charges its traversal cost on top of the edge."""
    node_weight = {"AW": 1, "BW": 3, "CW": 1, "DW": 2, "EW": 1}
    g = AdjacencyListGraph(
        [("AW", "BW", 1), ("AW", "CW", 4), ("BW", "DW", 2), ("CW", "EW", 3), ("DW", "EW", 1)]
    )

    plain = AStarEngine().shortest_path(g, "AW", "EW")
    weighted = AStarEngine(node_cost=node_weight.__getitem__).shortest_path(g, "AW", "EW")

    assert plain is not None and plain.path == ("AW", "BW", "DW", "EW")
    assert weighted is not None
    assert weighted.path == ("AW", "CW", "EW")
    assert weighted.cost == (4 + 1) + (3 + 1)


def test_negative_node_cost_rejected():
    g = AdjacencyListGraph([("A", "B", 1), ("B", "C", 1), ("A", "C", 1)])
    engine = AStarEngine(node_cost={"A": 0, "B": -5, "C": 0}.__getitem__)

    with pytest.raises(NegativeWeightError):
        engine.shortest_path(g, "A", "C")


def test_single_source_costs_charge_node_cost():
    """Point-to-point and single-source queries agree on the same engine."""
    g = AdjacencyListGraph([("A", "B", 1), ("B", "C", 1)])
    engine = AStarEngine(node_cost={"A": 0, "B": 10, "C": 10}.__getitem__)

    result = engine.shortest_path(g, "A", "C")
    dist, prev = engine.shortest_paths(g, "A")

    assert result is not None and result.cost == 22
    assert engine.shortest_path_costs(g, "A")["C"] == 22
    assert dist == {"A": 0, "B": 11, "C": 22}
    assert prev == {"B": "A", "C": "B"}


def test_grid_with_wall_matches_dijkstra():
    walls = frozenset((3, y) for y in range(0, 7))
    g, coords = grid_graph(8, 8, walls)
    start, goal = (0, 0), (7, 0)

    dj = SimpleDijkstraEngine()
    astar = AStarEngine(manhattan(coords))
    expected = dj.shortest_path(g, start, goal)
    result = astar.shortest_path(g, start, goal)

    assert expected is not None and result is not None
    assert result.cost == expected.cost == 21


def test_open_grid_expands_fewer_vertices():
    g, coords = grid_graph(8, 8)

    dj = SimpleDijkstraEngine()
    astar = AStarEngine(manhattan(coords))
    dj.shortest_path(g, (0, 0), (7, 0))
    result = astar.shortest_path(g, (0, 0), (7, 0))

    assert result is not None and result.cost == 7
    # only the straight row has f == 7
    assert [v for v, _ in astar.last_finalized] == [(x, 0) for x in range(8)]
    assert len(astar.last_finalized) < len(dj.last_finalized)


def test_cost_equals_dijkstra_with_consistent_heuristic():
    """Straight-line distance under weights >= distance is admissible and consistent."""
    rng = random.Random(5)
    for _ in range(25):
        n = rng.randint(2, 15)
        coords = {v: (rng.uniform(0, 10), rng.uniform(0, 10)) for v in range(n)}
        g = AdjacencyListGraph()
        for v in range(n):
            g.add_vertex(v)
        for u in range(n):
            for v in range(n):
                if u != v and rng.random() < 0.3:
                    d = math.dist(coords[u], coords[v])
                    g.add_edge(u, v, d * rng.uniform(1.0, 2.0))

        source, goal = rng.randrange(n), rng.randrange(n)
        expected = SimpleDijkstraEngine().shortest_path(g, source, goal)
        result = AStarEngine(euclidean(coords)).shortest_path(g, source, goal)

        if expected is None:
            assert result is None
        else:
            assert result is not None
            assert result.cost == pytest.approx(expected.cost)


def test_zero_heuristic_is_dijkstra():
    g, _ = grid_graph(4, 4)

    expected = SimpleDijkstraEngine().shortest_path(g, (0, 0), (3, 3))
    result = AStarEngine(zero_heuristic).shortest_path(g, (0, 0), (3, 3))

    assert result == expected


def test_h_cost_computed_once_per_vertex():
    g, coords = grid_graph(5, 5)
    calls = []
    base = manhattan(coords)

    def counting(v, goal):
        calls.append(v)
        return base(v, goal)

    AStarEngine(counting).shortest_path(g, (0, 0), (4, 4))

    assert len(calls) == len(set(calls))


def test_no_path_returns_none():
    walls = frozenset((2, y) for y in range(4))
    g, coords = grid_graph(4, 4, walls)

    assert AStarEngine(manhattan(coords)).shortest_path(g, (0, 0), (3, 3)) is None


def test_negative_heuristic_rejected():
    g = AdjacencyListGraph([("A", "B", 1)])

    with pytest.raises(ValueError):
        AStarEngine(lambda v, goal: -1.0).shortest_path(g, "A", "B")


def test_negative_edge_rejected():
    g = AdjacencyListGraph([("A", "B", -1)])

    with pytest.raises(NegativeWeightError):
        AStarEngine().shortest_path(g, "A", "B")


def test_unknown_goal_rejected():
    g = AdjacencyListGraph([("A", "B", 1)])

    with pytest.raises(InvalidVertexError):
        AStarEngine().shortest_path(g, "A", "Z")
