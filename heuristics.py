"""
Heuristic strategies for A*.

A heuristic is a plain callable ``h(vertex, goal) -> float``. Factories here
close over a coordinate mapping (vertex -> point); vertices without
coordinates get an estimate of 0, which is always admissible.

A* is only optimal when the heuristic is admissible (never overestimates the
remaining cost) and consistent (h(u) <= w(u, v) + h(v) for every edge). This
is a precondition on the caller, not something the search verifies.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Sequence, Tuple

import numpy as np

from graph import Vertex

Heuristic = Callable[[Vertex, Vertex], float]
Coordinates = Mapping[Vertex, Sequence[float]]


def zero_heuristic(vertex: Vertex, goal: Vertex) -> float:
    """h = 0: A* degenerates to Dijkstra."""
    return 0.0


def _points(coords: Coordinates, a: Vertex, b: Vertex) -> Optional[Tuple[np.ndarray, np.ndarray]]:
    pa = coords.get(a)
    pb = coords.get(b)
    if pa is None or pb is None:
        return None
    return np.asarray(pa, dtype=float), np.asarray(pb, dtype=float)


def manhattan(coords: Coordinates, scale: float = 1.0) -> Heuristic:
    """
    L1 distance. Admissible on grids with 4-connected moves of cost >= scale.
    """

    def h(vertex: Vertex, goal: Vertex) -> float:
        pts = _points(coords, vertex, goal)
        if pts is None:
            return 0.0
        return scale * float(np.abs(pts[0] - pts[1]).sum())

    return h


def euclidean(coords: Coordinates, scale: float = 1.0) -> Heuristic:
    """
    L2 distance. Admissible whenever edge weights are at least scale times the
    straight-line distance between their endpoints.
    """

    def h(vertex: Vertex, goal: Vertex) -> float:
        pts = _points(coords, vertex, goal)
        if pts is None:
            return 0.0
        return scale * float(np.linalg.norm(pts[0] - pts[1]))

    return h


def chebyshev(coords: Coordinates, scale: float = 1.0) -> Heuristic:
    """L-infinity distance, for 8-connected grids with unit diagonal moves."""

    def h(vertex: Vertex, goal: Vertex) -> float:
        pts = _points(coords, vertex, goal)
        if pts is None:
            return 0.0
        return scale * float(np.abs(pts[0] - pts[1]).max(initial=0.0))

    return h


def cosine(coords: Coordinates, scale: float = 100.0) -> Heuristic:
    """
    Cosine distance ``scale * (1 - cos(theta))`` between coordinate vectors.

    Opt-in only: this is not a metric on positions and is generally NOT
    admissible, so A* may return a suboptimal path with it. A zero vector
    has no direction and yields 0.
    """

    def h(vertex: Vertex, goal: Vertex) -> float:
        pts = _points(coords, vertex, goal)
        if pts is None:
            return 0.0
        na = np.linalg.norm(pts[0])
        nb = np.linalg.norm(pts[1])
        if na == 0.0 or nb == 0.0:
            return 0.0
        similarity = float(np.dot(pts[0], pts[1]) / (na * nb))
        return scale * max(0.0, 1.0 - similarity)

    return h


def scaled(heuristic: Heuristic, factor: float) -> Heuristic:
    """
    Weighted A*: multiply an estimate by factor.

    factor > 1 trades optimality for fewer expansions (the result costs at
    most factor times the optimum for an admissible base heuristic).
    """
    if factor < 0:
        raise ValueError("Heuristic factor must be non-negative")

    def h(vertex: Vertex, goal: Vertex) -> float:
        return factor * heuristic(vertex, goal)

    return h


HEURISTICS = {
    "zero": lambda coords: zero_heuristic,
    "manhattan": manhattan,
    "euclidean": euclidean,
    "chebyshev": chebyshev,
    "cosine": cosine,
}


def by_name(name: str, coords: Coordinates) -> Heuristic:
    """Resolve a heuristic by config name (e.g. from a YAML query)."""
    try:
        factory = HEURISTICS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {name!r}. Supported: {', '.join(sorted(HEURISTICS))}."
        ) from None
    return factory(coords)
