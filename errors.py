"""
Exception types shared by the graph algorithms.

Precondition violations (negative weights where forbidden, unknown vertices)
raise. Absence of a result (no path, disconnected graph, negative cycle) is a
return value, never an exception.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional


class GraphError(Exception):
    """Base class for all toolkit errors."""


class NegativeWeightError(GraphError, ValueError):
    """
    Raised by Dijkstra, A* and Prim when relaxation meets a negative edge.

    These algorithms have no defined behaviour under negative weights; use
    BellmanFordEngine for such graphs.
    """

    def __init__(self, source: Hashable, destination: Hashable, weight: float) -> None:
        self.source = source
        self.destination = destination
        self.weight = weight
        super().__init__(
            f"Edge {source!r} -> {destination!r} has negative weight {weight}; "
            "use BellmanFordEngine for graphs with negative weights."
        )


class EmptyFrontierError(GraphError, IndexError):
    """Raised when popping from an empty PriorityFrontier."""


class InvalidVertexError(GraphError, KeyError):
    """Raised at call time when a vertex is unknown to the graph."""

    def __init__(self, vertex: Any, role: Optional[str] = None) -> None:
        self.vertex = vertex
        self.role = role
        label = f"{role} vertex" if role else "vertex"
        super().__init__(f"Unknown {label} {vertex!r}: it was never added to the graph.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class SearchCancelled(GraphError):
    """Raised when a cooperative cancellation check stops a running search."""
