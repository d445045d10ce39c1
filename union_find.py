"""
Disjoint-set forest with path compression and union by rank.

Used by Kruskal and Boruvka to reject cycle-forming edges, and by the
helpers below for connected components and cycle detection on undirected
edge lists.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Iterator, List, Tuple

Vertex = Hashable


class UnionFind:
    """
    Disjoint sets over hashable vertices.

    Unknown vertices are registered as singletons on first use. Sets only
    ever merge, never split.

    Complexity:
        near O(1) amortised per operation (inverse Ackermann).
    """

    def __init__(self, vertices: Iterable[Vertex] = ()) -> None:
        self._parent: Dict[Vertex, Vertex] = {}
        self._rank: Dict[Vertex, int] = {}
        self._components = 0
        for v in vertices:
            self.add(v)

    def add(self, vertex: Vertex) -> None:
        if vertex not in self._parent:
            self._parent[vertex] = vertex
            self._rank[vertex] = 0
            self._components += 1

    def find(self, vertex: Vertex) -> Vertex:
        """
        Return the representative of vertex's set.

        Iterative two-pass find: locate the root, then point every vertex on
        the walked path straight at it.
        """
        self.add(vertex)
        root = vertex
        while self._parent[root] != root:
            root = self._parent[root]

        while self._parent[vertex] != root:
            nxt = self._parent[vertex]
            self._parent[vertex] = root
            vertex = nxt
        return root

    def union(self, a: Vertex, b: Vertex) -> bool:
        """
        Merge the sets containing a and b.

        Returns False (and changes nothing) when a and b are already in the
        same set, i.e. an edge a-b would close a cycle.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        rank_a = self._rank[root_a]
        rank_b = self._rank[root_b]
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_a > rank_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] = rank_a + 1
        self._components -= 1
        return True

    def connected(self, a: Vertex, b: Vertex) -> bool:
        return self.find(a) == self.find(b)

    @property
    def component_count(self) -> int:
        return self._components

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._parent)


def connected_components(
    vertices: Iterable[Vertex], edges: Iterable[Tuple[Vertex, Vertex]]
) -> List[List[Vertex]]:
    """
    Group vertices into connected components of an undirected edge list.

    Components are listed in order of their first vertex; members keep the
    order in which they were first seen.
    """
    uf = UnionFind(vertices)
    for u, v in edges:
        uf.union(u, v)

    groups: Dict[Vertex, List[Vertex]] = {}
    for v in uf:
        groups.setdefault(uf.find(v), []).append(v)
    return list(groups.values())


def contains_cycle(edges: Iterable[Tuple[Vertex, Vertex]]) -> bool:
    """True if the undirected edge list contains a cycle (self-loops count)."""
    uf = UnionFind()
    for u, v in edges:
        if not uf.union(u, v):
            return True
    return False
