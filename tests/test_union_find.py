"""
Unit tests for UnionFind and its helpers.
"""

import random

from union_find import UnionFind, connected_components, contains_cycle


def test_singletons_start_as_own_roots():
    uf = UnionFind(range(4))

    assert [uf.find(v) for v in range(4)] == [0, 1, 2, 3]
    assert uf.component_count == 4
    assert len(uf) == 4


def test_union_reports_cycle_on_second_join():
    uf = UnionFind()

    assert uf.union("a", "b") is True
    assert uf.union("b", "c") is True
    # a and c are already connected through b
    assert uf.union("a", "c") is False
    assert uf.connected("a", "c")
    assert uf.component_count == 1


def test_unknown_vertices_registered_lazily():
    uf = UnionFind()

    assert "x" not in uf
    assert uf.find("x") == "x"
    assert "x" in uf
    assert uf.component_count == 1


def test_union_by_rank_keeps_taller_root():
    uf = UnionFind(range(4))
    uf.union(0, 1)  # rank(0) == 1
    root = uf.find(0)
    uf.union(2, root)  # rank(2) == 0 goes under the rank-1 root

    assert uf.find(2) == root


def test_large_union_sequence():
    """Tens of thousands of unions collapse into one component."""
    n = 50_000
    uf = UnionFind(range(n))
    for i in range(1, n):
        uf.union(i - 1, i)

    root = uf.find(n - 1)
    assert all(uf.find(i) == root for i in range(0, n, 997))
    assert uf.component_count == 1


def test_find_is_idempotent_and_stable_under_unrelated_unions():
    rng = random.Random(7)
    uf = UnionFind(range(20))
    for _ in range(8):
        uf.union(rng.randrange(10), rng.randrange(10))

    reps = {x: uf.find(x) for x in range(10)}
    assert {x: uf.find(x) for x in range(10)} == reps

    # unions confined to 10..19 never touch the sets of 0..9
    for _ in range(15):
        uf.union(10 + rng.randrange(10), 10 + rng.randrange(10))
    assert {x: uf.find(x) for x in range(10)} == reps


def test_connected_components_groups_by_root():
    comps = connected_components(range(5), [(0, 1), (1, 2), (3, 4)])

    assert sorted(sorted(c) for c in comps) == [[0, 1, 2], [3, 4]]


def test_connected_components_keeps_isolated_vertices():
    comps = connected_components(["a", "b", "c"], [("a", "b")])

    assert sorted(sorted(c) for c in comps) == [["a", "b"], ["c"]]


def test_contains_cycle():
    assert contains_cycle([(0, 1), (1, 2), (2, 0)]) is True
    assert contains_cycle([(0, 1), (1, 2), (3, 4)]) is False
    assert contains_cycle([(5, 5)]) is True
    assert contains_cycle([]) is False
