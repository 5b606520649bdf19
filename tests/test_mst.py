import pytest

from dslab.mst import Edge, UnionFind, kruskal, prim


def matrix_from(n, edges):
    matrix = [[0] * n for _ in range(n)]
    for edge in edges:
        matrix[edge.u][edge.v] = edge.weight
        matrix[edge.v][edge.u] = edge.weight
    return matrix


TRIANGLE = [Edge(0, 1, 1), Edge(1, 2, 2), Edge(0, 2, 3)]

LARGER = [
    Edge(0, 1, 4),
    Edge(0, 2, 3),
    Edge(1, 2, 1),
    Edge(1, 3, 2),
    Edge(2, 3, 4),
    Edge(3, 4, 2),
    Edge(4, 5, 6),
    Edge(2, 5, 7),
]


def test_triangle_drops_heaviest_edge():
    cost, edges = kruskal(3, TRIANGLE)
    assert cost == 3
    assert Edge(0, 2, 3) not in edges
    prim_cost, prim_edges = prim(3, matrix_from(3, TRIANGLE))
    assert prim_cost == cost
    assert {(e.u, e.v) for e in prim_edges} == {(0, 1), (1, 2)}


def test_prim_and_kruskal_agree_on_cost():
    n = 6
    prim_cost, prim_edges = prim(n, matrix_from(n, LARGER))
    kruskal_cost, kruskal_edges = kruskal(n, LARGER)
    assert prim_cost == kruskal_cost
    assert len(prim_edges) == len(kruskal_edges) == n - 1
    assert sum(e.weight for e in prim_edges) == prim_cost
    assert sum(e.weight for e in kruskal_edges) == kruskal_cost


def test_spanning_tree_connects_every_vertex():
    n = 6
    _, edges = kruskal(n, LARGER)
    sets = UnionFind(n)
    for edge in edges:
        assert sets.union(edge.u, edge.v)
    assert len({sets.find(v) for v in range(n)}) == 1


def test_kruskal_takes_edges_in_weight_order_and_keeps_input():
    edges = list(LARGER)
    _, chosen = kruskal(6, edges)
    weights = [e.weight for e in chosen]
    assert weights == sorted(weights)
    assert edges == LARGER


def test_prim_skips_unreachable_vertices():
    matrix = matrix_from(4, [Edge(0, 1, 5), Edge(2, 3, 1)])
    cost, edges = prim(4, matrix)
    assert cost == 5
    assert edges == [Edge(0, 1, 5)]


def test_prim_requires_a_vertex():
    with pytest.raises(ValueError):
        prim(0, [])


def test_union_find_merges_and_reports():
    sets = UnionFind(4)
    assert sets.find(2) == 2
    assert sets.union(0, 1)
    assert sets.union(2, 3)
    assert not sets.union(1, 0)
    assert sets.find(0) == sets.find(1)
    assert sets.find(1) != sets.find(2)
    assert sets.union(1, 3)
    assert len({sets.find(v) for v in range(4)}) == 1