"""Minimum spanning trees by Prim's algorithm on a matrix and Kruskal's on an edge list."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    u: int
    v: int
    weight: int


class UnionFind:
    """Disjoint sets with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, u: int) -> int:
        """Representative of the set holding ``u``."""
        root = u
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[u] != root:
            self.parent[u], u = root, self.parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return whether they were separate."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self.rank[root_u] > self.rank[root_v]:
            self.parent[root_v] = root_u
        elif self.rank[root_u] < self.rank[root_v]:
            self.parent[root_u] = root_v
        else:
            self.parent[root_v] = root_u
            self.rank[root_u] += 1
        return True


def prim(n: int, matrix: Sequence[Sequence[int]]) -> tuple[int, list[Edge]]:
    """Grow a spanning tree from vertex 0 over an adjacency matrix (0 means no edge).

    Returns the total cost and the tree edges as ``Edge(parent, vertex, weight)``
    for vertices 1..n-1 in order; vertices unreachable from 0 are left out.
    """
    if n < 1:
        raise ValueError("graph must have at least one vertex")
    key = [math.inf] * n
    in_tree = [False] * n
    parent: list[int | None] = [None] * n
    key[0] = 0
    heap = [(0, 0)]
    cost = 0
    while heap:
        _, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        cost += key[u]
        for v, weight in enumerate(matrix[u]):
            if weight != 0 and not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
                heapq.heappush(heap, (weight, v))
    edges = [
        Edge(p, vertex, matrix[vertex][p])
        for vertex, p in enumerate(parent)
        if vertex > 0 and p is not None
    ]
    return cost, edges


def kruskal(n: int, edges: Iterable[Edge]) -> tuple[int, list[Edge]]:
    """Pick edges by ascending weight that join separate components.

    Returns the total cost and the chosen edges in the order they were taken.
    """
    sets = UnionFind(n)
    chosen: list[Edge] = []
    cost = 0
    for edge in sorted(edges, key=lambda e: e.weight):
        if sets.union(edge.u, edge.v):
            chosen.append(edge)
            cost += edge.weight
    return cost, chosen