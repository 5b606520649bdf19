"""Undirected graph stored as adjacency lists, with traversals and component counting."""

from __future__ import annotations

from collections import deque


class Graph:
    """Undirected graph on vertices ``0 .. n-1``; neighbours keep insertion order."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of nodes must not be negative")
        self.size = n
        self.adjacency: list[list[int]] = [[] for _ in range(n)]
        self.connected_components = 0

    def _check_vertex(self, vertex: int, what: str) -> None:
        if not 0 <= vertex < self.size:
            raise ValueError(f"invalid {what}: {vertex}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``; raises ValueError if either is out of range."""
        if not (0 <= u < self.size and 0 <= v < self.size):
            raise ValueError(f"invalid edge: ({u}, {v})")
        self.adjacency[u].append(v)
        self.adjacency[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check_vertex(start, "starting node")
        visited = [False] * self.size
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self.adjacency[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def _visit(self, start: int, visited: list[bool], order: list[int]) -> None:
        visited[start] = True
        order.append(start)
        pending = [iter(self.adjacency[start])]
        while pending:
            for neighbour in pending[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    pending.append(iter(self.adjacency[neighbour]))
                    break
            else:
                pending.pop()

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first order."""
        self._check_vertex(start, "starting node")
        visited = [False] * self.size
        order: list[int] = []
        self._visit(start, visited, order)
        return order

    def count_components(self) -> int:
        """Number of connected components; also stored in ``connected_components``."""
        visited = [False] * self.size
        order: list[int] = []
        count = 0
        for vertex in range(self.size):
            if not visited[vertex]:
                self._visit(vertex, visited, order)
                count += 1
        self.connected_components = count
        return count

    def degrees(self) -> list[int]:
        """Degree of every vertex, indexed by vertex."""
        return [len(neighbours) for neighbours in self.adjacency]