"""Undirected adjacency-list graphs: traversal, cycles, components, bipartiteness."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator


class UndirectedGraph:
    """Undirected graph on vertices ``0..vertices-1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, x: int, y: int) -> None:
        """Connect ``x`` and ``y``."""
        self._check(x)
        self._check(y)
        self._adjacency[x].append(y)
        self._adjacency[y].append(x)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Neighbours of ``vertex`` in insertion order."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def format_adjacency(self) -> str:
        """One line per vertex: ``v->n1 n2 ...``."""
        return "\n".join(
            f"{vertex}->{' '.join(map(str, adjacent))}"
            for vertex, adjacent in enumerate(self._adjacency)
        )

    def dfs_order(self) -> list[int]:
        """Depth-first preorder over every component, lowest root first."""
        visited = [False] * self.vertices
        order: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            order.append(root)
            stack: list[Iterator[int]] = [iter(self._adjacency[root])]
            while stack:
                for vertex in stack[-1]:
                    if not visited[vertex]:
                        visited[vertex] = True
                        order.append(vertex)
                        stack.append(iter(self._adjacency[vertex]))
                        break
                else:
                    stack.pop()
        return order

    def bfs_order(self) -> list[int]:
        """Breadth-first order over every component, lowest root first."""
        visited = [False] * self.vertices
        order: list[int] = []
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            queue = deque([root])
            while queue:
                vertex = queue.popleft()
                order.append(vertex)
                for neighbour in self._adjacency[vertex]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        queue.append(neighbour)
        return order

    def has_cycle(self) -> bool:
        """Return True if any component contains a cycle."""
        visited = [False] * self.vertices
        for root in range(self.vertices):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, -1, iter(self._adjacency[root]))]
            while stack:
                vertex, parent, remaining = stack[-1]
                for neighbour in remaining:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, vertex, iter(self._adjacency[neighbour])))
                        break
                    if neighbour != parent:
                        return True
                else:
                    stack.pop()
        return False


def build_adjacency(
    n: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Adjacency lists for vertices ``0..n`` built from ``(u, v)`` pairs."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def count_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components among vertices ``0..n-1``."""
    graph = UndirectedGraph(n)
    for u, v in edges:
        graph.add_edge(u, v)
    visited = [False] * n
    components = 0
    for root in range(n):
        if visited[root]:
            continue
        components += 1
        visited[root] = True
        queue = deque([root])
        while queue:
            for neighbour in graph.neighbours(queue.popleft()):
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
    return components


def is_bipartite(n: int, edges: Iterable[tuple[int, int]], start: int = 1) -> bool:
    """Return True if the component holding ``start`` can be two-coloured.

    Vertices are numbered ``0..n``; only the component reachable from
    ``start`` is examined.
    """
    adjacency = build_adjacency(n, edges)
    if not 0 <= start <= n:
        raise IndexError(f"vertex {start} out of range")
    colour = {start: 0}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour in adjacency[vertex]:
            if neighbour not in colour:
                colour[neighbour] = colour[vertex] ^ 1
                queue.append(neighbour)
            elif colour[neighbour] == colour[vertex]:
                return False
    return True