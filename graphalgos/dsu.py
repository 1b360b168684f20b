"""Disjoint set union with component statistics, and Kruskal's MST."""

from __future__ import annotations

from typing import Iterable


class DisjointSet:
    """Union-find over vertices ``0..n-1`` tracking vertex and edge counts."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("number of vertices must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n
        self._edges = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"vertex {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the component holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Record an edge between ``x`` and ``y``; return True if two components merged."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            self._edges[root_x] += 1
            return False
        if self._size[root_x] > self._size[root_y]:
            big, small = root_x, root_y
        else:
            big, small = root_y, root_x
        self._parent[small] = big
        self._size[big] += self._size[small]
        self._edges[big] += self._edges[small] + 1
        return True

    def same(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` lie in the same component."""
        return self.find(x) == self.find(y)

    def component_size(self, x: int) -> int:
        """Number of vertices in the component of ``x``."""
        return self._size[self.find(x)]

    def component_edges(self, x: int) -> int:
        """Number of edges recorded within the component of ``x``."""
        return self._edges[self.find(x)]

    def component_count(self) -> int:
        """Number of distinct components."""
        return sum(1 for vertex, parent in enumerate(self._parent) if vertex == parent)


def kruskal_mst(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[int, list[tuple[int, int]]]:
    """Return ``(cost, edges)`` of a minimum spanning forest on vertices ``0..n-1``.

    ``edges`` holds ``(u, v, weight)`` triples; ties keep their input order.
    """
    components = DisjointSet(n)
    cost = 0
    tree: list[tuple[int, int]] = []
    for u, v, weight in sorted(edges, key=lambda edge: edge[2]):
        if not components.same(u, v):
            components.unite(u, v)
            cost += weight
            tree.append((u, v))
    return cost, tree