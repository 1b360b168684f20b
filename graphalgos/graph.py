"""Adjacency-list graph on nodes ``1..n`` with traversal-based algorithms."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence


class NoEulerianPathError(ValueError):
    """Raised when a graph has no Eulerian path."""


class Graph:
    """Graph on nodes ``1..num_nodes``; each edge may be directed or undirected.

    Undirected edges are stored as two arcs, one in each direction.
    """

    def __init__(self, num_nodes: int = 0) -> None:
        if num_nodes < 0:
            raise ValueError("number of nodes must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(num_nodes + 1)]
        self._edges: list[tuple[int, int, int]] = []
        self._weights: dict[tuple[int, int], int] = {}

    @property
    def num_nodes(self) -> int:
        return len(self._adjacency) - 1

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.num_nodes:
            raise IndexError(f"node {node} out of range")

    def _nodes(self) -> range:
        return range(1, self.num_nodes + 1)

    def add_edge(self, u: int, v: int, weight: int = 1, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v`` (both ways unless ``directed``)."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._weights[(u, v)] = weight
        if not directed:
            self._adjacency[v].append(u)
            self._weights[(v, u)] = weight
        self._edges.append((u, v, weight))

    def neighbours(self, node: int) -> tuple[int, ...]:
        """Nodes reachable from ``node`` by one arc, in insertion order."""
        self._check(node)
        return tuple(self._adjacency[node])

    def weight(self, u: int, v: int) -> int:
        """Weight of the arc from ``u`` to ``v``; KeyError if there is none."""
        try:
            return self._weights[(u, v)]
        except KeyError:
            raise KeyError(f"no edge from {u} to {v}") from None

    def edges(self) -> list[tuple[int, int, int]]:
        """Edges as ``(u, v, weight)`` triples in the order they were added."""
        return list(self._edges)

    def _arc_count(self) -> int:
        return sum(len(adjacent) for adjacent in self._adjacency)

    def bfs(self, node: int) -> list[int | None]:
        """Breadth-first predecessors from ``node``, indexed by node.

        Entry 0 is unused; the start and unreachable nodes map to None.
        """
        self._check(node)
        prev: list[int | None] = [None] * (self.num_nodes + 1)
        visited = [False] * (self.num_nodes + 1)
        visited[node] = True
        queue = deque([node])
        while queue:
            current = queue.popleft()
            for child in self._adjacency[current]:
                if not visited[child]:
                    visited[child] = True
                    prev[child] = current
                    queue.append(child)
        return prev

    def dfs(self) -> int:
        """Depth-first search over every node; return the number of trees started."""
        visited = [False] * (self.num_nodes + 1)
        trees = 0
        for root in self._nodes():
            if visited[root]:
                continue
            trees += 1
            visited[root] = True
            stack = [root]
            while stack:
                for child in self._adjacency[stack.pop()]:
                    if not visited[child]:
                        visited[child] = True
                        stack.append(child)
        return trees

    def _low_link(self) -> tuple[set[int], list[tuple[int, int]]]:
        """Articulation points and bridges of the undirected graph."""
        size = self.num_nodes + 1
        ids = [-1] * size
        low = [0] * size
        counter = 0
        articulation: set[int] = set()
        bridges: list[tuple[int, int]] = []

        for root in self._nodes():
            if ids[root] != -1:
                continue
            ids[root] = low[root] = counter
            counter += 1
            root_children = 0
            stack: list[tuple[int, int | None, Iterator[int]]] = [
                (root, None, iter(self._adjacency[root]))
            ]
            while stack:
                node, parent, remaining = stack[-1]
                for child in remaining:
                    if child == parent:
                        continue
                    if ids[child] == -1:
                        ids[child] = low[child] = counter
                        counter += 1
                        if node == root:
                            root_children += 1
                        stack.append((child, node, iter(self._adjacency[child])))
                        break
                    low[node] = min(low[node], ids[child])
                else:
                    stack.pop()
                    if stack:
                        above = stack[-1][0]
                        low[above] = min(low[above], low[node])
                        if ids[above] < low[node]:
                            bridges.append((above, node))
                        if above != root and ids[above] <= low[node]:
                            articulation.add(above)
            if root_children > 1:
                articulation.add(root)
        return articulation, bridges

    def articulation_points(self) -> list[int]:
        """Nodes whose removal disconnects their component, ascending."""
        articulation, _ = self._low_link()
        return sorted(articulation)

    def bridges(self) -> list[tuple[int, int]]:
        """Edges whose removal disconnects their component, as ``(parent, child)``."""
        _, bridges = self._low_link()
        return bridges

    def strongly_connected_components(self) -> list[list[int]]:
        """Strongly connected components by Tarjan's algorithm.

        Each component lists its nodes in the order they leave the stack,
        ending with the component's root.
        """
        size = self.num_nodes + 1
        ids = [-1] * size
        low = [0] * size
        on_stack = [False] * size
        pending: list[int] = []
        components: list[list[int]] = []
        counter = 0

        def enter(node: int) -> None:
            nonlocal counter
            ids[node] = low[node] = counter
            counter += 1
            pending.append(node)
            on_stack[node] = True

        for root in self._nodes():
            if ids[root] != -1:
                continue
            enter(root)
            work: list[tuple[int, Iterator[int]]] = [(root, iter(self._adjacency[root]))]
            while work:
                node, remaining = work[-1]
                for child in remaining:
                    if ids[child] == -1:
                        enter(child)
                        work.append((child, iter(self._adjacency[child])))
                        break
                    if on_stack[child]:
                        low[node] = min(low[node], low[child])
                else:
                    work.pop()
                    if low[node] == ids[node]:
                        component: list[int] = []
                        while True:
                            member = pending.pop()
                            on_stack[member] = False
                            component.append(member)
                            if member == node:
                                break
                        components.append(component)
                    if work and on_stack[node]:
                        above = work[-1][0]
                        low[above] = min(low[above], low[node])
        return components

    def topological_sort(self) -> list[int]:
        """Nodes in reverse depth-first finishing order."""
        visited = [False] * (self.num_nodes + 1)
        order: list[int] = []
        for root in self._nodes():
            if visited[root]:
                continue
            visited[root] = True
            stack: list[tuple[int, Iterator[int]]] = [(root, iter(self._adjacency[root]))]
            while stack:
                node, remaining = stack[-1]
                for child in remaining:
                    if not visited[child]:
                        visited[child] = True
                        stack.append((child, iter(self._adjacency[child])))
                        break
                else:
                    order.append(node)
                    stack.pop()
        order.reverse()
        return order

    def _degrees(self) -> tuple[list[int], list[int]]:
        in_degree = [0] * (self.num_nodes + 1)
        out_degree = [0] * (self.num_nodes + 1)
        for node in self._nodes():
            out_degree[node] = len(self._adjacency[node])
            for child in self._adjacency[node]:
                in_degree[child] += 1
        return in_degree, out_degree

    def has_eulerian_path(self) -> bool:
        """True if the arc degrees allow a path using every arc once."""
        in_degree, out_degree = self._degrees()
        starts = ends = 0
        for node in self._nodes():
            difference = out_degree[node] - in_degree[node]
            if abs(difference) > 1:
                return False
            if difference == 1:
                starts += 1
            elif difference == -1:
                ends += 1
        return (starts, ends) in ((0, 0), (1, 1))

    def _eulerian_start(self) -> int:
        in_degree, out_degree = self._degrees()
        start = 0
        for node in self._nodes():
            if out_degree[node] - in_degree[node] == 1:
                return node
            if out_degree[node]:
                start = node
        return start

    def eulerian_path(self) -> list[int]:
        """A path that uses every arc exactly once, as a list of nodes.

        Raises NoEulerianPathError if the degrees forbid one or the arcs
        are not all connected. A graph without edges gives an empty list.
        """
        if not self.has_eulerian_path():
            raise NoEulerianPathError("no Eulerian path: node degrees do not allow one")
        arcs = self._arc_count()
        if arcs == 0:
            return []
        remaining = [iter(adjacent) for adjacent in self._adjacency]
        stack = [self._eulerian_start()]
        path: list[int] = []
        while stack:
            following = next(remaining[stack[-1]], None)
            if following is None:
                path.append(stack.pop())
            else:
                stack.append(following)
        path.reverse()
        if len(path) != arcs + 1:
            raise NoEulerianPathError("no Eulerian path: graph is disconnected")
        return path


def reconstruct_path(prev: Sequence[int | None], start: int, end: int) -> list[int]:
    """Path from ``start`` to ``end`` following ``prev``; empty if unreachable."""
    path = [end]
    node: int | None = prev[end]
    while node is not None:
        path.append(node)
        node = prev[node]
    path.reverse()
    return path if path[0] == start else []