"""Shortest paths, minimum spanning trees and travelling-salesman tours."""

from __future__ import annotations

import heapq
import math
from typing import Iterator, Sequence

from graphalgos.graph import Graph, reconstruct_path

INF = math.inf


class DisconnectedGraphError(ValueError):
    """Raised when an algorithm needs a connected graph and gets one that is not."""


def _check_node(graph: Graph, node: int) -> None:
    if not 1 <= node <= graph.num_nodes:
        raise IndexError(f"node {node} out of range")


def _arcs(graph: Graph) -> Iterator[tuple[int, int, float]]:
    """Every arc as ``(from, to, weight)``; undirected edges give two arcs."""
    for node in range(1, graph.num_nodes + 1):
        for child in graph.neighbours(node):
            yield node, child, graph.weight(node, child)


def bellman_ford(graph: Graph, start: int) -> list[float]:
    """Distances from ``start`` indexed by node (entry 0 unused).

    Unreachable nodes get ``inf``; nodes whose distance can be lowered
    without bound by a negative cycle get ``-inf``.
    """
    _check_node(graph, start)
    n = graph.num_nodes
    dist: list[float] = [INF] * (n + 1)
    dist[start] = 0
    arcs = list(_arcs(graph))

    for _ in range(n - 1):
        for u, v, weight in arcs:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight

    for _ in range(n - 1):
        for u, v, weight in arcs:
            if dist[u] + weight < dist[v]:
                dist[v] = -INF
    return dist


def dijkstra(graph: Graph, start: int) -> tuple[list[float], list[int | None]]:
    """Lazy Dijkstra from ``start``; returns ``(dist, prev)`` indexed by node.

    Weights must not be negative. Unreachable nodes have distance ``inf``
    and no predecessor.
    """
    _check_node(graph, start)
    n = graph.num_nodes
    dist: list[float] = [INF] * (n + 1)
    prev: list[int | None] = [None] * (n + 1)
    visited = [False] * (n + 1)

    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        distance, node = heapq.heappop(heap)
        if dist[node] < distance:
            continue
        visited[node] = True
        for child in graph.neighbours(node):
            if visited[child]:
                continue
            candidate = dist[node] + graph.weight(node, child)
            if candidate < dist[child]:
                dist[child] = candidate
                prev[child] = node
                heapq.heappush(heap, (candidate, child))
    return dist, prev


def floyd_warshall(
    graph: Graph, propagate_negative_cycles: bool = False
) -> list[list[float]]:
    """All-pairs shortest distances as a matrix indexed ``[from][to]``.

    Row and column 0 are unused. Missing paths are ``inf``. With
    ``propagate_negative_cycles`` every pair whose path can pass through a
    negative cycle is set to ``-inf``.
    """
    n = graph.num_nodes
    dp: list[list[float]] = [[INF] * (n + 1) for _ in range(n + 1)]
    for node in range(1, n + 1):
        dp[node][node] = 0
    for u, v, weight in _arcs(graph):
        dp[u][v] = weight

    nodes = range(1, n + 1)
    for k in nodes:
        for i in nodes:
            for j in nodes:
                through = dp[i][k] + dp[k][j]
                if through < dp[i][j]:
                    dp[i][j] = through

    if propagate_negative_cycles:
        for k in nodes:
            for i in nodes:
                for j in nodes:
                    if dp[i][k] + dp[k][j] < dp[i][j]:
                        dp[i][j] = -INF
    return dp


def path_from_prev(prev: Sequence[int | None], start: int, end: int) -> list[int]:
    """Path from ``start`` to ``end`` along predecessors; empty if there is none."""
    return reconstruct_path(prev, start, end)


def dag_shortest_path(graph: Graph) -> tuple[list[float], list[int | None]]:
    """Shortest distances in a DAG from the first node of its topological order.

    Returns ``(dist, prev)`` indexed by node.
    """
    order = graph.topological_sort()
    if not order:
        raise ValueError("graph has no nodes")
    n = graph.num_nodes
    dist: list[float] = [INF] * (n + 1)
    prev: list[int | None] = [None] * (n + 1)
    dist[order[0]] = 0
    for node in order:
        for child in graph.neighbours(node):
            candidate = dist[node] + graph.weight(node, child)
            if candidate < dist[child]:
                dist[child] = candidate
                prev[child] = node
    return dist, prev


def prims_mst(graph: Graph) -> tuple[float, list[list[int]]]:
    """Spanning tree grown by taking edges in order of weight.

    An edge is taken while at least one of its ends is not yet covered.
    Returns ``(cost, tree)`` where ``tree`` is an adjacency list indexed
    by node. Raises DisconnectedGraphError if some node stays uncovered.
    """
    n = graph.num_nodes
    visited = [False] * (n + 1)
    tree: list[list[int]] = [[] for _ in range(n + 1)]
    cost: float = 0
    covered = 0

    for u, v, weight in sorted(graph.edges(), key=lambda edge: edge[2]):
        if covered == n:
            break
        if visited[u] and visited[v]:
            continue
        for end in (u, v):
            if not visited[end]:
                visited[end] = True
                covered += 1
        tree[u].append(v)
        tree[v].append(u)
        cost += weight

    if covered < n:
        raise DisconnectedGraphError("graph is disconnected")
    return cost, tree


def _square(matrix: Sequence[Sequence[float | None]]) -> list[list[float]]:
    rows = [[INF if value is None else value for value in row] for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def prim_matrix(cost: Sequence[Sequence[float | None]]) -> list[tuple[int, int]]:
    """Prim's algorithm on a symmetric cost matrix (``inf`` or None: no edge).

    Returns the tree edges in the order they are chosen, starting with the
    cheapest edge of the graph.
    """
    weights = _square(cost)
    n = len(weights)
    if n < 2:
        return []

    best = INF
    first: tuple[int, int] | None = None
    for i, row in enumerate(weights):
        for j in range(i + 1, n):
            if row[j] < best:
                best = row[j]
                first = (i, j)
    if first is None:
        raise DisconnectedGraphError("graph has no edges")

    u, v = first
    tree = [first]
    near = {
        i: (u if weights[i][u] < weights[i][v] else v)
        for i in range(n)
        if i not in first
    }

    for _ in range(n - 2):
        best = INF
        chosen: int | None = None
        for j, partner in near.items():
            if weights[j][partner] < best:
                best = weights[j][partner]
                chosen = j
        if chosen is None:
            raise DisconnectedGraphError("graph is disconnected")
        tree.append((chosen, near.pop(chosen)))
        for j in near:
            if weights[j][chosen] < weights[j][near[j]]:
                near[j] = chosen
    return tree


def _members(state: int, n: int) -> Iterator[int]:
    return (node for node in range(n) if state >> node & 1)


def _check_start(weights: list[list[float]], start: int) -> None:
    if not weights:
        raise ValueError("matrix must not be empty")
    if not 0 <= start < len(weights):
        raise IndexError(f"node {start} out of range")


def tsp_table(matrix: Sequence[Sequence[float | None]], start: int = 0) -> list[list[float]]:
    """Held-Karp table: ``table[node][state]`` is the cheapest path from
    ``start`` through the nodes of bitmask ``state`` ending at ``node``.
    """
    weights = _square(matrix)
    _check_start(weights, start)
    n = len(weights)
    table: list[list[float]] = [[INF] * (1 << n) for _ in range(n)]

    for node in range(n):
        if node != start:
            table[node][(1 << node) | (1 << start)] = weights[start][node]

    start_bit = 1 << start
    for state in sorted(range(1 << n), key=int.bit_count):
        if state.bit_count() < 3 or not state & start_bit:
            continue
        for following in _members(state, n):
            if following == start:
                continue
            prior = state ^ (1 << following)
            best = table[following][state]
            for last in _members(state, n):
                if last in (following, start):
                    continue
                candidate = table[last][prior] + weights[last][following]
                if candidate < best:
                    best = candidate
            table[following][state] = best
    return table


def tsp_path(
    matrix: Sequence[Sequence[float | None]], start: int = 0
) -> tuple[float, list[int]]:
    """Cheapest tour from ``start`` through every node and back.

    Returns ``(length, tour)`` where the tour begins and ends with ``start``.
    """
    weights = _square(matrix)
    _check_start(weights, start)
    n = len(weights)
    if n < 2:
        raise ValueError("a tour needs at least two nodes")
    table = tsp_table(weights, start)
    state = (1 << n) - 1

    length = min(
        table[node][state] + weights[node][start] for node in range(n) if node != start
    )

    path = [start] * (n + 1)
    last = start
    for position in range(n - 1, 0, -1):
        index: int | None = None
        for node in _members(state, n):
            if node == start:
                continue
            if index is None:
                index = node
            if table[node][state] + weights[node][last] < table[index][state] + weights[index][last]:
                index = node
        assert index is not None
        path[position] = index
        state ^= 1 << index
        last = index
    return length, path