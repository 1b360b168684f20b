"""Directed graphs: cycle detection, Kosaraju components and mother vertices."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable, Iterator, Mapping, Sequence, Union

Adjacency = Union[Mapping[int, Iterable[int]], Sequence[Iterable[int]]]

_ON_STACK = 1
_DONE = 2


def _successors(adjacency: Adjacency, node: int) -> Iterable[int]:
    """Out-neighbours of ``node``; a node with no entry has none."""
    if isinstance(adjacency, Mapping):
        return adjacency.get(node, ())
    if 0 <= node < len(adjacency):
        return adjacency[node]
    return ()


def _all_nodes(adjacency: Adjacency) -> list[int]:
    """Every node that appears in ``adjacency``, in first-seen order."""
    if isinstance(adjacency, Mapping):
        keys: Iterable[int] = adjacency.keys()
    else:
        keys = range(len(adjacency))
    seen: dict[int, None] = {}
    for node in keys:
        seen.setdefault(node, None)
        for successor in _successors(adjacency, node):
            seen.setdefault(successor, None)
    return list(seen)


def _cycle_reachable(adjacency: Adjacency, roots: Iterable[int]) -> bool:
    state: dict[int, int] = {}
    for root in roots:
        if root in state:
            continue
        state[root] = _ON_STACK
        stack: list[tuple[int, Iterator[int]]] = [
            (root, iter(_successors(adjacency, root)))
        ]
        while stack:
            node, remaining = stack[-1]
            for successor in remaining:
                seen = state.get(successor)
                if seen == _ON_STACK:
                    return True
                if seen is None:
                    state[successor] = _ON_STACK
                    stack.append((successor, iter(_successors(adjacency, successor))))
                    break
            else:
                state[node] = _DONE
                stack.pop()
    return False


def has_cycle_from(adjacency: Adjacency, start: int = 0) -> bool:
    """Return True if a directed cycle is reachable from ``start``."""
    return _cycle_reachable(adjacency, [start])


def is_cyclic(adjacency: Adjacency) -> bool:
    """Return True if the directed graph contains any cycle."""
    return _cycle_reachable(adjacency, _all_nodes(adjacency))


def _finish_order(adjacency: Adjacency, nodes: Iterable[int]) -> list[int]:
    """Nodes in the order their depth-first search finishes."""
    visited: set[int] = set()
    order: list[int] = []
    for root in nodes:
        if root in visited:
            continue
        visited.add(root)
        stack: list[tuple[int, Iterator[int]]] = [
            (root, iter(_successors(adjacency, root)))
        ]
        while stack:
            node, remaining = stack[-1]
            for successor in remaining:
                if successor not in visited:
                    visited.add(successor)
                    stack.append((successor, iter(_successors(adjacency, successor))))
                    break
            else:
                order.append(node)
                stack.pop()
    return order


def _reachable(adjacency: Adjacency, start: int) -> set[int]:
    seen = {start}
    queue = deque([start])
    while queue:
        for successor in _successors(adjacency, queue.popleft()):
            if successor not in seen:
                seen.add(successor)
                queue.append(successor)
    return seen


def kosaraju_components(adjacency: Adjacency, nodes: Iterable[int]) -> list[list[int]]:
    """Strongly connected components found by Kosaraju's algorithm.

    Components come in the order they are discovered; each lists its nodes
    in breadth-first order over the reversed graph.
    """
    nodes = list(nodes)
    order = _finish_order(adjacency, nodes)

    reverse: defaultdict[int, list[int]] = defaultdict(list)
    for node in nodes:
        for successor in _successors(adjacency, node):
            reverse[successor].append(node)

    assigned: set[int] = set()
    components: list[list[int]] = []
    for root in reversed(order):
        if root in assigned:
            continue
        assigned.add(root)
        component: list[int] = []
        queue = deque([root])
        while queue:
            node = queue.popleft()
            component.append(node)
            for predecessor in reverse[node]:
                if predecessor not in assigned:
                    assigned.add(predecessor)
                    queue.append(predecessor)
        components.append(component)
    return components


def mother_vertex(adjacency: Adjacency, nodes: Iterable[int]) -> int | None:
    """Return a vertex from which every node is reachable, or None."""
    nodes = list(nodes)
    order = _finish_order(adjacency, nodes)
    if not order:
        raise ValueError("graph has no nodes")
    candidate = order[-1]
    reached = _reachable(adjacency, candidate)
    if all(node in reached for node in nodes):
        return candidate
    return None