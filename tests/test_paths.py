import itertools
import math

import pytest

from graphalgos.dsu import kruskal_mst
from graphalgos.graph import Graph
from graphalgos.paths import (
    DisconnectedGraphError,
    bellman_ford,
    dag_shortest_path,
    dijkstra,
    floyd_warshall,
    path_from_prev,
    prim_matrix,
    prims_mst,
    tsp_path,
    tsp_table,
)

I = math.inf

SOURCE_COST = [
    [I, 25, I, I, I, 5, I],
    [25, I, 12, I, I, I, 10],
    [I, 12, I, 8, I, I, I],
    [I, I, 8, I, 16, I, 14],
    [I, I, I, 16, I, 20, 18],
    [5, I, I, I, 20, I, I],
    [I, 10, I, 14, 18, I, I],
]

TOUR_MATRIX = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]


def weighted_graph():
    graph = Graph(6)
    for u, v, w in [
        (1, 2, 7), (1, 3, 9), (1, 5, 14), (2, 3, 10),
        (2, 4, 15), (3, 4, 11), (3, 5, 2), (4, 5, 9),
    ]:
        graph.add_edge(u, v, w)
    return graph


def path_weight(graph, path):
    return sum(graph.weight(a, b) for a, b in zip(path, path[1:]))


def test_dijkstra_start_and_unreachable():
    dist, prev = dijkstra(weighted_graph(), 1)
    assert dist[1] == 0
    assert prev[1] is None
    assert dist[6] == math.inf
    assert prev[6] is None


def test_dijkstra_paths_match_distances():
    graph = weighted_graph()
    dist, prev = dijkstra(graph, 1)
    for node in range(2, 6):
        path = path_from_prev(prev, 1, node)
        assert path[0] == 1 and path[-1] == node
        assert path_weight(graph, path) == dist[node]


def test_shortest_path_algorithms_agree():
    graph = weighted_graph()
    dist, _ = dijkstra(graph, 1)
    assert bellman_ford(graph, 1) == dist
    table = floyd_warshall(graph)
    assert table[1][1:] == dist[1:]


def test_path_from_prev_unreachable_is_empty():
    _, prev = dijkstra(weighted_graph(), 1)
    assert path_from_prev(prev, 1, 6) == []


def test_dijkstra_rejects_bad_start():
    with pytest.raises(IndexError):
        dijkstra(weighted_graph(), 7)


def test_bellman_ford_negative_edge():
    graph = Graph(3)
    graph.add_edge(1, 2, 3, directed=True)
    graph.add_edge(2, 3, -5, directed=True)
    assert bellman_ford(graph, 1)[3] == -2


def test_bellman_ford_negative_cycle():
    graph = Graph(5)
    graph.add_edge(1, 2, 1, directed=True)
    graph.add_edge(2, 3, -1, directed=True)
    graph.add_edge(3, 2, -1, directed=True)
    graph.add_edge(3, 4, 1, directed=True)
    dist = bellman_ford(graph, 1)
    assert dist[1] == 0
    assert dist[2] == dist[3] == dist[4] == -math.inf
    assert dist[5] == math.inf


def test_floyd_warshall_triangle_inequality():
    graph = weighted_graph()
    table = floyd_warshall(graph)
    nodes = range(1, 7)
    for i in nodes:
        assert table[i][i] == 0
        for j in nodes:
            for k in nodes:
                assert table[i][j] <= table[i][k] + table[k][j]
    assert table[1][6] == math.inf


def test_floyd_warshall_negative_cycle():
    graph = Graph(4)
    graph.add_edge(1, 2, 1, directed=True)
    graph.add_edge(2, 3, -1, directed=True)
    graph.add_edge(3, 2, -1, directed=True)
    graph.add_edge(4, 1, 1, directed=True)
    plain = floyd_warshall(graph)
    assert plain[2][2] < 0
    table = floyd_warshall(graph, propagate_negative_cycles=True)
    assert table[1][2] == -math.inf
    assert table[4][3] == -math.inf
    assert table[1][1] == 0
    assert table[1][4] == math.inf
    assert table[2][1] == math.inf


def test_dag_shortest_path_matches_bellman_ford():
    graph = Graph(5)
    for u, v, w in [(1, 2, 4), (1, 3, 1), (3, 2, 2), (2, 4, 1), (3, 4, 7), (4, 5, 3)]:
        graph.add_edge(u, v, w, directed=True)
    order = graph.topological_sort()
    dist, prev = dag_shortest_path(graph)
    assert dist == bellman_ford(graph, order[0])
    assert path_weight(graph, path_from_prev(prev, order[0], 5)) == dist[5]


def test_dag_shortest_path_empty_graph():
    with pytest.raises(ValueError):
        dag_shortest_path(Graph(0))


def test_prims_mst_matches_kruskal():
    edges = [(1, 2, 1), (2, 3, 2), (3, 4, 3), (1, 3, 4), (2, 4, 5)]
    graph = Graph(4)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    cost, tree = prims_mst(graph)
    kruskal_cost, kruskal_edges = kruskal_mst(5, edges)
    assert cost == kruskal_cost
    assert sum(len(adjacent) for adjacent in tree) // 2 == len(kruskal_edges)


def test_prims_mst_disconnected():
    graph = Graph(3)
    graph.add_edge(1, 2, 1)
    with pytest.raises(DisconnectedGraphError):
        prims_mst(graph)


def test_prim_matrix_source_example():
    tree = prim_matrix(SOURCE_COST)
    expected = [(a - 1, b - 1) for a, b in [(1, 6), (5, 6), (4, 5), (3, 4), (2, 3), (7, 2)]]
    assert tree == expected


def test_prim_matrix_cost_matches_kruskal():
    tree = prim_matrix(SOURCE_COST)
    edges = [
        (i, j, SOURCE_COST[i][j])
        for i in range(7)
        for j in range(i + 1, 7)
        if SOURCE_COST[i][j] != I
    ]
    kruskal_cost, _ = kruskal_mst(7, edges)
    assert sum(SOURCE_COST[u][v] for u, v in tree) == kruskal_cost
    assert len(tree) == 6


def test_prim_matrix_disconnected():
    cost = [[None, 1, None], [1, None, None], [None, None, None]]
    with pytest.raises(DisconnectedGraphError):
        prim_matrix(cost)


def test_tsp_table_base_cases():
    table = tsp_table(TOUR_MATRIX, 0)
    for node in range(1, 4):
        assert table[node][(1 << node) | 1] == TOUR_MATRIX[0][node]


def test_tsp_path_is_optimal_tour():
    length, path = tsp_path(TOUR_MATRIX, 0)
    assert path[0] == path[-1] == 0
    assert sorted(path[:-1]) == [0, 1, 2, 3]
    assert sum(TOUR_MATRIX[a][b] for a, b in zip(path, path[1:])) == length
    best = min(
        sum(TOUR_MATRIX[a][b] for a, b in zip((0, *order, 0), (*order, 0, 0)[:-1] + (0,)))
        if False
        else sum(
            TOUR_MATRIX[a][b]
            for a, b in zip((0, *order), (*order, 0))
        )
        for order in itertools.permutations([1, 2, 3])
    )
    assert length == best


def test_tsp_path_other_start():
    length, path = tsp_path(TOUR_MATRIX, 2)
    assert path[0] == path[-1] == 2
    assert length == tsp_path(TOUR_MATRIX, 0)[0]


def test_tsp_rejects_bad_input():
    with pytest.raises(IndexError):
        tsp_path(TOUR_MATRIX, 4)
    with pytest.raises(ValueError):
        tsp_path([[0]], 0)
    with pytest.raises(ValueError):
        tsp_table([[0, 1], [1]], 0)