import pytest

from graphalgos.undirected import (
    UndirectedGraph,
    build_adjacency,
    count_connected_components,
    is_bipartite,
)


def make_graph(vertices, edges):
    graph = UndirectedGraph(vertices)
    for x, y in edges:
        graph.add_edge(x, y)
    return graph


def test_neighbours_both_directions():
    graph = make_graph(3, [(0, 1), (1, 2)])
    assert graph.neighbours(1) == (0, 2)
    assert graph.neighbours(0) == (1,)


def test_format_adjacency_one_line_per_vertex():
    graph = make_graph(6, [(0, 4), (0, 3), (1, 2)])
    lines = graph.format_adjacency().splitlines()
    assert len(lines) == 6
    assert lines[0] == "0->4 3"
    assert lines[5] == "5->"


def test_tree_traversal_orders():
    graph = make_graph(4, [(0, 1), (0, 2), (1, 3)])
    assert graph.dfs_order() == [0, 1, 3, 2]
    assert graph.bfs_order() == [0, 1, 2, 3]


def test_traversals_visit_every_vertex_once():
    graph = make_graph(10, [(0, 1), (1, 2), (2, 0), (5, 7)])
    assert sorted(graph.dfs_order()) == list(range(10))
    assert sorted(graph.bfs_order()) == list(range(10))


def test_triangle_has_cycle():
    graph = make_graph(10, [(0, 1), (1, 2), (2, 0)])
    assert graph.has_cycle() is True


def test_tree_has_no_cycle():
    graph = make_graph(5, [(0, 1), (1, 2), (1, 3), (3, 4)])
    assert graph.has_cycle() is False


def test_self_loop_is_cycle():
    graph = make_graph(2, [(1, 1)])
    assert graph.has_cycle() is True


def test_cycle_in_later_component():
    graph = make_graph(6, [(0, 1), (3, 4), (4, 5), (5, 3)])
    assert graph.has_cycle() is True


def test_invalid_vertex():
    graph = UndirectedGraph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)
    with pytest.raises(IndexError):
        graph.neighbours(-1)
    with pytest.raises(ValueError):
        UndirectedGraph(-2)


def test_build_adjacency_undirected_symmetric():
    edges = [(1, 2), (2, 3), (3, 1)]
    adjacency = build_adjacency(3, edges)
    assert len(adjacency) == 4
    for u, v in edges:
        assert v in adjacency[u]
        assert u in adjacency[v]
    assert sum(map(len, adjacency)) == 2 * len(edges)


def test_build_adjacency_directed_one_way():
    adjacency = build_adjacency(3, [(1, 2), (2, 3)], directed=True)
    assert adjacency[1] == [2]
    assert adjacency[2] == [3]
    assert adjacency[3] == []


def test_connected_components():
    assert count_connected_components(5, [(0, 1), (2, 3)]) == 3


def test_connected_components_without_edges():
    assert count_connected_components(7, []) == 7
    assert count_connected_components(0, []) == 0


def test_even_cycle_bipartite():
    assert is_bipartite(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) is True


def test_odd_cycle_not_bipartite():
    assert is_bipartite(3, [(1, 2), (2, 3), (3, 1)]) is False


def test_bipartite_checks_only_start_component():
    edges = [(1, 2), (3, 4), (4, 5), (5, 3)]
    assert is_bipartite(5, edges) is True
    assert is_bipartite(5, edges, start=3) is False


def test_bipartite_start_out_of_range():
    with pytest.raises(IndexError):
        is_bipartite(2, [(1, 2)], start=5)