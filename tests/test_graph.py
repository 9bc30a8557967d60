import pytest

from portalchess.graph import Edge, Graph


def _path(parent, source, sink):
    path = [sink]
    while path[-1] != source:
        path.append(parent[path[-1]])
    return list(reversed(path))


def test_add_edge_keeps_order():
    graph = Graph()
    graph.add_edge(0, 1, 5)
    graph.add_edge(0, 2, 7)
    assert graph.edges_from(0) == [Edge(1, 5), Edge(2, 7)]


def test_edges_from_unknown_vertex_is_empty():
    graph = Graph()
    assert graph.edges_from(3) == []


def test_edges_from_returns_a_copy():
    graph = Graph()
    graph.add_edge(1, 2, 3)
    graph.edges_from(1).clear()
    assert graph.edges_from(1) == [Edge(2, 3)]


def test_bfs_finds_path_of_positive_capacities():
    residual = [
        [0, 4, 0, 0],
        [0, 0, 3, 0],
        [0, 0, 0, 2],
        [0, 0, 0, 0],
    ]
    parent = Graph().bfs(residual, 0, 3)
    assert parent is not None
    assert parent[0] == -1
    path = _path(parent, 0, 3)
    assert path[0] == 0 and path[-1] == 3
    assert all(residual[a][b] > 0 for a, b in zip(path, path[1:]))


def test_bfs_reports_unreachable_sink():
    residual = [
        [0, 1, 0],
        [0, 0, 0],
        [0, 0, 0],
    ]
    assert Graph().bfs(residual, 0, 2) is None


def test_bfs_ignores_zero_capacity_shortcut():
    residual = [
        [0, 1, 0],
        [0, 0, 1],
        [0, 0, 0],
    ]
    parent = Graph().bfs(residual, 0, 2)
    assert _path(parent, 0, 2) == [0, 1, 2]


def test_bfs_rejects_vertex_outside_graph():
    with pytest.raises(IndexError):
        Graph().bfs([[0]], 0, 4)