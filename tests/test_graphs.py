import pytest

from dsakit.graphs import bfs, dfs

GRAPH = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 0, 1, 0, 0, 0],
    [1, 1, 0, 1, 1, 0, 0],
    [1, 0, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]

DISCONNECTED = [
    [0, 1, 0, 0],
    [1, 0, 0, 0],
    [0, 0, 0, 1],
    [0, 0, 1, 0],
]


def test_bfs_source_graph():
    assert bfs(GRAPH, 0) == [0, 1, 2, 3, 4, 5, 6]


def test_dfs_source_graph():
    assert dfs(GRAPH, 6) == [6, 4, 2, 0, 1, 3, 5]


@pytest.mark.parametrize("traverse", [bfs, dfs])
@pytest.mark.parametrize("start", range(7))
def test_visits_every_node_once(traverse, start):
    order = traverse(GRAPH, start)
    assert order[0] == start
    assert sorted(order) == list(range(7))


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_unreachable_nodes_excluded(traverse):
    assert sorted(traverse(DISCONNECTED, 2)) == [2, 3]
    assert sorted(traverse(DISCONNECTED, 0)) == [0, 1]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_each_step_follows_an_edge_from_a_visited_node(traverse):
    order = traverse(GRAPH, 3)
    for position, node in enumerate(order[1:], start=1):
        assert any(GRAPH[prev][node] for prev in order[:position])


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_start_out_of_range(traverse):
    with pytest.raises(IndexError):
        traverse(GRAPH, 7)


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_non_square_matrix(traverse):
    with pytest.raises(ValueError):
        traverse([[0, 1], [1]], 0)