import pytest

from graphalgos.traversal import bfs, dfs

EXAMPLE = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 0, 1, 0, 0, 0],
    [1, 0, 0, 1, 1, 0, 0],
    [1, 1, 1, 0, 1, 0, 0],
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


def test_bfs_example():
    assert bfs(EXAMPLE, 0) == [0, 1, 2, 3, 4, 5, 6]


def test_dfs_example():
    assert dfs(EXAMPLE, 0) == [0, 1, 3, 2, 4, 5, 6]


@pytest.mark.parametrize("search", [bfs, dfs])
@pytest.mark.parametrize("start", range(7))
def test_connected_graph_visits_every_node_once(search, start):
    order = search(EXAMPLE, start)
    assert order[0] == start
    assert sorted(order) == list(range(7))


@pytest.mark.parametrize("search", [bfs, dfs])
def test_only_component_of_start_is_visited(search):
    assert sorted(search(DISCONNECTED, 2)) == [2, 3]
    assert sorted(search(DISCONNECTED, 1)) == [0, 1]


@pytest.mark.parametrize("search", [bfs, dfs])
def test_values_other_than_one_are_not_edges(search):
    matrix = [[0, 2], [2, 0]]
    assert search(matrix, 0) == [0]


@pytest.mark.parametrize("search", [bfs, dfs])
def test_directed_edges_are_followed_one_way(search):
    matrix = [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
    assert search(matrix, 0) == [0, 1, 2]
    assert search(matrix, 2) == [2]


@pytest.mark.parametrize("search", [bfs, dfs])
@pytest.mark.parametrize("start", [-1, 7])
def test_start_out_of_range(search, start):
    with pytest.raises(ValueError):
        search(EXAMPLE, start)


@pytest.mark.parametrize("search", [bfs, dfs])
def test_non_square_matrix_rejected(search):
    with pytest.raises(ValueError):
        search([[0, 1], [1]], 0)