import math

import pytest

from graphalgos.shortest_path import dijkstra

EXAMPLE = [
    [0, 10, 3, 0, 0],
    [0, 0, 1, 4, 0],
    [0, 4, 0, 8, 2],
    [0, 0, 0, 0, 7],
    [0, 0, 0, 0, 0],
]


def test_example_distances():
    assert dijkstra(EXAMPLE, 0) == [0, 7, 3, 11, 5]


def test_source_distance_is_zero():
    for source in range(5):
        assert dijkstra(EXAMPLE, source)[source] == 0


def test_unreachable_vertices_are_infinite():
    dist = dijkstra(EXAMPLE, 4)
    assert dist[4] == 0
    assert all(d == math.inf for d in dist[:4])


def test_single_vertex():
    assert dijkstra([[0]], 0) == [0]


def test_direct_edge_is_used_when_shortest():
    graph = [[0, 5], [0, 0]]
    assert dijkstra(graph, 0) == [0, 5]


@pytest.mark.parametrize("source", range(5))
def test_distances_respect_edge_relaxation(source):
    dist = dijkstra(EXAMPLE, source)
    for u, row in enumerate(EXAMPLE):
        for v, weight in enumerate(row):
            if weight and dist[u] != math.inf:
                assert dist[v] <= dist[u] + weight


@pytest.mark.parametrize("source", [-1, 5])
def test_source_out_of_range(source):
    with pytest.raises(ValueError):
        dijkstra(EXAMPLE, source)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        dijkstra([[0, 1, 2], [1, 0, 3]], 0)