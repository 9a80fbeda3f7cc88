"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: int


def total_weight(edges: Iterable[Edge]) -> int:
    """Return the sum of the edge weights."""
    return sum(edge.weight for edge in edges)


def kruskal(vertex_count: int, edges: Iterable[Edge | tuple[int, int, int]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, in the order they were chosen."""
    normalised = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in normalised:
        if not (0 <= edge.u < vertex_count and 0 <= edge.v < vertex_count):
            raise ValueError(f"edge {edge.u}-{edge.v} refers to a missing vertex")

    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while vertex != parent[vertex]:
            vertex = parent[vertex]
        return vertex

    chosen: list[Edge] = []
    for edge in sorted(normalised, key=lambda e: e.weight):
        if len(chosen) >= vertex_count - 1:
            break
        root_u, root_v = find(edge.u), find(edge.v)
        if root_u != root_v:
            parent[root_u] = root_v
            chosen.append(edge)
    return chosen


def prim(graph: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the minimum spanning tree of a connected graph given as a matrix.

    A zero entry means there is no edge. Edge ``i`` joins vertex ``i`` to its
    parent in the tree, for every vertex except 0.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []

    key: list[float] = [math.inf] * size
    parent: list[int] = [-1] * size
    in_tree = [False] * size
    key[0] = 0

    for _ in range(size - 1):
        u = min(
            (v for v in range(size) if not in_tree[v] and key[v] < math.inf),
            key=key.__getitem__,
            default=None,
        )
        if u is None:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    if any(k == math.inf for k in key):
        raise ValueError("graph is not connected")

    return [Edge(parent[i], i, graph[i][parent[i]]) for i in range(1, size)]