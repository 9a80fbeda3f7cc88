"""Single-source shortest paths with Dijkstra's algorithm on an adjacency matrix."""

from __future__ import annotations

import math
from collections.abc import Sequence


def dijkstra(graph: Sequence[Sequence[int]], source: int) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    A zero entry means there is no edge. Unreachable vertices get ``math.inf``.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is out of range")

    dist: list[float] = [math.inf] * size
    done = [False] * size
    dist[source] = 0

    for _ in range(size - 1):
        pending = [v for v in range(size) if not done[v]]
        # Ties go to the highest-numbered vertex.
        u = min(reversed(pending), key=dist.__getitem__)
        done[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight

    return dist