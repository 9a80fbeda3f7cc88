"""Breadth-first and depth-first traversal of graphs given as adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Matrix = Sequence[Sequence[int]]


def _validate(matrix: Matrix, start: int) -> None:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"starting node {start} is out of range")


def _neighbours(row: Sequence[int]) -> Iterator[int]:
    """Yield the columns of a matrix row that mark an edge (value exactly 1)."""
    return (column for column, value in enumerate(row) if value == 1)


def bfs(matrix: Matrix, start: int) -> list[int]:
    """Return nodes in the order a breadth-first search from ``start`` visits them."""
    _validate(matrix, start)
    visited = {start}
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in _neighbours(matrix[node]):
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs(matrix: Matrix, start: int) -> list[int]:
    """Return nodes in the order a depth-first search from ``start`` visits them."""
    _validate(matrix, start)
    visited = {start}
    order = [start]
    stack = [_neighbours(matrix[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(_neighbours(matrix[neighbour]))
                break
        else:
            stack.pop()
    return order