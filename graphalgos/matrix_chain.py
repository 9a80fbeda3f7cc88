"""Minimum scalar multiplications for a chain of matrix products."""

from __future__ import annotations

from collections.abc import Sequence


def matrix_chain_order(dimensions: Sequence[int]) -> int:
    """Return the fewest multiplications needed to compute the chain.

    Matrix ``i`` has shape ``dimensions[i-1] x dimensions[i]``, so ``n``
    matrices need ``n + 1`` dimensions.
    """
    dims = list(dimensions)
    count = len(dims)
    if count < 2:
        raise ValueError("at least two dimensions are needed for one matrix")

    cost = [[0] * count for _ in range(count)]
    for length in range(2, count):
        for i in range(1, count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                for k in range(i, j)
            )
    return cost[1][count - 1]