"""Placing n non-attacking queens on an n x n board."""

from __future__ import annotations

from collections.abc import Sequence

MAX_N = 15


def solve_n_queens(n: int) -> list[str] | None:
    """Return the last solution in column-lexicographic order, or None if there is none.

    Each row is a string of ``.`` with one ``Q``.
    """
    if not 1 <= n <= MAX_N:
        raise ValueError(f"n must be between 1 and {MAX_N}")

    columns: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        # Trying columns from the right finds the lexicographically last solution first.
        for col in reversed(range(n)):
            if (
                col in used_columns
                or row - col in used_diagonals
                or row + col in used_anti_diagonals
            ):
                continue
            columns.append(col)
            used_columns.add(col)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used_columns.discard(col)
            used_diagonals.discard(row - col)
            used_anti_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    return ["".join("Q" if c == col else "." for c in range(n)) for col in columns]


def format_board(board: Sequence[str]) -> str:
    """Return the board as text, one row per line."""
    return "\n".join(board)