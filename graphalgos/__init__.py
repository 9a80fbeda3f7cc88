"""Traversal, shortest paths, spanning trees, job sequencing, matrix chains and n queens."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "matrix_chain",
    "nqueens",
    "scheduling",
    "shortest_path",
    "spanning_tree",
    "traversal",
]