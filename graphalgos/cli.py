"""Command-line front end that reads problem input and prints the results."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO

from graphalgos.matrix_chain import matrix_chain_order
from graphalgos.nqueens import MAX_N, format_board, solve_n_queens
from graphalgos.scheduling import Job, schedule_jobs
from graphalgos.shortest_path import dijkstra
from graphalgos.spanning_tree import Edge, kruskal, prim, total_weight
from graphalgos.traversal import bfs, dfs

MAX_TRAVERSAL_NODES = 20
INT_MAX = 2**31 - 1

Prompt = Callable[[str], None]


class InputError(ValueError):
    """Raised when the input ends early or holds a malformed value."""


class _Reader:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens = self._generate(stream)

    @staticmethod
    def _generate(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def int(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None

    def matrix(self, size: int) -> list[list[int]]:
        return [[self.int() for _ in range(size)] for _ in range(size)]


def _run_traversal(
    reader: _Reader, prompt: Prompt, walk: Callable[[list[list[int]], int], list[int]], header: str
) -> int:
    prompt(f"Enter number of nodes (max {MAX_TRAVERSAL_NODES}): ")
    n = reader.int()
    if not 0 < n <= MAX_TRAVERSAL_NODES:
        print("Invalid number of nodes.", file=sys.stderr)
        return 1
    prompt(header.format(n=n))
    matrix = reader.matrix(n)
    prompt(f"Enter starting node (0 to {n - 1}): ")
    start = reader.int()
    if not 0 <= start < n:
        print("Invalid starting node.", file=sys.stderr)
        return 1
    print(" ".join(str(node) for node in walk(matrix, start)))
    return 0


def _cmd_bfs(reader: _Reader, prompt: Prompt) -> int:
    return _run_traversal(reader, prompt, bfs, "Enter adjacency matrix:\n")


def _cmd_dfs(reader: _Reader, prompt: Prompt) -> int:
    return _run_traversal(reader, prompt, dfs, "Enter adjacency matrix ({n}x{n}):\n")


def _cmd_dijkstra(reader: _Reader, prompt: Prompt) -> int:
    prompt("Enter number of vertices: ")
    n = reader.int()
    prompt("Enter the adjacency matrix (0 if no edge):\n")
    graph = reader.matrix(max(n, 0))
    prompt(f"Enter the source vertex (0 to {n - 1}): ")
    source = reader.int()
    distances = dijkstra(graph, source)
    print(f"Vertex \t Distance from Source {source}")
    for vertex, distance in enumerate(distances):
        shown = INT_MAX if distance == math.inf else int(distance)
        print(f"{vertex} \t\t {shown}")
    return 0


def _cmd_jobs(reader: _Reader, prompt: Prompt) -> int:
    prompt("Enter number of jobs: ")
    n = reader.int()
    prompt("Enter Job ID, Deadline and Profit for each job:\n")
    jobs = []
    for number in range(1, n + 1):
        prompt(f"Job {number}: ")
        job_id = reader.word()
        deadline = reader.int()
        profit = reader.int()
        jobs.append(Job(job_id, deadline, profit))
    schedule = schedule_jobs(jobs)
    print("Scheduled Jobs:")
    for slot, job in schedule.slots:
        print(f"Time Slot {slot}: Job {job.id} (Profit: {job.profit})")
    print()
    print(f"Total Jobs Scheduled: {schedule.job_count}")
    print(f"Total Profit: {schedule.total_profit}")
    return 0


def _print_tree(edges: Sequence[Edge]) -> None:
    print("Edge \tWeight")
    for edge in edges:
        print(f"{edge.u} - {edge.v} \t{edge.weight}")


def _cmd_kruskal(reader: _Reader, prompt: Prompt) -> int:
    prompt("Enter number of vertices and edges: ")
    vertex_count = reader.int()
    edge_count = reader.int()
    prompt("Enter each edge (u v weight):\n")
    edges = [Edge(reader.int(), reader.int(), reader.int()) for _ in range(edge_count)]
    tree = kruskal(vertex_count, edges)
    _print_tree(tree)
    print(f"Total weight of MST: {total_weight(tree)}")
    return 0


def _cmd_prim(reader: _Reader, prompt: Prompt) -> int:
    prompt("Enter number of vertices: ")
    n = reader.int()
    prompt("Enter the adjacency matrix (0 if no edge):\n")
    graph = reader.matrix(max(n, 0))
    _print_tree(prim(graph))
    return 0


def _cmd_matrix_chain(reader: _Reader, prompt: Prompt) -> int:
    prompt("Enter number of matrices: ")
    n = reader.int()
    prompt(f"Enter dimensions (length {n + 1}): ")
    dimensions = [reader.int() for _ in range(max(n + 1, 0))]
    result = matrix_chain_order(dimensions)
    print(f"Minimum number of multiplications is {result}")
    return 0


def _cmd_nqueens(reader: _Reader, prompt: Prompt) -> int:
    prompt("Enter the value of n: ")
    n = reader.int()
    if not 1 <= n <= MAX_N:
        print(f"Please enter a value between 1 and {MAX_N}.", file=sys.stderr)
        return 1
    board = solve_n_queens(n)
    if board is None:
        print(f"No solution exists for n = {n}.")
        return 0
    print(format_board(board))
    print()
    return 0


_COMMANDS: dict[str, tuple[Callable[[_Reader, Prompt], int], str]] = {
    "bfs": (_cmd_bfs, "breadth-first traversal of an adjacency matrix"),
    "dfs": (_cmd_dfs, "depth-first traversal of an adjacency matrix"),
    "dijkstra": (_cmd_dijkstra, "single-source shortest distances"),
    "jobs": (_cmd_jobs, "job sequencing with deadlines"),
    "kruskal": (_cmd_kruskal, "minimum spanning tree from an edge list"),
    "prim": (_cmd_prim, "minimum spanning tree from an adjacency matrix"),
    "matrix-chain": (_cmd_matrix_chain, "matrix chain multiplication cost"),
    "nqueens": (_cmd_nqueens, "place n non-attacking queens"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphalgos",
        description="Run a classic algorithm on input read from standard input.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        subparsers.add_parser(name, help=help_text)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen algorithm on stdin and return an exit status."""
    args = _build_parser().parse_args(argv)
    stream = sys.stdin
    interactive = stream.isatty()

    def prompt(text: str) -> None:
        if interactive:
            print(text, end="", flush=True)

    handler, _ = _COMMANDS[args.command]
    try:
        return handler(_Reader(stream), prompt)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())