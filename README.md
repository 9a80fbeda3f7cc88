# graphalgos

A small collection of classic algorithms in plain Python, with no
third-party dependencies, and a `graphalgos` command that runs them on input
read from standard input.

| Module | What it provides |
| --- | --- |
| `graphalgos.traversal` | `bfs` and `dfs`: visit order of a graph given as an adjacency matrix |
| `graphalgos.shortest_path` | `dijkstra`: shortest distances from one source vertex |
| `graphalgos.spanning_tree` | `Edge`, `kruskal`, `prim` and `total_weight`: minimum spanning trees |
| `graphalgos.scheduling` | `Job`, `Schedule` and `schedule_jobs`: greedy job sequencing with deadlines |
| `graphalgos.matrix_chain` | `matrix_chain_order`: fewest scalar multiplications for a matrix chain |
| `graphalgos.nqueens` | `solve_n_queens` and `format_board`: n non-attacking queens |
| `graphalgos.cli` | `main`: the command-line front end |

## Installation

```
pip install graphalgos
```

Python 3.10 or newer is required.

## Graphs

Graphs are square adjacency matrices: sequences of rows of integers.

- For `bfs` and `dfs`, an entry of exactly `1` marks an edge.
- For `dijkstra` and `prim`, a non-zero entry is the weight of the edge and
  `0` means there is none.

A matrix that is not square, or a start or source vertex outside it, raises
`ValueError`.

## Traversal

```python
from graphalgos.traversal import bfs, dfs

matrix = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 0, 1, 0, 0, 0],
    [1, 0, 0, 1, 1, 0, 0],
    [1, 1, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]

bfs(matrix, 0)   # [0, 1, 2, 3, 4, 5, 6]
dfs(matrix, 0)   # [0, 1, 3, 2, 4, 5, 6]
```

Both return the nodes reachable from the start in the order they are
visited; neighbours are taken in increasing column order.

## Shortest paths

```python
from graphalgos.shortest_path import dijkstra

graph = [
    [0, 10, 3, 0, 0],
    [0, 0, 1, 4, 0],
    [0, 4, 0, 8, 2],
    [0, 0, 0, 0, 7],
    [0, 0, 0, 0, 0],
]

dijkstra(graph, 0)   # [0, 7, 3, 11, 5]
```

The result holds one distance per vertex; a vertex that cannot be reached
gets `math.inf`.

## Minimum spanning trees

```python
from graphalgos.spanning_tree import Edge, kruskal, prim, total_weight

graph = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]

tree = prim(graph)
# [Edge(u=0, v=1, weight=2), Edge(u=1, v=2, weight=3),
#  Edge(u=0, v=3, weight=6), Edge(u=1, v=4, weight=5)]
total_weight(tree)   # 16
```

`prim(graph)` returns one edge per vertex other than 0, joining it to its
parent in the tree, and raises `ValueError` if the graph is not connected.

`kruskal(vertex_count, edges)` takes the number of vertices and a list of
`Edge` values (or `(u, v, weight)` tuples) and returns the chosen edges in the
order they were taken, lightest first. On a disconnected graph it returns a
spanning forest. An edge naming a vertex outside `0 .. vertex_count - 1`
raises `ValueError`.

## Job sequencing

```python
from graphalgos.scheduling import Job, schedule_jobs

schedule = schedule_jobs([
    Job("A", 2, 100),
    Job("B", 1, 19),
    Job("C", 2, 27),
    Job("D", 1, 25),
    Job("E", 3, 15),
])

schedule.slots          # ((1, Job('C', 2, 27)), (2, Job('A', 2, 100)), (3, Job('E', 3, 15)))
schedule.job_count      # 3
schedule.total_profit   # 142
```

Each job takes one unit of time. Jobs are taken in order of falling profit
and put in the latest free slot before their deadline; jobs with no free slot
are dropped. A `Schedule` also has `jobs` (the scheduled jobs in slot order)
and `max_deadline`.

## Matrix chains

```python
from graphalgos.matrix_chain import matrix_chain_order

matrix_chain_order([10, 50, 5, 25])   # 3750
```

Matrix `i` has shape `dimensions[i-1] x dimensions[i]`, so `n` matrices need
`n + 1` dimensions. Fewer than two dimensions raises `ValueError`.

## N queens

```python
from graphalgos.nqueens import format_board, solve_n_queens

board = solve_n_queens(4)   # ['..Q.', 'Q...', '...Q', '.Q..']
print(format_board(board))
```

`solve_n_queens(n)` accepts `n` from 1 to 15 (`ValueError` otherwise). It
returns the last solution in column order as a list of row strings, or
`None` when there is no solution (as for 2 and 3).

## Command line

```
graphalgos --help
graphalgos bfs < input.txt
```

The subcommands are `bfs`, `dfs`, `dijkstra`, `jobs`, `kruskal`, `prim`,
`matrix-chain` and `nqueens`. Each reads whitespace-separated values from
standard input:

| Subcommand | Input |
| --- | --- |
| `bfs`, `dfs` | node count (1 to 20), the adjacency matrix, the start node |
| `dijkstra` | vertex count, the weighted matrix, the source vertex |
| `prim` | vertex count, the weighted matrix |
| `kruskal` | vertex count and edge count, then `u v weight` per edge |
| `jobs` | job count, then `id deadline profit` per job |
| `matrix-chain` | matrix count `n`, then `n + 1` dimensions |
| `nqueens` | the board size (1 to 15) |

For example, `printf '3\n10 50 5 25\n' | graphalgos matrix-chain` prints
`Minimum number of multiplications is 3750`.

Prompts are shown only when standard input is a terminal. In `dijkstra`
output an unreachable vertex is shown with distance 2147483647. Invalid or
missing input prints a message to standard error and the command exits with
status 1.

## Running the tests

```
pip install "graphalgos[test]"
pytest
```