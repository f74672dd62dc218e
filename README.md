# rankwalk

PageRank scores for directed graphs stored as plain edge lists, with
several solvers to compare:

- **Power iteration** – each vertex gathers rank from its in-neighbours
- **Delta push** – each vertex pushes only the pending change in its rank
- **Monte Carlo random walks** – the share of walkers ending on each vertex
- **Jacobi** on a node table, scatter-based or split into node ranges
- **Gauss-Seidel** on a node table, with in-place updates, either
  synchronous (renormalised every iteration) or asynchronous

Only the standard library is needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

A graph is a text file with one directed edge per line: a source id and a
target id separated by whitespace (usually a tab). Lines starting with `#`
are comments and lines that do not start with two integers are skipped.
Vertex ids are mapped to contiguous indices in order of first appearance;
the original ids are kept, so results are reported in the file's own ids.

```
# from	to
1	2
1	3
2	3
3	1
```

## Graphs and CSR solvers

`rankwalk.graph.Graph` holds a graph in compressed sparse row form, with
out- and in-edges, out-degrees and the id mappings (`id_to_idx`,
`idx_to_id`).

```python
from rankwalk.graph import Graph, format_top_pages
from rankwalk.power import power_iteration, delta_push
from rankwalk.random_walk import monte_carlo_pagerank

graph = Graph.load("edges.txt", 0)   # 0: count distinct ids in the file

report = power_iteration(graph, 1e-6, 0.85, 100)
print(report.iterations, report.error)
print(format_top_pages(report.ranks, graph), end="")

pushed = delta_push(graph, 1e-6, 0.85, 100, on_progress=print)
estimate = monte_carlo_pagerank(graph, 100_000, 50, 0.85, 4, seed=1)
```

- `Graph.from_edges(edges, num_vertices)` builds a graph from
  `(source, target)` pairs; `parse_edge_list(lines)` yields such pairs from
  text. A `num_vertices` smaller than the number of distinct ids raises
  `ValueError`. `num_edges`, `out_neighbors(v)` and `in_neighbors(v)` give
  access to the structure.
- `power_iteration` and `delta_push` return a `ConvergenceReport` with
  ranks normalised to sum to one, the iteration count and the final error.
  `delta_push` calls `on_progress(iteration, max_delta)` every tenth
  iteration.
- `monte_carlo_pagerank` deals walkers round-robin to `num_workers`
  generator streams derived from `seed` (the current time when omitted).
  Each walker starts on a random vertex and at every step follows a random
  out-link with probability `damping`, otherwise teleports.
- `top_pages(ranks, graph, count)` returns `(original id, rank)` pairs,
  highest first; `format_top_pages` renders them as a numbered list;
  `append_timing(path, seconds)` appends one measurement to a file.

## Node-table solvers

`rankwalk.nodes.NodeTable` is a fixed-size table of nodes with their
out-links, in-links and original ids; ids beyond the table size raise
`ValueError`, and unused slots have the id `None`.

```python
from rankwalk.nodes import NodeTable, top_nodes
from rankwalk.jacobi import jacobi, jacobi_blocked
from rankwalk.gauss_seidel import gauss_seidel
from rankwalk.asynchronous import async_gauss_seidel

table = NodeTable.load("edges.txt", 4, True)   # True: skip "#" lines
outcome = jacobi(table, 1e-6, 0.85, None)
print(top_nodes(outcome.ranks, table, 10))
```

All of them start from uniform ranks, spread the rank of dangling nodes
(nodes with no out-links) evenly over every node, and return a
`PageRankResult` with `ranks`, `iterations` and `max_error`. The threshold
must be positive.

- `jacobi` and `jacobi_blocked` iterate until the largest change is at most
  the threshold; they reach the same fixed point. `jacobi_blocked` and
  `gauss_seidel` split nodes into `num_threads` ranges with `split_ranges`
  (1 to 64 ranges). `on_iteration(iteration, max_error)` is called after
  every iteration.
- `gauss_seidel` updates ranks in place and rescales them to sum to one
  after every iteration.
- `async_gauss_seidel` lets each range sweep its nodes in blocks of
  `block_size`, publishing its dangling sum, largest change and convergence
  flag; it stops once every range has reported convergence. Ranks are not
  renormalised.

## Command-line tools

- `rankwalk-jacobi FILE N THRESHOLD DAMPING [NUM_THREADS]`, with
  `--method serial|blocking|gauss-seidel` (default `serial`). Comment lines
  are skipped only by the serial method.
- `rankwalk-parlay FILE [NUM_VERTICES] [EPSILON] [DAMPING] [MAX_ITERS]`, with
  `--method power|delta-push|random-walk` (default `power`) and, for random
  walks, `--walkers`, `--walk-length`, `--threads` and `--seed`.
- `rankwalk-async FILE N THRESHOLD DAMPING [NUM_THREADS]`, with
  `--variant plain|cache`; `cache` sweeps blocks of 64 nodes.

For example:

```
rankwalk-parlay edges.txt 0 1e-6 0.85 100
rankwalk-jacobi --method gauss-seidel edges.txt 4 1e-6 0.85 2
```

Each command prints its progress, the top ten pages by rank and the elapsed
time. The time is also appended to a file in the current directory named
after the method (`serial_jacobi.txt`, `jacobi_blocking.txt`,
`gauss_seidel_blocking.txt`, `parlay_jacobi.txt`, `delta_push.txt`,
`random_walk.txt`, `guess_seidel.txt`, `guess_seidel_cache.txt`), or to the
file given with `--output`.

## What it does not do

The "threads", "workers" and node ranges are a way of partitioning the
work, not concurrency: every solver runs in a single thread, processing the
ranges one after another in order, so results are deterministic. Nothing
here runs computations in parallel, and rank vectors are not written to
disk; only timings are.