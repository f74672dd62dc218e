"""Gauss-Seidel PageRank with in-place updates and per-iteration normalisation."""

from __future__ import annotations

from collections.abc import Callable

from rankwalk.graph import DEFAULT_DAMPING
from rankwalk.nodes import NodeTable, PageRankResult, split_ranges


def gauss_seidel(
    table: NodeTable,
    threshold: float,
    damping: float = DEFAULT_DAMPING,
    num_threads: int = 1,
    on_iteration: Callable[[int, float], None] | None = None,
) -> PageRankResult:
    """Gauss-Seidel PageRank over nodes split into `num_threads` ranges.

    Each iteration first sums the rank held by dangling nodes, then updates
    every node in place from the current ranks of its in-links, and finally
    rescales the ranks to sum to one. Iterates until the largest change of an
    iteration is at most `threshold`. `on_iteration(iteration, max_error)` is
    called after every iteration.
    """
    if not threshold > 0:
        raise ValueError("convergence threshold must be positive")
    n = table.size
    ranges = split_ranges(n, num_threads)
    degrees = table.out_degrees
    teleport = 1.0 / n
    ranks = [1.0 / n] * n
    max_error = 1.0
    iterations = 0

    while max_error > threshold:
        iterations += 1
        dangling = sum(
            sum(ranks[node] for node in block if not table.out_links[node])
            for block in ranges
        ) / n

        max_error = 0.0
        for block in ranges:
            for node in block:
                gathered = sum(
                    ranks[source] / degrees[source]
                    for source in table.in_links[node]
                    if degrees[source] > 0
                )
                old = ranks[node]
                ranks[node] = damping * (gathered + dangling) + (1.0 - damping) * teleport
                max_error = max(max_error, abs(ranks[node] - old))

        total = sum(ranks)
        ranks = [rank / total for rank in ranks]
        if on_iteration is not None:
            on_iteration(iterations, max_error)

    return PageRankResult(ranks, iterations, max_error)