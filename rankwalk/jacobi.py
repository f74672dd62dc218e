"""Jacobi-style PageRank over a node table, serial and range-partitioned."""

from __future__ import annotations

from collections.abc import Callable

from rankwalk.graph import DEFAULT_DAMPING
from rankwalk.nodes import NodeTable, PageRankResult, split_ranges

IterationCallback = Callable[[int, float], None]


def _check_threshold(threshold: float) -> None:
    if not threshold > 0:
        raise ValueError("convergence threshold must be positive")


def _teleported(
    gathered: list[float], dangling: float, damping: float, teleport: float
) -> list[float]:
    return [damping * (value + dangling) + (1.0 - damping) * teleport for value in gathered]


def _largest_change(new: list[float], old: list[float]) -> float:
    return max(abs(a - b) for a, b in zip(new, old))


def jacobi(
    table: NodeTable,
    threshold: float,
    damping: float = DEFAULT_DAMPING,
    on_iteration: IterationCallback | None = None,
) -> PageRankResult:
    """Scatter-based Jacobi PageRank.

    Each node pushes its previous rank evenly along its out-links; nodes with
    no out-links spread theirs over every node. Iterates until the largest
    change is at most `threshold`. `on_iteration(iteration, max_error)` is
    called after every iteration.
    """
    _check_threshold(threshold)
    n = table.size
    teleport = 1.0 / n
    ranks = [1.0 / n] * n
    max_error = 1.0
    iterations = 0

    while max_error > threshold:
        previous = ranks
        gathered = [0.0] * n
        dangling = 0.0
        for links, rank in zip(table.out_links, previous):
            if links:
                share = rank / len(links)
                for target in links:
                    gathered[target] += share
            else:
                dangling += rank / n

        ranks = _teleported(gathered, dangling, damping, teleport)
        max_error = _largest_change(ranks, previous)
        iterations += 1
        if on_iteration is not None:
            on_iteration(iterations, max_error)

    return PageRankResult(ranks, iterations, max_error)


def jacobi_blocked(
    table: NodeTable,
    threshold: float,
    damping: float = DEFAULT_DAMPING,
    num_threads: int = 1,
    on_iteration: IterationCallback | None = None,
) -> PageRankResult:
    """Gather-based Jacobi PageRank with nodes split into `num_threads` ranges.

    Every range gathers rank from the in-links of its nodes and sums its own
    dangling contribution; the partial sums are then combined. The result is
    the same fixed point as :func:`jacobi`.
    """
    _check_threshold(threshold)
    n = table.size
    ranges = split_ranges(n, num_threads)
    degrees = table.out_degrees
    teleport = 1.0 / n
    ranks = [1.0 / n] * n
    max_error = 1.0
    iterations = 0

    while max_error > threshold:
        previous = ranks
        gathered = [0.0] * n
        partial_sums = []
        for block in ranges:
            partial = 0.0
            for node in block:
                if not table.out_links[node]:
                    partial += previous[node] / n
                gathered[node] = sum(
                    previous[source] / degrees[source] for source in table.in_links[node]
                )
            partial_sums.append(partial)

        ranks = _teleported(gathered, sum(partial_sums), damping, teleport)
        max_error = _largest_change(ranks, previous)
        iterations += 1
        if on_iteration is not None:
            on_iteration(iterations, max_error)

    return PageRankResult(ranks, iterations, max_error)