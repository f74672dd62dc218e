"""Power-iteration and delta-push PageRank over a CSR graph."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rankwalk.graph import (
    DEFAULT_DAMPING,
    DEFAULT_EPSILON,
    DEFAULT_MAX_ITERS,
    Graph,
)


@dataclass
class ConvergenceReport:
    """Normalised ranks, the number of iterations run and the final error."""

    ranks: list[float]
    iterations: int
    error: float


def _require_vertices(graph: Graph) -> int:
    if graph.num_vertices == 0:
        raise ValueError("graph has no vertices")
    return graph.num_vertices


def _normalised(values: list[float]) -> list[float]:
    total = sum(values)
    return [value / total for value in values]


def power_iteration(
    graph: Graph,
    epsilon: float = DEFAULT_EPSILON,
    damping: float = DEFAULT_DAMPING,
    max_iters: int = DEFAULT_MAX_ITERS,
) -> ConvergenceReport:
    """Gather-based PageRank; stops when the largest change is at most epsilon."""
    n = _require_vertices(graph)
    base_rank = (1.0 - damping) / n
    degrees = graph.out_degrees
    incoming = [graph.in_neighbors(v) for v in range(n)]

    ranks = [1.0 / n] * n
    error = 1.0
    iterations = 0
    while error > epsilon and iterations < max_iters:
        updated = [
            base_rank + damping * sum(ranks[j] / degrees[j] for j in sources)
            for sources in incoming
        ]
        error = max(abs(new - old) for new, old in zip(updated, ranks))
        ranks = updated
        iterations += 1

    return ConvergenceReport(_normalised(ranks), iterations, error)


def delta_push(
    graph: Graph,
    epsilon: float = DEFAULT_EPSILON,
    damping: float = DEFAULT_DAMPING,
    max_iters: int = DEFAULT_MAX_ITERS,
    on_progress: Callable[[int, float], None] | None = None,
) -> ConvergenceReport:
    """Push-based PageRank that propagates only pending rank changes.

    `on_progress(iteration, max_delta)` is called every tenth iteration.
    """
    n = _require_vertices(graph)
    base_rank = (1.0 - damping) / n
    active_threshold = epsilon * 0.01

    ranks = [1.0 / n] * n
    deltas = list(ranks)
    max_delta = 1.0
    iterations = 0
    while max_delta > epsilon and iterations < max_iters:
        next_deltas = [0.0] * n
        for vertex, delta in enumerate(deltas):
            if abs(delta) <= active_threshold:
                continue
            ranks[vertex] += delta
            degree = graph.out_degrees[vertex]
            if degree:
                share = damping * delta / degree
                for neighbor in graph.out_neighbors(vertex):
                    next_deltas[neighbor] += share
        max_delta = max(map(abs, next_deltas))
        deltas = next_deltas
        iterations += 1
        if on_progress is not None and iterations % 10 == 0:
            on_progress(iterations, max_delta)

    final = [base_rank + damping * (rank + delta) for rank, delta in zip(ranks, deltas)]
    return ConvergenceReport(_normalised(final), iterations, max_delta)