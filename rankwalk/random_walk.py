"""Monte Carlo PageRank estimated from the end points of random walks."""

from __future__ import annotations

import random
import time
from collections import Counter

from rankwalk.graph import DEFAULT_DAMPING, Graph


def monte_carlo_pagerank(
    graph: Graph,
    num_walkers: int = 1_000_000,
    walk_length: int = 50,
    damping: float = DEFAULT_DAMPING,
    num_workers: int = 1,
    seed: int | None = None,
) -> list[float]:
    """Return the fraction of walkers ending on each vertex.

    Walkers are dealt round-robin to `num_workers` streams, each with its own
    generator derived from `seed` (the current time when not given).
    """
    n = graph.num_vertices
    if n == 0:
        raise ValueError("graph has no vertices")
    if num_workers < 1:
        raise ValueError("num_workers must be at least 1")
    if num_walkers < 1:
        raise ValueError("num_walkers must be at least 1")
    if seed is None:
        seed = int(time.time())

    counts: Counter[int] = Counter()
    for worker in range(num_workers):
        rng = random.Random(seed ^ (worker << 32))
        for _ in range(worker, num_walkers, num_workers):
            node = rng.randrange(n)
            for _ in range(walk_length):
                if rng.random() < damping and graph.out_degrees[node] > 0:
                    node = rng.choice(graph.out_neighbors(node))
                else:
                    node = rng.randrange(n)
            counts[node] += 1

    return [counts[vertex] / num_walkers for vertex in range(n)]