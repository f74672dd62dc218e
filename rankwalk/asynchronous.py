"""Asynchronous Gauss-Seidel PageRank with published per-worker partial results."""

from __future__ import annotations

from rankwalk.graph import DEFAULT_DAMPING
from rankwalk.nodes import NodeTable, PageRankResult, split_ranges

DEFAULT_BLOCK_SIZE = 64


def _blocks(span: range, block_size: int) -> list[range]:
    return [
        range(start, min(start + block_size, span.stop))
        for start in range(span.start, span.stop, block_size)
    ]


def async_gauss_seidel(
    table: NodeTable,
    threshold: float,
    damping: float = DEFAULT_DAMPING,
    num_threads: int = 1,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> PageRankResult:
    """PageRank where workers sweep their node ranges without a shared barrier.

    Nodes are split into `num_threads` contiguous ranges, each swept in blocks
    of `block_size` nodes and updated in place. After every sweep a worker
    publishes its dangling-rank sum, its largest change and whether every
    change stayed within `threshold`; the dangling contribution seen by later
    sweeps is the total of what was last published. Work stops as soon as all
    workers have reported convergence. Workers take turns in order, so the
    result is deterministic. The iteration count is the number of rounds of
    turns started; ranks are not renormalised.
    """
    if not threshold > 0:
        raise ValueError("convergence threshold must be positive")
    if block_size < 1:
        raise ValueError("block size must be at least 1")

    n = table.size
    worker_blocks = [_blocks(span, block_size) for span in split_ranges(n, num_threads)]
    degrees = table.out_degrees
    teleport = 1.0 / n
    ranks = [1.0 / n] * n

    published_sums = [0.0] * len(worker_blocks)
    published_errors = [0.0] * len(worker_blocks)
    published_converged = [False] * len(worker_blocks)
    global_sum = 0.0
    global_error = 1.0
    rounds = 0
    converged = False

    while not converged:
        rounds += 1
        for worker, blocks in enumerate(worker_blocks):
            local_sum = 0.0
            local_error = 0.0
            local_converged = True
            for block in blocks:
                for node in block:
                    old = ranks[node]
                    if not table.out_links[node]:
                        local_sum += old / n
                    gathered = sum(
                        ranks[source] / degrees[source] for source in table.in_links[node]
                    )
                    new = damping * (gathered + global_sum) + (1.0 - damping) * teleport
                    ranks[node] = new
                    error = abs(new - old)
                    local_error = max(local_error, error)
                    if error > threshold:
                        local_converged = False

            published_sums[worker] = local_sum
            published_errors[worker] = local_error
            published_converged[worker] = local_converged
            if all(published_converged):
                converged = True
            global_sum = sum(published_sums)
            global_error = max(published_errors)
            if converged:
                break

    return PageRankResult(ranks, rounds, global_error)