"""Command line for the asynchronous Gauss-Seidel solver."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Sequence

from rankwalk.asynchronous import DEFAULT_BLOCK_SIZE, async_gauss_seidel
from rankwalk.nodes import MAX_THREADS, NodeTable, PageRankResult, split_ranges, top_nodes

TOP_COUNT = 10

_TIMING_FILES = {
    "plain": "guess_seidel.txt",
    "cache": "guess_seidel_cache.txt",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rankwalk-async",
        description="Asynchronous Gauss-Seidel PageRank over a tab-separated edge list.",
    )
    parser.add_argument(
        "--variant",
        choices=sorted(_TIMING_FILES),
        default="plain",
        help=f"sweep whole ranges (plain) or blocks of {DEFAULT_BLOCK_SIZE} nodes (cache)",
    )
    parser.add_argument(
        "--output",
        help="file the elapsed time is appended to (default depends on variant)",
    )
    parser.add_argument("filename", help="graph edge-list file")
    parser.add_argument("nodes", type=int, help="number of nodes N")
    parser.add_argument("threshold", type=float, help="convergence threshold")
    parser.add_argument("damping", type=float, help="damping factor d")
    parser.add_argument(
        "num_threads",
        type=int,
        nargs="?",
        default=1,
        help=f"number of node ranges, 1..{MAX_THREADS} (default: 1)",
    )
    return parser


def _append_seconds(path: str | os.PathLike[str], seconds: float) -> None:
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{seconds:f}\n")


def _print_top(result: PageRankResult, table: NodeTable) -> None:
    print(f"\nTop {TOP_COUNT} pages by rank:")
    for position, (page, rank) in enumerate(
        top_nodes(result.ranks, table, TOP_COUNT), start=1
    ):
        label = "?" if page is None else str(page)
        print(f"{position}. Page {label} (rank: {rank:f})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the asynchronous solver; returns the process exit status."""
    args = _build_parser().parse_args(argv)

    try:
        ranges = split_ranges(max(args.nodes, 0), args.num_threads)
    except ValueError:
        print(f"Threads number must be >= 1 and  <= {MAX_THREADS}!")
        return 1
    print()
    for tid, span in enumerate(ranges):
        print(f"Thread {tid}, start = {span.start}, end = {span.stop}")
    print()

    try:
        table = NodeTable.load(args.filename, args.nodes, skip_comments=False)
    except OSError:
        print("Error opening the file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error in graph: {error}", file=sys.stderr)
        return 1
    print("End of connections insertion!")

    print()
    print("Parallel version of Pagerank")

    block_size = DEFAULT_BLOCK_SIZE if args.variant == "cache" else max(table.size, 1)
    start = time.perf_counter()
    try:
        result = async_gauss_seidel(
            table, args.threshold, args.damping, args.num_threads, block_size
        )
    except ValueError as error:
        print(f"Error in arguments: {error}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start
    print(f"Final max error: {result.max_error:f}")

    _print_top(result, table)
    print(f"\nTotaltime = {elapsed:f} seconds")

    try:
        _append_seconds(args.output or _TIMING_FILES[args.variant], elapsed)
    except OSError:
        print("Error opening output file for writing")
        return 1

    print("End of program!")
    return 0


if __name__ == "__main__":
    sys.exit(main())