"""Command line for the Jacobi and Gauss-Seidel node-table solvers."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Sequence

from rankwalk.gauss_seidel import gauss_seidel
from rankwalk.jacobi import jacobi, jacobi_blocked
from rankwalk.nodes import MAX_THREADS, NodeTable, PageRankResult, split_ranges, top_nodes

TOP_COUNT = 10

_TIMING_FILES = {
    "serial": "serial_jacobi.txt",
    "blocking": "jacobi_blocking.txt",
    "gauss-seidel": "gauss_seidel_blocking.txt",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rankwalk-jacobi",
        description="Iterative PageRank over a tab-separated edge list.",
    )
    parser.add_argument(
        "--method",
        choices=sorted(_TIMING_FILES),
        default="serial",
        help="solver to run (default: serial)",
    )
    parser.add_argument(
        "--output",
        help="file the elapsed time is appended to (default depends on method)",
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


def _print_iteration(iteration: int, max_error: float) -> None:
    print(f"Max Error in iteration {iteration} = {max_error:f}")


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
    """Run a node-table solver; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    serial = args.method == "serial"

    if not serial:
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
        table = NodeTable.load(args.filename, args.nodes, skip_comments=serial)
    except OSError:
        print("Error opening the file", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error in graph: {error}", file=sys.stderr)
        return 1
    print("End of connections insertion!")

    print()
    print("Serial version of Pagerank" if serial else "Parallel version of Pagerank")

    start = time.perf_counter()
    try:
        if serial:
            result = jacobi(table, args.threshold, args.damping, _print_iteration)
        elif args.method == "blocking":
            result = jacobi_blocked(
                table, args.threshold, args.damping, args.num_threads, _print_iteration
            )
        else:
            result = gauss_seidel(
                table, args.threshold, args.damping, args.num_threads, _print_iteration
            )
    except ValueError as error:
        print(f"Error in arguments: {error}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start

    _print_top(result, table)
    print(f"Total iterations: {result.iterations}")
    print(f"\nTotaltime = {elapsed:f} seconds")

    output = args.output or _TIMING_FILES[args.method]
    try:
        _append_seconds(output, elapsed)
    except OSError:
        print("Error opening output file for writing")
        return 1

    print("End of program!")
    return 0


if __name__ == "__main__":
    sys.exit(main())