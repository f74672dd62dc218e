"""Command line for the CSR-graph solvers: power iteration, delta push and random walks."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from rankwalk.graph import (
    DEFAULT_DAMPING,
    DEFAULT_EPSILON,
    DEFAULT_MAX_ITERS,
    Graph,
    append_timing,
    format_top_pages,
)
from rankwalk.power import delta_push, power_iteration
from rankwalk.random_walk import monte_carlo_pagerank

_TIMING_FILES = {
    "power": "parlay_jacobi.txt",
    "delta-push": "delta_push.txt",
    "random-walk": "random_walk.txt",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rankwalk-parlay",
        description="PageRank over a whitespace-separated edge list.",
    )
    parser.add_argument(
        "--method",
        choices=sorted(_TIMING_FILES),
        default="power",
        help="algorithm to run (default: power)",
    )
    parser.add_argument(
        "--output",
        help="file the elapsed time is appended to (default depends on method)",
    )
    parser.add_argument(
        "--walkers", type=int, default=1_000_000, help="random walkers (default: 1000000)"
    )
    parser.add_argument(
        "--walk-length", type=int, default=50, help="steps per walk (default: 50)"
    )
    parser.add_argument(
        "--threads", type=int, default=1, help="walker streams (default: 1)"
    )
    parser.add_argument("--seed", type=int, help="random seed (default: current time)")
    parser.add_argument("filename", help="graph edge-list file")
    parser.add_argument(
        "num_vertices",
        type=int,
        nargs="?",
        default=0,
        help="number of vertices; 0 counts distinct ids (default: 0)",
    )
    parser.add_argument(
        "epsilon",
        type=float,
        nargs="?",
        default=DEFAULT_EPSILON,
        help=f"convergence threshold (default: {DEFAULT_EPSILON:g})",
    )
    parser.add_argument(
        "damping",
        type=float,
        nargs="?",
        default=DEFAULT_DAMPING,
        help=f"damping factor (default: {DEFAULT_DAMPING:g})",
    )
    parser.add_argument(
        "max_iters",
        type=int,
        nargs="?",
        default=DEFAULT_MAX_ITERS,
        help=f"maximum iterations (default: {DEFAULT_MAX_ITERS})",
    )
    return parser


def _print_progress(iteration: int, max_delta: float) -> None:
    print(f"Iteration {iteration}, max_delta = {max_delta:g}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the CSR-graph solvers; returns the process exit status."""
    args = _build_parser().parse_args(argv)

    print("Loading graph...")
    try:
        graph = Graph.load(args.filename, args.num_vertices)
    except OSError:
        print(f"Cannot open {args.filename}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Error in graph: {error}", file=sys.stderr)
        return 1
    print(f"Vertices: {graph.num_vertices}   Edges: {graph.num_edges}")

    start = time.perf_counter()
    try:
        if args.method == "random-walk":
            ranks = monte_carlo_pagerank(
                graph,
                args.walkers,
                args.walk_length,
                args.damping,
                args.threads,
                args.seed,
            )
        else:
            if args.method == "delta-push":
                print("Running PageRank with delta-push approach...")
                report = delta_push(
                    graph, args.epsilon, args.damping, args.max_iters, _print_progress
                )
            else:
                report = power_iteration(graph, args.epsilon, args.damping, args.max_iters)
            print(
                f"Converged in {report.iterations} iterations; "
                f"final error = {report.error:g}"
            )
            ranks = report.ranks
    except ValueError as error:
        print(f"Error in arguments: {error}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start
    print(f"Total PageRank time: {elapsed:g} seconds")

    try:
        append_timing(args.output or _TIMING_FILES[args.method], elapsed)
    except OSError:
        print("Error opening output file for writing", file=sys.stderr)
        return 1

    print(format_top_pages(ranks, graph), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())