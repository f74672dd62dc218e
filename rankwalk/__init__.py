"""PageRank solvers for directed graphs read from edge lists."""

__version__ = "0.1.0"