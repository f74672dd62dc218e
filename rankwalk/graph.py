"""Directed graphs in compressed sparse row form, built from edge lists."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import accumulate, chain

DEFAULT_DAMPING = 0.85
DEFAULT_EPSILON = 1e-6
DEFAULT_MAX_ITERS = 100

_EDGE = re.compile(r"\s*(\d+)\s+(\d+)")


def parse_edge_list(lines: Iterable[str]) -> Iterator[tuple[int, int]]:
    """Yield (source, destination) pairs, skipping blanks, comments and bad lines."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue
        match = _EDGE.match(line)
        if match:
            yield int(match[1]), int(match[2])


def _csr(buckets: list[list[int]]) -> tuple[tuple[int, ...], tuple[int, ...]]:
    offsets = tuple(accumulate((len(b) for b in buckets), initial=0))
    return offsets, tuple(chain.from_iterable(buckets))


@dataclass(frozen=True)
class Graph:
    """A directed graph whose vertices are numbered 0..num_vertices-1."""

    num_vertices: int
    out_degrees: tuple[int, ...]
    out_offsets: tuple[int, ...]
    out_edges: tuple[int, ...]
    in_offsets: tuple[int, ...]
    in_edges: tuple[int, ...]
    id_to_idx: dict[int, int]
    idx_to_id: tuple[int, ...]

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]], num_vertices: int = 0) -> "Graph":
        """Build a graph; vertex indices follow the order ids first appear."""
        pairs = list(edges)
        id_to_idx: dict[int, int] = {}
        for src, dst in pairs:
            id_to_idx.setdefault(src, len(id_to_idx))
            id_to_idx.setdefault(dst, len(id_to_idx))

        n = num_vertices if num_vertices > 0 else len(id_to_idx)
        if n < len(id_to_idx):
            raise ValueError(
                f"edge list has {len(id_to_idx)} distinct vertices, more than {n}"
            )

        idx_to_id = [0] * n
        for vertex_id, idx in id_to_idx.items():
            idx_to_id[idx] = vertex_id

        outgoing: list[list[int]] = [[] for _ in range(n)]
        incoming: list[list[int]] = [[] for _ in range(n)]
        for src, dst in pairs:
            u, v = id_to_idx[src], id_to_idx[dst]
            outgoing[u].append(v)
            incoming[v].append(u)

        out_offsets, out_edges = _csr(outgoing)
        in_offsets, in_edges = _csr(incoming)
        return cls(
            num_vertices=n,
            out_degrees=tuple(len(b) for b in outgoing),
            out_offsets=out_offsets,
            out_edges=out_edges,
            in_offsets=in_offsets,
            in_edges=in_edges,
            id_to_idx=id_to_idx,
            idx_to_id=tuple(idx_to_id),
        )

    @classmethod
    def load(cls, path: str | os.PathLike[str], num_vertices: int = 0) -> "Graph":
        """Read an edge-list file of whitespace-separated id pairs."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_edges(parse_edge_list(handle), num_vertices)

    @property
    def num_edges(self) -> int:
        return len(self.out_edges)

    def out_neighbors(self, vertex: int) -> tuple[int, ...]:
        return self.out_edges[self.out_offsets[vertex]:self.out_offsets[vertex + 1]]

    def in_neighbors(self, vertex: int) -> tuple[int, ...]:
        return self.in_edges[self.in_offsets[vertex]:self.in_offsets[vertex + 1]]


def top_pages(ranks: Sequence[float], graph: Graph, count: int = 10) -> list[tuple[int, float]]:
    """Return up to `count` (original id, rank) pairs, highest rank first."""
    if len(ranks) < graph.num_vertices:
        raise ValueError("fewer ranks than vertices")
    ordered = sorted(
        zip(graph.idx_to_id, ranks[: graph.num_vertices]),
        key=lambda pair: pair[1],
        reverse=True,
    )
    return ordered[: max(count, 0)]


def format_top_pages(ranks: Sequence[float], graph: Graph, count: int = 10) -> str:
    """Render the highest-ranked pages as a numbered listing."""
    lines = [f"Top {count} pages by rank:"]
    lines.extend(
        f"{position}. Page {page} (rank={rank:g})"
        for position, (page, rank) in enumerate(top_pages(ranks, graph, count), start=1)
    )
    return "\n".join(lines) + "\n"


def append_timing(path: str | os.PathLike[str], seconds: float) -> None:
    """Append one elapsed-time measurement as a line of the file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{seconds:g}\n")