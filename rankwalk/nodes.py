"""Node tables with in- and out-links, as used by the iterative solvers."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

MAX_THREADS = 64

_PAIR = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")


def read_pairs(lines: Iterable[str], skip_comments: bool = True) -> Iterator[tuple[int, int]]:
    """Yield integer pairs from lines; lines that do not hold two integers are skipped."""
    for line in lines:
        if skip_comments and line.startswith("#"):
            continue
        match = _PAIR.match(line)
        if match:
            yield int(match[1]), int(match[2])


@dataclass(frozen=True)
class NodeTable:
    """A fixed-size table of nodes with their links and original ids."""

    size: int
    out_links: tuple[tuple[int, ...], ...]
    in_links: tuple[tuple[int, ...], ...]
    original_ids: tuple[int | None, ...]

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]], size: int) -> "NodeTable":
        """Number nodes in order of first appearance; `size` bounds the count."""
        if size < 1:
            raise ValueError("node table size must be at least 1")
        mapping: dict[int, int] = {}
        outgoing: list[list[int]] = [[] for _ in range(size)]
        incoming: list[list[int]] = [[] for _ in range(size)]
        for src, dst in edges:
            for node_id in (src, dst):
                if node_id not in mapping:
                    if len(mapping) == size:
                        raise ValueError(f"edge list has more than {size} distinct nodes")
                    mapping[node_id] = len(mapping)
            u, v = mapping[src], mapping[dst]
            outgoing[u].append(v)
            incoming[v].append(u)

        ids: list[int | None] = list(mapping)
        ids.extend([None] * (size - len(ids)))
        return cls(
            size=size,
            out_links=tuple(map(tuple, outgoing)),
            in_links=tuple(map(tuple, incoming)),
            original_ids=tuple(ids),
        )

    @classmethod
    def load(
        cls, path: str | os.PathLike[str], size: int, skip_comments: bool = True
    ) -> "NodeTable":
        """Read a tab- or space-separated edge file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_edges(read_pairs(handle, skip_comments), size)

    @property
    def out_degrees(self) -> tuple[int, ...]:
        return tuple(len(links) for links in self.out_links)

    def is_dangling(self, node: int) -> bool:
        """True when the node has no outgoing links."""
        return not self.out_links[node]


@dataclass
class PageRankResult:
    """Ranks produced by a solver, with the iteration count and last error."""

    ranks: list[float]
    iterations: int
    max_error: float


def split_ranges(count: int, parts: int) -> list[range]:
    """Split 0..count into `parts` contiguous ranges; the last takes the remainder."""
    if not 1 <= parts <= MAX_THREADS:
        raise ValueError(f"number of threads must be between 1 and {MAX_THREADS}")
    chunk = count // parts
    return [
        range(i * chunk, (i + 1) * chunk if i < parts - 1 else count)
        for i in range(parts)
    ]


def top_nodes(
    ranks: Sequence[float], table: NodeTable, count: int = 10
) -> list[tuple[int | None, float]]:
    """Return up to `count` (original id, rank) pairs, highest rank first."""
    order = sorted(range(len(ranks)), key=ranks.__getitem__, reverse=True)
    return [(table.original_ids[i], ranks[i]) for i in order[: max(count, 0)]]