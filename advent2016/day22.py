"""Storage nodes in a grid cluster and the pairs that can exchange data."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import permutations

_NODE = re.compile(
    r"([a-z0-9/\-]+)\s+([0-9]+)T\s+([0-9]+)T\s+([0-9]+)T\s+([0-9]+)%"
)
_HEADER_LINES = 2


@dataclass(frozen=True)
class Node:
    name: str
    size: int
    used: int
    free: int
    use: int


def parse_node(line: str) -> Node:
    match = _NODE.search(line)
    if match is None:
        raise ValueError(f"not a node: {line!r}")
    name, *numbers = match.groups()
    size, used, free, use = (int(n) for n in numbers)
    return Node(name, size, used, free, use)


def parse_nodes(text: str) -> list[Node]:
    """Parse ``df`` output, skipping its two header lines."""
    lines = text.splitlines()[_HEADER_LINES:]
    return [parse_node(line) for line in lines if line.strip()]


def count_viable_pairs(nodes: Sequence[Node]) -> int:
    """Ordered pairs (A, B) where A holds data that fits in B's free space."""
    return sum(
        1 for a, b in permutations(nodes, 2) if a.used > 0 and a.used <= b.free
    )