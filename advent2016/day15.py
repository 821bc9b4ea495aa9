"""Timing a capsule drop through a stack of rotating discs."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import count

_DISC = re.compile(
    r"Disc #[0-9]+ has ([0-9]+) positions; at time=0, it is at position ([0-9]+)."
)


@dataclass(frozen=True)
class Disc:
    positions: int
    start: int

    def __post_init__(self) -> None:
        if self.positions <= 0:
            raise ValueError("a disc needs at least one position")

    def positioned(self, time: int) -> bool:
        """True when the disc's slot is at position 0 at ``time``."""
        return (self.start + time) % self.positions == 0


def parse_disc(line: str) -> Disc:
    match = _DISC.search(line)
    if match is None:
        raise ValueError(f"not a disc: {line!r}")
    return Disc(int(match.group(1)), int(match.group(2)))


def aligned(discs: Sequence[Disc], time: int) -> bool:
    """True when a capsule dropped at ``time`` passes every disc."""
    return all(disc.positioned(time + depth) for depth, disc in enumerate(discs, 1))


def first_drop_time(discs: Sequence[Disc]) -> int:
    return next(time for time in count() if aligned(discs, time))


def solve(text: str) -> tuple[int, int]:
    """Drop times without and with an extra 11-position disc at the bottom."""
    discs = [parse_disc(line) for line in text.splitlines() if line.strip()]
    first = first_drop_time(discs)
    second = first_drop_time([*discs, Disc(11, 0)])
    return first, second