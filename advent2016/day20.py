"""Merging blacklisted IP ranges to find the allowed addresses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MAX_IP = 4294967295


@dataclass(frozen=True)
class IpRange:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid range {self.start}-{self.end}")


def parse_ranges(text: str) -> list[IpRange]:
    """Parse lines of the form ``start-end``."""
    ranges = []
    for line in text.splitlines():
        if not line.strip():
            continue
        start, sep, end = line.strip().partition("-")
        if not sep:
            raise ValueError(f"not a range: {line!r}")
        try:
            ranges.append(IpRange(int(start), int(end)))
        except ValueError as exc:
            raise ValueError(f"not a range: {line!r}") from exc
    return ranges


def merge_ranges(ranges: Iterable[IpRange]) -> list[IpRange]:
    """Sort by start and merge overlapping or adjacent ranges."""
    merged: list[IpRange] = []
    for current in sorted(ranges, key=lambda r: r.start):
        if merged and current.start <= merged[-1].end + 1:
            last = merged[-1]
            if current.end > last.end:
                merged[-1] = IpRange(last.start, current.end)
        else:
            merged.append(current)
    return merged


def cleanup(ranges: Iterable[IpRange], max_ip: int = MAX_IP) -> tuple[int, int]:
    """The first address after the first blocked range, and the allowed count."""
    merged = merge_ranges(ranges)
    if not merged:
        raise ValueError("no blacklist ranges given")
    smallest = merged[0].end + 1
    allowed = sum(b.start - a.end - 1 for a, b in zip(merged, merged[1:]))
    allowed += max_ip - merged[-1].end
    return smallest, allowed