"""Error-corrected messages from column-wise character frequencies."""

from __future__ import annotations

from collections import Counter, defaultdict


def _columns(text: str) -> list[Counter[str]]:
    counts: defaultdict[int, Counter[str]] = defaultdict(Counter)
    for line in text.splitlines():
        for position, char in enumerate(line):
            counts[position][char] += 1
    width = max(counts, default=-1) + 1
    return [counts[position] for position in range(width)]


def most_common_message(text: str) -> str:
    """Message made of the most frequent character in each column."""
    return "".join(
        max(column, key=column.__getitem__) if column else "a"
        for column in _columns(text)
    )


def least_common_message(text: str) -> str:
    """Message made of the least frequent character in each column."""
    return "".join(
        min(column, key=column.__getitem__) if column else "a"
        for column in _columns(text)
    )