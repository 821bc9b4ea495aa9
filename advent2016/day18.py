"""Rows of safe and trapped floor tiles, each derived from the row above."""

from __future__ import annotations

SAFE = "."
TRAP = "^"


def _clean(row: str) -> str:
    return "".join(tile for tile in row if tile in (SAFE, TRAP))


def next_row(row: str) -> str:
    """The row below: a tile is a trap when its left and right parents differ.

    Tiles beyond the edges count as safe; characters other than '.' and '^'
    are ignored.
    """
    padded = SAFE + _clean(row) + SAFE
    return "".join(
        TRAP if left != right else SAFE for left, right in zip(padded, padded[2:])
    )


def count_safe(first_row: str, rows: int) -> int:
    """Number of safe tiles in the first ``rows`` rows."""
    row = _clean(first_row)
    safe = 0
    for _ in range(rows):
        safe += row.count(SAFE)
        row = next_row(row)
    return safe