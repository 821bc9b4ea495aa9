"""Counting valid triangles given as rows or as columns of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import zip_longest


def is_triangle(a: int, b: int, c: int) -> bool:
    """True when every pair of sides is longer than the remaining side."""
    return a + b > c and a + c > b and b + c > a


def _chunks(values: Iterable[int], size: int) -> Iterator[tuple[int, ...]]:
    iterator = iter(values)
    return zip_longest(*[iterator] * size, fillvalue=0)


def _numbers(text: str) -> list[int]:
    return [int(word) for word in text.split()]


def count_row_triangles(text: str) -> int:
    """Count triangles where each group of three numbers is one triangle."""
    return sum(is_triangle(*group) for group in _chunks(_numbers(text), 3))


def count_column_triangles(text: str) -> int:
    """Count triangles read down the columns, three rows at a time."""
    count = 0
    for block in _chunks(_numbers(text), 9):
        rows = [block[0:3], block[3:6], block[6:9]]
        count += sum(is_triangle(*column) for column in zip(*rows))
    return count