"""Elves in a circle stealing presents until one elf holds them all."""

from __future__ import annotations

from collections import deque


def _check(elves: int) -> None:
    if elves < 1:
        raise ValueError("there must be at least one elf")


def steal_left(elves: int) -> int:
    """Winning elf when each elf steals from the elf to its left."""
    _check(elves)
    circle = deque(range(1, elves + 1))
    while len(circle) > 1:
        circle.append(circle.popleft())
        circle.popleft()
    return circle[0]


def steal_across(elves: int) -> int:
    """Winning elf when each elf steals from the elf directly across."""
    _check(elves)
    left = deque(range(1, elves // 2 + 1))
    right = deque(range(elves // 2 + 1, elves + 1))
    while left and right:
        if len(left) > len(right):
            left.pop()
        else:
            right.popleft()
        right.append(left.popleft())
        left.append(right.popleft())
    return left[0] if left else right[0]