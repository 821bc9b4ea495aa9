"""Paths through a 4x4 vault whose doors open according to MD5 hashes."""

from __future__ import annotations

import hashlib
from collections import deque
from collections.abc import Iterator

SIZE = 4
_DIRECTIONS = (("U", 0, -1), ("D", 0, 1), ("L", -1, 0), ("R", 1, 0))
_VAULT = (SIZE - 1, SIZE - 1)


def open_doors(passcode: str, path: str) -> str:
    """Directions, in U, D, L, R order, whose doors are open after ``path``."""
    digest = hashlib.md5((passcode + path).encode()).hexdigest()
    return "".join(
        name for (name, _, _), char in zip(_DIRECTIONS, digest) if char >= "b"
    )


def _steps(passcode: str, path: str, x: int, y: int) -> Iterator[tuple[str, int, int]]:
    doors = open_doors(passcode, path)
    for name, dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if name in doors and 0 <= nx < SIZE and 0 <= ny < SIZE:
            yield path + name, nx, ny


def _paths_to_vault(passcode: str) -> Iterator[str]:
    """Yield every path reaching the vault, shortest first."""
    queue = deque([("", 0, 0)])
    while queue:
        path, x, y = queue.popleft()
        for step in _steps(passcode, path, x, y):
            if (step[1], step[2]) == _VAULT:
                yield step[0]
            else:
                queue.append(step)


def shortest_path(passcode: str) -> str:
    """The shortest path to the vault; ``ValueError`` when there is none."""
    for path in _paths_to_vault(passcode):
        return path
    raise ValueError(f"no path to the vault for passcode {passcode!r}")


def longest_path_length(passcode: str) -> int:
    """Length of the longest path that reaches the vault, or 0 if none does."""
    longest = 0
    for path in _paths_to_vault(passcode):
        longest = max(longest, len(path))
    return longest