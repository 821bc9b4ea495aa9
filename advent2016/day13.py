"""Walking through an office maze whose walls come from a bit-count formula."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

START = (1, 1)
DEFAULT_TARGET = (31, 39)
GRID_LIMIT = 100


def is_wall(x: int, y: int, favorite: int) -> bool:
    """True when (x, y) is a wall; negative coordinates lie outside the building."""
    if x < 0 or y < 0:
        return True
    value = x * x + 3 * x + 2 * x * y + y + y * y + favorite
    return bin(value).count("1") % 2 == 1


def _neighbours(x: int, y: int) -> Iterator[tuple[int, int]]:
    for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nx, ny = x + dx, y + dy
        if nx >= 0 and ny >= 0:
            yield nx, ny


def shortest_path(favorite: int, target: tuple[int, int] = DEFAULT_TARGET) -> int:
    """Fewest steps from (1, 1) to ``target``.

    The search stays inside a 100 by 100 area and raises ``ValueError`` when
    the target cannot be reached there.
    """
    target = (target[0], target[1])
    if target == START:
        return 0
    seen = {START}
    queue = deque([(START, 0)])
    while queue:
        (x, y), moves = queue.popleft()
        for cell in _neighbours(x, y):
            if cell == target:
                return moves + 1
            if cell in seen or cell[0] >= GRID_LIMIT or cell[1] >= GRID_LIMIT:
                continue
            seen.add(cell)
            if not is_wall(cell[0], cell[1], favorite):
                queue.append((cell, moves + 1))
    raise ValueError(f"cannot reach {target} with favorite number {favorite}")


def reachable_within(favorite: int, max_moves: int = 50) -> int:
    """Number of open locations, the start included, at most ``max_moves`` steps away."""
    seen = {START}
    queue = deque([(START, 0)])
    locations = 0
    while queue:
        (x, y), moves = queue.popleft()
        locations += 1
        if moves >= max_moves:
            continue
        for cell in _neighbours(x, y):
            if cell in seen:
                continue
            seen.add(cell)
            if not is_wall(cell[0], cell[1], favorite):
                queue.append((cell, moves + 1))
    return locations