"""Bathroom keypad codes from lines of U/D/L/R moves."""

from __future__ import annotations

_MOVES = {"U": (0, -1), "D": (0, 1), "L": (-1, 0), "R": (1, 0)}

# button -> (up, down, left, right); None means no button in that direction
_DIAMOND: dict[str, tuple[str | None, str | None, str | None, str | None]] = {
    "1": (None, "3", None, None),
    "2": (None, "6", None, "3"),
    "3": ("1", "7", "2", "4"),
    "4": (None, "8", "3", None),
    "5": (None, None, None, "6"),
    "6": ("2", "A", "5", "7"),
    "7": ("3", "B", "6", "8"),
    "8": ("4", "C", "7", "9"),
    "9": (None, None, "8", None),
    "A": ("6", None, None, "B"),
    "B": ("7", "D", "A", "C"),
    "C": ("8", None, "B", None),
    "D": ("B", None, None, None),
}
_DIRECTION_INDEX = {"U": 0, "D": 1, "L": 2, "R": 3}


def _clamp(value: int) -> int:
    return max(0, min(2, value))


def square_keypad_code(text: str) -> str:
    """Code on a 3x3 keypad numbered 1-9, starting on 5."""
    x = y = 1
    digits = []
    for line in text.splitlines():
        for move in line:
            dx, dy = _MOVES.get(move, (0, 0))
            x, y = _clamp(x + dx), _clamp(y + dy)
        digits.append(str(3 * y + x + 1))
    return "".join(digits)


def diamond_keypad_code(text: str) -> str:
    """Code on the diamond-shaped keypad, starting on 5."""
    button = "5"
    code = []
    for line in text.splitlines():
        for move in line:
            index = _DIRECTION_INDEX.get(move)
            if index is None:
                continue
            target = _DIAMOND[button][index]
            if target is not None:
                button = target
        code.append(button)
    return "".join(code)