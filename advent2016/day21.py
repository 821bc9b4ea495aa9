"""Scrambling and unscrambling passwords with a list of string operations."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union


class RotationDirection(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> RotationDirection:
        if self is RotationDirection.LEFT:
            return RotationDirection.RIGHT
        return RotationDirection.LEFT


def _rotate(text: str, direction: RotationDirection, steps: int) -> str:
    if not text:
        return text
    steps %= len(text)
    split = steps if direction is RotationDirection.LEFT else len(text) - steps
    return text[split:] + text[:split]


def _check_positions(text: str, *positions: int) -> None:
    for position in positions:
        if not 0 <= position < len(text):
            raise ValueError(f"position {position} outside {text!r}")


@dataclass(frozen=True)
class SwapPosition:
    x: int
    y: int

    def execute(self, text: str) -> str:
        _check_positions(text, self.x, self.y)
        chars = list(text)
        chars[self.x], chars[self.y] = chars[self.y], chars[self.x]
        return "".join(chars)

    def undo(self, text: str) -> str:
        return self.execute(text)


@dataclass(frozen=True)
class SwapLetter:
    x: str
    y: str

    def execute(self, text: str) -> str:
        return text.translate(str.maketrans({self.x: self.y, self.y: self.x}))

    def undo(self, text: str) -> str:
        return self.execute(text)


@dataclass(frozen=True)
class RotateSteps:
    direction: RotationDirection
    steps: int

    def execute(self, text: str) -> str:
        return _rotate(text, self.direction, self.steps)

    def undo(self, text: str) -> str:
        return _rotate(text, self.direction.opposite, self.steps)


@dataclass(frozen=True)
class RotateLetter:
    letter: str

    def execute(self, text: str) -> str:
        index = text.find(self.letter)
        if index < 0:
            return text
        extra = 1 if index >= 4 else 0
        return _rotate(text, RotationDirection.RIGHT, (1 + index + extra) % len(text))

    def undo(self, text: str) -> str:
        index = text.find(self.letter)
        if index < 0:
            return text
        size = len(text)
        if index == 0:
            original = (2 * size - 2) // 2
        elif index % 2 == 0:
            original = (size + index - 2) // 2
        else:
            original = (index - 1) // 2
        return _rotate(text, RotationDirection.RIGHT, (original - index + size) % size)


@dataclass(frozen=True)
class Reverse:
    x: int
    y: int

    def execute(self, text: str) -> str:
        _check_positions(text, self.x, self.y)
        if self.x > self.y:
            raise ValueError(f"reverse from {self.x} through {self.y} is backwards")
        return text[: self.x] + text[self.x : self.y + 1][::-1] + text[self.y + 1 :]

    def undo(self, text: str) -> str:
        return self.execute(text)


@dataclass(frozen=True)
class Move:
    x: int
    y: int

    @staticmethod
    def _move(text: str, source: int, target: int) -> str:
        _check_positions(text, source, target)
        chars = list(text)
        chars.insert(target, chars.pop(source))
        return "".join(chars)

    def execute(self, text: str) -> str:
        return self._move(text, self.x, self.y)

    def undo(self, text: str) -> str:
        return self._move(text, self.y, self.x)


Operation = Union[SwapPosition, SwapLetter, RotateSteps, RotateLetter, Reverse, Move]

_SWAP_POSITION = re.compile(r"swap position ([0-9]) with position ([0-9])")
_SWAP_LETTER = re.compile(r"swap letter ([a-z]) with letter ([a-z])")
_ROTATE = re.compile(r"rotate (left|right) ([0-9]) step[s]?")
_ROTATE_LETTER = re.compile(r"rotate based on position of letter ([a-z])")
_REVERSE = re.compile(r"reverse positions ([0-9]) through ([0-9])")
_MOVE = re.compile(r"move position ([0-9]) to position ([0-9])")


def parse_operation(line: str) -> Operation:
    if match := _SWAP_POSITION.search(line):
        return SwapPosition(int(match.group(1)), int(match.group(2)))
    if match := _SWAP_LETTER.search(line):
        return SwapLetter(match.group(1), match.group(2))
    if match := _ROTATE.search(line):
        return RotateSteps(RotationDirection(match.group(1)), int(match.group(2)))
    if match := _ROTATE_LETTER.search(line):
        return RotateLetter(match.group(1))
    if match := _REVERSE.search(line):
        return Reverse(int(match.group(1)), int(match.group(2)))
    if match := _MOVE.search(line):
        return Move(int(match.group(1)), int(match.group(2)))
    raise ValueError(f"UNKNOWN COMMAND {line!r}")


def scramble(password: str, operations: Iterable[Operation]) -> str:
    for operation in operations:
        password = operation.execute(password)
    return password


def unscramble(password: str, operations: Sequence[Operation]) -> str:
    """Undo the operations in reverse order."""
    for operation in reversed(operations):
        password = operation.undo(password)
    return password