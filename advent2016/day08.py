"""A tiny pixel screen driven by rect and rotate commands."""

from __future__ import annotations

import re

COLUMNS = 50
ROWS = 6

_RECT = re.compile(r"rect ([0-9]+)x([0-9]+)")
_ROTATE_ROW = re.compile(r"rotate row y=([0-9]+) by ([0-9]+)")
_ROTATE_COLUMN = re.compile(r"rotate column x=([0-9]+) by ([0-9]+)")


class Screen:
    """A grid of pixels that are either lit or dark."""

    def __init__(self, columns: int = COLUMNS, rows: int = ROWS) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError("screen must have at least one row and column")
        self.columns = columns
        self.rows = rows
        self.pixels = [[False] * columns for _ in range(rows)]

    def rect(self, width: int, height: int) -> None:
        """Light the top-left rectangle of ``width`` by ``height`` pixels."""
        if width > self.columns or height > self.rows:
            raise ValueError(f"rect {width}x{height} does not fit the screen")
        for row in self.pixels[:height]:
            row[:width] = [True] * width

    def rotate_row(self, row: int, amount: int) -> None:
        """Shift a row right by ``amount``, wrapping around."""
        if amount <= 0:
            return
        pixels = self.pixels[row]
        shift = amount % self.columns
        self.pixels[row] = pixels[-shift:] + pixels[:-shift] if shift else pixels

    def rotate_column(self, column: int, amount: int) -> None:
        """Shift a column down by ``amount``, wrapping around."""
        if amount <= 0:
            return
        values = [row[column] for row in self.pixels]
        shift = amount % self.rows
        if shift:
            values = values[-shift:] + values[:-shift]
        for row, value in zip(self.pixels, values):
            row[column] = value

    def apply(self, command: str) -> None:
        """Apply one text command; unrecognised commands are ignored."""
        if match := _RECT.search(command):
            self.rect(int(match.group(1)), int(match.group(2)))
        elif match := _ROTATE_ROW.search(command):
            self.rotate_row(int(match.group(1)), int(match.group(2)))
        elif match := _ROTATE_COLUMN.search(command):
            self.rotate_column(int(match.group(1)), int(match.group(2)))

    def count_lit(self) -> int:
        return sum(sum(row) for row in self.pixels)

    def __str__(self) -> str:
        lines = []
        for row in self.pixels:
            cells = []
            for index, lit in enumerate(row):
                if index and index % 5 == 0:
                    cells.append(" ")
                cells.append("1" if lit else " ")
            lines.append("".join(cells) + "\n")
        return "".join(lines)


def run(text: str) -> Screen:
    """Run every command line on a fresh 50x6 screen."""
    screen = Screen()
    for line in text.splitlines():
        screen.apply(line)
    return screen