"""Decompression of text with (NxM) repeat markers."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto

_DIGITS = "0123456789"


class _State(Enum):
    PLAIN = auto()
    COUNT = auto()
    REPEAT = auto()
    COPY = auto()


def _segments(data: str) -> Iterator[tuple[str, int, bool]]:
    """Yield (text, times, is_marker_body) pieces of the compressed data.

    Incomplete markers or marker bodies at the end of the input are dropped.
    """
    state = _State.PLAIN
    pending = ""
    count = repeat = 0
    chunk: list[str] = []
    for char in data:
        if state is _State.PLAIN:
            if char == "(":
                state, pending, count = _State.COUNT, "(", 0
            else:
                yield char, 1, False
        elif state is _State.COUNT:
            if char in _DIGITS:
                count = count * 10 + int(char)
                pending += char
            elif char == "x":
                state, pending, repeat = _State.REPEAT, pending + "x", 0
            elif char == "(":
                yield pending, 1, False
                pending, count = "(", 0
            else:
                yield pending + char, 1, False
                state = _State.PLAIN
        elif state is _State.REPEAT:
            if char in _DIGITS:
                repeat = repeat * 10 + int(char)
                pending += char
            elif char == ")":
                state, chunk = _State.COPY, []
            elif char == "(":
                yield pending, 1, False
                state, pending, count = _State.COUNT, "(", 0
            else:
                yield pending + char, 1, False
                state = _State.PLAIN
        else:
            if count == 0:
                raise ValueError("marker with zero length")
            chunk.append(char)
            if len(chunk) == count:
                yield "".join(chunk), repeat, True
                state = _State.PLAIN


def decompress(data: str) -> str:
    """Expand markers once; marker bodies are copied verbatim."""
    return "".join(text * times for text, times, _ in _segments(data))


def decompressed_length(data: str) -> int:
    """Length after expanding markers recursively inside marker bodies."""
    total = 0
    for text, times, body in _segments(data):
        total += times * (decompressed_length(text) if body else len(text))
    return total