"""Door passwords derived from MD5 hashes with five leading zeros."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator
from itertools import count

_LENGTH = 8


def md5_hex(text: str) -> str:
    return hashlib.md5(text.encode()).hexdigest()


def _interesting(door_id: str) -> Iterator[str]:
    """Yield, in index order, the hashes that start with five zeros."""
    for index in count():
        digest = md5_hex(f"{door_id}{index}")
        if digest.startswith("00000"):
            yield digest


def first_password(door_id: str) -> str:
    """Sixth characters of the first eight interesting hashes."""
    characters = []
    for digest in _interesting(door_id):
        characters.append(digest[5])
        if len(characters) == _LENGTH:
            return "".join(characters)
    raise RuntimeError("unreachable")


def second_password(door_id: str) -> str:
    """Password where the sixth character is a position and the seventh the value."""
    slots: list[str | None] = [None] * _LENGTH
    for digest in _interesting(door_id):
        position = ord(digest[5]) - ord("0")
        if not 0 <= position < _LENGTH or slots[position] is not None:
            continue
        slots[position] = digest[6]
        if all(slot is not None for slot in slots):
            return "".join(slot for slot in slots if slot is not None)
    raise RuntimeError("unreachable")