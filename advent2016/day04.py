"""Encrypted room names with checksums and shift-cipher decryption."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

_ROOM = re.compile(r"([a-z\-]+)-([0-9]+)\[([a-z]+)\]")


@dataclass(frozen=True)
class Room:
    name: str
    sector: int
    checksum: str

    def is_real(self) -> bool:
        """True when the stated checksum matches the computed one."""
        return self.checksum == checksum(self.name)

    def decrypted_name(self) -> str:
        return rotate(self.name, self.sector)


def parse_room(line: str) -> Room:
    match = _ROOM.search(line)
    if match is None:
        raise ValueError(f"not a room: {line!r}")
    return Room(match.group(1), int(match.group(2)), match.group(3))


def checksum(name: str) -> str:
    """The five most common letters, ties broken alphabetically."""
    counts = Counter(c for c in name if c != "-")
    if len(counts) < 5:
        raise ValueError(f"fewer than five distinct letters in {name!r}")
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return "".join(letter for letter, _ in ordered[:5])


def rotate(name: str, shift: int) -> str:
    """Shift each letter forward by ``shift``; dashes become spaces."""
    return "".join(
        " " if c == "-" else chr((ord(c) - ord("a") + shift) % 26 + ord("a"))
        for c in name
    )


def _rooms(text: str) -> list[Room]:
    return [parse_room(line) for line in text.splitlines() if line.strip()]


def sum_real_sectors(text: str) -> int:
    return sum(room.sector for room in _rooms(text) if room.is_real())


def find_sector(text: str, target: str = "northpole object storage") -> int | None:
    """Sector of the first real room whose decrypted name equals ``target``."""
    for room in _rooms(text):
        if room.is_real() and room.decrypted_name() == target:
            return room.sector
    return None