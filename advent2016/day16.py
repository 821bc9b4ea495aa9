"""Dragon-curve disk filling and its pairwise checksum."""

from __future__ import annotations

_INVERT = str.maketrans("01", "10")


def dragon(bits: str) -> str:
    """One dragon-curve step: bits, a 0, then the bits reversed and inverted."""
    return bits + "0" + bits[::-1].translate(_INVERT)


def checksum(bits: str) -> str:
    """One reduction: 1 for each equal pair, 0 for each differing pair."""
    if len(bits) % 2:
        raise ValueError("checksum needs an even number of bits")
    return "".join("1" if a == b else "0" for a, b in zip(bits[::2], bits[1::2]))


def fill(start: str, length: int) -> str:
    """Checksum of a disk of ``length`` bits filled from ``start``."""
    if length <= 0:
        raise ValueError("disk length must be positive")
    if set(start) - {"0", "1"}:
        raise ValueError(f"not a bit string: {start!r}")
    data = start
    while len(data) < length:
        data = dragon(data)
    digest = checksum(data[:length])
    while len(digest) % 2 == 0:
        digest = checksum(digest)
    return digest