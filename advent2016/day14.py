"""One-time pad keys found by looking for repeated hex digits in MD5 hashes."""

from __future__ import annotations

import hashlib
import itertools
from collections.abc import Callable

LOOKAHEAD = 1000
KEYS_NEEDED = 64
STRETCH = 2016


def _md5_hex(text: str) -> str:
    return hashlib.md5(text.encode()).hexdigest()


def triple(digest: str) -> str | None:
    """The character of the first run of three equal characters, if any."""
    for a, b, c in zip(digest, digest[1:], digest[2:]):
        if a == b == c:
            return a
    return None


def hasher(salt: str, stretch: int = 0) -> Callable[[int], str]:
    """A cached function from index to the (optionally stretched) hash of salt+index."""
    if stretch < 0:
        raise ValueError("stretch must not be negative")
    cache: dict[int, str] = {}

    def digest_of(index: int) -> str:
        digest = cache.get(index)
        if digest is None:
            digest = _md5_hex(f"{salt}{index}")
            for _ in range(stretch):
                digest = _md5_hex(digest)
            cache[index] = digest
        return digest

    return digest_of


def key_index(salt: str, count: int = KEYS_NEEDED, stretch: int = 0) -> int:
    """Index that produces the ``count``-th key for ``salt``."""
    if count < 1:
        raise ValueError("at least one key must be requested")
    digest_of = hasher(salt, stretch)
    found = 0
    for index in itertools.count():
        char = triple(digest_of(index))
        if char is None:
            continue
        pattern = char * 5
        if any(pattern in digest_of(index + ahead) for ahead in range(1, LOOKAHEAD + 1)):
            found += 1
            if found == count:
                return index
    raise RuntimeError("unreachable")