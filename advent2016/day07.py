"""TLS and SSL support checks for bracketed IPv7 addresses."""

from __future__ import annotations


def supports_tls(address: str) -> bool:
    """An ABBA outside brackets and none inside."""
    outside = inside = False
    hypernet = False
    for a, b, c, d in zip(address, address[1:], address[2:], address[3:]):
        if a == "[":
            hypernet = True
        elif a == "]":
            hypernet = False
        elif a == d and b == c and a != b:
            if hypernet:
                inside = True
            else:
                outside = True
    return outside and not inside


def supports_ssl(address: str) -> bool:
    """An ABA outside brackets with a matching BAB inside."""
    abas: list[str] = []
    babs: set[str] = set()
    hypernet = False
    for a, b, c in zip(address, address[1:], address[2:]):
        if a == "[":
            hypernet = True
        elif a == "]":
            hypernet = False
        elif a == c and a != b:
            (babs.add if hypernet else abas.append)(a + b + c)
    return any(aba[1] + aba[0] + aba[1] in babs for aba in abas)


def count_tls(text: str) -> int:
    return sum(supports_tls(line) for line in text.splitlines())


def count_ssl(text: str) -> int:
    return sum(supports_ssl(line) for line in text.splitlines())