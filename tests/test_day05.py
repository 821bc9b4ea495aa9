from types import SimpleNamespace
from unittest.mock import patch

from advent2016.day05 import first_password, md5_hex, second_password

LETTERS = "abcdefgh"


def _fake_md5(table, prefix):
    def factory(data):
        index = int(data.decode()[len(prefix):])
        digest = table.get(index, "f" * 32)
        return SimpleNamespace(hexdigest=lambda: digest)

    return factory


def test_md5_hex_known_digests():
    assert md5_hex("abc") == "900150983cd24fb0d6963f7d28e17f72"
    assert md5_hex("") == "d41d8cd98f00b204e9800998ecf8427e"


def test_first_password_uses_sixth_character():
    table = {3 * i: "00000" + ch + "0" * 26 for i, ch in enumerate(LETTERS)}
    table[1] = "00001" + "z" * 27
    with patch("hashlib.md5", side_effect=_fake_md5(table, "door")):
        assert first_password("door") == LETTERS


def test_second_password_positions():
    table = {10 + i: "00000" + str(i) + ch + "0" * 25 for i, ch in enumerate(LETTERS)}
    table[0] = "000009q" + "0" * 25
    table[1] = "00000aq" + "0" * 25
    table[2] = "000003z" + "0" * 25
    table[3] = "000013q" + "0" * 25
    with patch("hashlib.md5", side_effect=_fake_md5(table, "door")):
        assert second_password("door") == LETTERS[:3] + "z" + LETTERS[4:]