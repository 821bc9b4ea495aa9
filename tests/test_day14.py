import hashlib

import pytest

from advent2016.day14 import LOOKAHEAD, hasher, key_index, triple


def test_triple_finds_run():
    assert triple("abc777def") == "7"


def test_triple_only_first_run_counts():
    assert triple("aaabbb") == "a"


def test_triple_none_without_run():
    assert triple("abcabcaabb") is None


def test_hasher_plain_matches_md5():
    digest_of = hasher("abc")
    assert digest_of(18) == hashlib.md5(b"abc18").hexdigest()


def test_hasher_stretch_applies_extra_rounds():
    plain = hasher("abc")(5)
    once = hasher("abc", 1)(5)
    assert once == hashlib.md5(plain.encode()).hexdigest()


def test_hasher_is_consistent():
    digest_of = hasher("xyz", 2)
    assert digest_of(3) == digest_of(3)
    assert len(digest_of(3)) == 32


def test_hasher_rejects_negative_stretch():
    with pytest.raises(ValueError):
        hasher("abc", -1)


def test_first_keys_for_example_salt():
    assert key_index("abc", 1) == 39
    assert key_index("abc", 2) == 92


def test_sixty_fourth_key_for_example_salt():
    assert key_index("abc") == 22728


def test_key_has_matching_quintuple_ahead():
    index = key_index("abc", 3)
    digest_of = hasher("abc")
    char = triple(digest_of(index))
    assert char is not None
    assert any(
        char * 5 in digest_of(index + ahead) for ahead in range(1, LOOKAHEAD + 1)
    )


def test_key_index_rejects_zero_count():
    with pytest.raises(ValueError):
        key_index("abc", 0)