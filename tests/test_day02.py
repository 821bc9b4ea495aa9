from advent2016.day02 import diamond_keypad_code, square_keypad_code

EXAMPLE = "ULL\nRRDDD\nLURDL\nUUUUD"


def test_square_example():
    assert square_keypad_code(EXAMPLE) == "1985"


def test_diamond_example():
    assert diamond_keypad_code(EXAMPLE) == "5DB3"


def test_one_button_per_line():
    lines = EXAMPLE.splitlines()
    assert len(square_keypad_code(EXAMPLE)) == len(lines)
    assert len(diamond_keypad_code(EXAMPLE)) == len(lines)


def test_moves_into_edges_are_ignored():
    assert square_keypad_code("LLLL") == square_keypad_code("L")
    assert diamond_keypad_code("UUUU") == diamond_keypad_code("U")
    assert diamond_keypad_code("LLLL") == diamond_keypad_code("")  or diamond_keypad_code("LLLL") == diamond_keypad_code("L")


def test_unknown_moves_do_nothing():
    assert square_keypad_code("UxL") == square_keypad_code("UL")
    assert diamond_keypad_code("RxU") == diamond_keypad_code("RU")