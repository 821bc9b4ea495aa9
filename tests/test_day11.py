import pytest

from advent2016.day11 import (
    DOWN,
    ELEMENTS,
    UP,
    Element,
    Facility,
    Floor,
    Item,
    Kind,
    Move,
    min_moves,
)


def chip(element):
    return Item(Kind.CHIP, element)


def gen(element):
    return Item(Kind.GENERATOR, element)


def test_floor_burned():
    f = Floor()
    f.add(chip(Element.RUTHENIUM))
    assert not f.burned()

    f.add(gen(Element.POLONIUM))
    assert f.burned()

    f.add(gen(Element.RUTHENIUM))
    assert not f.burned()


def test_floor_add_remove_contains_empty():
    f = Floor()
    assert f.empty()

    f.add(chip(Element.RUTHENIUM))
    assert not f.empty()
    assert f.contains_chip(Element.RUTHENIUM)
    assert not f.contains_generator(Element.RUTHENIUM)

    f.remove(chip(Element.RUTHENIUM))
    assert f.empty()
    assert not f.contains_chip(Element.RUTHENIUM)
    assert not f.contains_generator(Element.RUTHENIUM)

    f.add(gen(Element.RUTHENIUM))
    assert not f.empty()
    assert not f.contains_chip(Element.RUTHENIUM)
    assert f.contains_generator(Element.RUTHENIUM)

    f.remove(gen(Element.RUTHENIUM))
    assert f.empty()
    assert not f.contains_chip(Element.RUTHENIUM)
    assert not f.contains_generator(Element.RUTHENIUM)


def test_floor_count_items():
    f = Floor()
    f.add(chip(Element.THULIUM))
    f.add(gen(Element.THULIUM))
    f.add(chip(Element.ELERIUM))
    assert f.count_items(ELEMENTS) == 2
    assert f.count_items(ELEMENTS + (Element.ELERIUM,)) == 3


def test_facility_burned():
    facility = Facility()
    facility.floors[1].add(chip(Element.THULIUM))
    assert not facility.burned()
    facility.floors[1].add(gen(Element.COBALT))
    assert facility.burned()


def test_facility_completed():
    facility = Facility()
    assert not facility.completed()
    facility.floors[3].add(chip(Element.THULIUM))
    assert facility.completed()
    facility.floors[0].add(gen(Element.THULIUM))
    assert not facility.completed()


def test_next_moves_single_chip_on_ground_floor():
    facility = Facility()
    facility.floors[0].add(chip(Element.THULIUM))
    assert facility.next_moves() == [Move(UP, chip(Element.THULIUM))]


def test_next_moves_down_only_when_lower_floor_has_items():
    facility = Facility(elevator=3)
    facility.floors[3].add(chip(Element.THULIUM))
    assert facility.next_moves() == []
    facility.floors[0].add(gen(Element.COBALT))
    assert facility.non_empty_lower()
    assert facility.next_moves() == [Move(DOWN, chip(Element.THULIUM))]


def test_apply_returns_new_state():
    facility = Facility()
    facility.floors[0].add(chip(Element.THULIUM))
    facility.floors[0].add(gen(Element.THULIUM))
    moved = facility.apply(Move(UP, chip(Element.THULIUM), gen(Element.THULIUM)))
    assert moved.elevator == 1
    assert moved.moves == 1
    assert moved.floors[0].empty()
    assert moved.floors[1].contains_chip(Element.THULIUM)
    assert facility.floors[1].empty()
    assert facility.elevator == 0


def test_apply_out_of_range_raises():
    facility = Facility()
    facility.floors[0].add(chip(Element.THULIUM))
    with pytest.raises(ValueError):
        facility.apply(Move(DOWN, chip(Element.THULIUM)))


def test_key_ignores_moves_and_score_bounds():
    a = Facility()
    a.floors[0].add(chip(Element.THULIUM))
    b = Facility(floors=[Floor(), Floor(), Floor(), Floor()], moves=7)
    b.floors[0].add(chip(Element.THULIUM))
    assert a.key() == b.key()
    assert b.score() >= b.moves


def test_last_steps_example():
    start = Facility(elevator=2)
    start.floors[2].add(chip(Element.THULIUM))
    start.floors[2].add(chip(Element.RUTHENIUM))
    start.floors[2].add(gen(Element.THULIUM))
    start.floors[2].add(gen(Element.RUTHENIUM))
    assert min_moves(start) == 5


def test_complete_example():
    start = Facility()
    start.floors[0].add(chip(Element.THULIUM))
    start.floors[0].add(chip(Element.RUTHENIUM))
    start.floors[1].add(gen(Element.THULIUM))
    start.floors[2].add(gen(Element.RUTHENIUM))
    assert min_moves(start) == 11


def test_unsolvable_raises():
    start = Facility(elevator=3)
    start.floors[0].add(chip(Element.THULIUM))
    with pytest.raises(ValueError):
        min_moves(start)