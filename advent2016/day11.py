"""Moving chips and generators between floors without frying any chip."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum, IntFlag
from itertools import combinations

UP = 1
DOWN = -1


class Kind(Enum):
    CHIP = "chip"
    GENERATOR = "generator"


class Element(IntFlag):
    THULIUM = 1 << 0
    RUTHENIUM = 1 << 1
    COBALT = 1 << 2
    POLONIUM = 1 << 3
    PROMETHIUM = 1 << 4
    ELERIUM = 1 << 5
    DILITHIUM = 1 << 6


ELEMENTS: tuple[Element, ...] = (
    Element.THULIUM,
    Element.RUTHENIUM,
    Element.COBALT,
    Element.POLONIUM,
    Element.PROMETHIUM,
)


@dataclass(frozen=True)
class Item:
    kind: Kind
    element: Element


@dataclass(frozen=True)
class Move:
    """An elevator trip carrying one or two items."""

    direction: int
    first: Item
    second: Item | None = None

    @property
    def items(self) -> tuple[Item, ...]:
        if self.second is None:
            return (self.first,)
        return (self.first, self.second)


@dataclass
class Floor:
    """Chips and generators on one floor, each held as a bit set."""

    gens: int = 0
    chips: int = 0

    def empty(self) -> bool:
        return self.gens == 0 and self.chips == 0

    def burned(self) -> bool:
        """True when a chip shares the floor with generators but not its own."""
        if self.gens == 0:
            return False
        return (self.chips & ~self.gens) != 0

    def add(self, item: Item) -> None:
        if item.kind is Kind.CHIP:
            self.chips |= int(item.element)
        else:
            self.gens |= int(item.element)

    def remove(self, item: Item) -> None:
        if item.kind is Kind.CHIP:
            self.chips &= ~int(item.element)
        else:
            self.gens &= ~int(item.element)

    def contains_chip(self, element: Element) -> bool:
        return self.chips & int(element) == int(element)

    def contains_generator(self, element: Element) -> bool:
        return self.gens & int(element) == int(element)

    def count_items(self, elements: tuple[Element, ...]) -> int:
        return sum(
            self.contains_chip(e) + self.contains_generator(e) for e in elements
        )


def _four_floors() -> list[Floor]:
    return [Floor() for _ in range(4)]


@dataclass
class Facility:
    """The whole building: floors, elevator position and moves made so far."""

    floors: list[Floor] = field(default_factory=_four_floors)
    elevator: int = 0
    moves: int = 0
    elements: tuple[Element, ...] = ELEMENTS

    def __post_init__(self) -> None:
        if not self.floors:
            raise ValueError("a facility needs at least one floor")
        if not 0 <= self.elevator < len(self.floors):
            raise ValueError(f"elevator on missing floor {self.elevator}")

    @property
    def _top(self) -> int:
        return len(self.floors) - 1

    def burned(self) -> bool:
        return any(floor.burned() for floor in self.floors)

    def completed(self) -> bool:
        """All floors but the top one are empty, and the top one is not."""
        return all(f.empty() for f in self.floors[:-1]) and not self.floors[-1].empty()

    def non_empty_lower(self) -> bool:
        return any(not f.empty() for f in self.floors[: self.elevator])

    def next_moves(self) -> list[Move]:
        here = self.floors[self.elevator]
        chips = [e for e in self.elements if here.contains_chip(e)]
        gens = [e for e in self.elements if here.contains_generator(e)]
        moves: list[Move] = []

        if self.elevator < self._top:
            moves.extend(
                Move(UP, Item(Kind.CHIP, c), Item(Kind.GENERATOR, g))
                for c in chips
                for g in gens
            )
            moves.extend(
                Move(UP, Item(Kind.CHIP, a), Item(Kind.CHIP, b))
                for a, b in combinations(chips, 2)
            )
            moves.extend(
                Move(UP, Item(Kind.GENERATOR, a), Item(Kind.GENERATOR, b))
                for a, b in combinations(gens, 2)
            )
            moves.extend(self._singles(UP))

        if self.elevator > 0 and self.non_empty_lower():
            moves.extend(self._singles(DOWN))
        return moves

    def _singles(self, direction: int) -> list[Move]:
        here = self.floors[self.elevator]
        singles = []
        for element in self.elements:
            if here.contains_chip(element):
                singles.append(Move(direction, Item(Kind.CHIP, element)))
            if here.contains_generator(element):
                singles.append(Move(direction, Item(Kind.GENERATOR, element)))
        return singles

    def apply(self, move: Move) -> Facility:
        """Return a new facility with the move carried out."""
        target = self.elevator + move.direction
        if not 0 <= target < len(self.floors):
            raise ValueError(f"cannot move the elevator to floor {target}")
        floors = [replace(floor) for floor in self.floors]
        for item in move.items:
            floors[self.elevator].remove(item)
            floors[target].add(item)
        return Facility(floors, target, self.moves + 1, self.elements)

    def score(self) -> int:
        """Moves made plus a rough estimate of the moves still needed."""
        estimate = sum(
            floor.count_items(self.elements) // 2 * 4 * (self._top - level)
            for level, floor in enumerate(self.floors[:-1])
        )
        return self.moves + estimate

    def key(self) -> tuple[int, tuple[tuple[int, int], ...]]:
        """Identity of the state, ignoring how many moves it took."""
        return self.elevator, tuple((f.gens, f.chips) for f in self.floors)


def min_moves(start: Facility) -> int:
    """Fewest moves that bring every item to the top floor."""
    seen = {start.key()}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for move in current.next_moves():
            candidate = current.apply(move)
            if candidate.completed():
                return candidate.moves
            if candidate.burned():
                continue
            key = candidate.key()
            if key in seen:
                continue
            seen.add(key)
            queue.append(candidate)
    raise ValueError("no sequence of moves brings everything to the top floor")