"""Robots passing microchips to each other and to output bins."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol, Union

_VALUE = re.compile(r"value ([0-9]+) goes to bot ([0-9]+)")
_WIRING = re.compile(
    r"bot ([0-9]+) gives low to (bot|output) ([0-9]+) and high to (bot|output) ([0-9]+)"
)


class _Recipient(Protocol):
    def put(self, chip: int) -> None: ...


@dataclass
class OutputBin:
    id: str
    chip: int = -1

    def put(self, chip: int) -> None:
        self.chip = chip


@dataclass
class Robot:
    id: str
    low: Union[Robot, OutputBin, None] = None
    high: Union[Robot, OutputBin, None] = None
    first: int | None = None
    second: int | None = None
    compared: list[tuple[int, int]] = field(default_factory=list)

    def put(self, chip: int) -> None:
        """Take a chip; with two in hand, pass low and high onwards."""
        if self.first is None:
            self.first = chip
            return
        self.second = chip
        low, high = sorted((self.first, self.second))
        self.compared.append((low, high))
        if self.low is None or self.high is None:
            raise RuntimeError(f"bot {self.id} has nowhere to pass its chips")
        self.low.put(low)
        self.high.put(high)


class Factory:
    """All robots and output bins, created on first use."""

    def __init__(self) -> None:
        self.bots: dict[str, Robot] = {}
        self.bins: dict[str, OutputBin] = {}

    def recipient(self, kind: str, number: str) -> Robot | OutputBin:
        number = str(number)
        if kind == "bot":
            return self.bots.setdefault(number, Robot(number))
        if kind == "output":
            return self.bins.setdefault(number, OutputBin(number))
        raise ValueError(f"Unknown recipient type {kind}")

    def _bot(self, number: str) -> Robot:
        bot = self.recipient("bot", number)
        assert isinstance(bot, Robot)
        return bot

    def give_value(self, value: int, bot: str) -> None:
        self._bot(bot).put(value)

    def connect(
        self, bot: str, low_kind: str, low_number: str, high_kind: str, high_number: str
    ) -> None:
        robot = self._bot(bot)
        robot.low = self.recipient(low_kind, low_number)
        robot.high = self.recipient(high_kind, high_number)

    def bot_comparing(self, low: int, high: int) -> str | None:
        """Id of the bot that compared these two chips, if any did."""
        pair = tuple(sorted((low, high)))
        for bot in self.bots.values():
            if pair in bot.compared:
                return bot.id
        return None

    def output(self, number: str) -> OutputBin:
        bin_ = self.recipient("output", number)
        assert isinstance(bin_, OutputBin)
        return bin_


def run_factory(text: str) -> Factory:
    """Wire the robots and hand out values; wiring commands sort first."""
    factory = Factory()
    for command in sorted(text.splitlines()):
        if match := _VALUE.search(command):
            factory.give_value(int(match.group(1)), match.group(2))
        elif match := _WIRING.search(command):
            factory.connect(*match.groups())
        else:
            raise ValueError(f"BAD COMMAND: {command}")
    return factory