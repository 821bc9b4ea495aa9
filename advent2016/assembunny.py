"""Interpreter for the small assembunny register language."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

REGISTERS = ("a", "b", "c", "d")
MAX_INSTRUCTIONS = 100_000

_COMMAND = re.compile(r"([a-z]+) ([a-d]|[\-0-9]+)( ([a-d]|[\-0-9]+))?")

_TOGGLE = {
    "cpy": "jnz",
    "inc": "dec",
    "dec": "inc",
    "jnz": "cpy",
    "tgl": "inc",
    "out": "inc",
}
_BINARY = frozenset({"cpy", "jnz"})


@dataclass(frozen=True)
class Instruction:
    """One instruction: an opcode and one or two operands."""

    op: str
    x: str
    y: str | None = None

    def __post_init__(self) -> None:
        if self.op not in _TOGGLE:
            raise ValueError(f"Unknown instruction {self.op!r}")

    def toggled(self) -> Instruction:
        """The instruction that a ``tgl`` turns this one into."""
        return replace(self, op=_TOGGLE[self.op])

    def __str__(self) -> str:
        return " ".join(part for part in (self.op, self.x, self.y) if part is not None)


class Cpu:
    """Four registers, a program that may rewrite itself, and an output tape."""

    def __init__(
        self,
        program: Iterable[Instruction],
        registers: Mapping[str, int] | None = None,
    ) -> None:
        self.program = list(program)
        self.registers = dict.fromkeys(REGISTERS, 0)
        for name, value in (registers or {}).items():
            if name not in self.registers:
                raise ValueError(f"unknown register {name!r}")
            self.registers[name] = value
        self.ip = 0
        self.steps = 0
        self.output: list[int] = []

    @property
    def halted(self) -> bool:
        return not 0 <= self.ip < len(self.program)

    def value(self, operand: str) -> int:
        """The value of a register name or an integer literal."""
        if operand in self.registers:
            return self.registers[operand]
        try:
            return int(operand)
        except ValueError as exc:
            raise ValueError(f"invalid operand {operand!r}") from exc

    def step(self) -> None:
        """Execute the instruction at the instruction pointer."""
        if self.halted:
            raise RuntimeError("program has halted")
        instruction = self.program[self.ip]
        op, x, y = instruction.op, instruction.x, instruction.y
        offset = 1
        if op == "cpy":
            if y in self.registers:
                self.registers[y] = self.value(x)
        elif op == "inc":
            if x in self.registers:
                self.registers[x] += 1
        elif op == "dec":
            if x in self.registers:
                self.registers[x] -= 1
        elif op == "jnz":
            if self.value(x) != 0:
                offset = self.value(y) if y is not None else 0
        elif op == "tgl":
            target = self.ip + self.value(x)
            if 0 <= target < len(self.program):
                self.program[target] = self.program[target].toggled()
        elif op == "out":
            self.output.append(self.value(x))
        self.ip += offset
        self.steps += 1

    def run(self, max_steps: int | None = None) -> list[int]:
        """Run until the program halts or ``max_steps`` have been executed."""
        executed = 0
        while not self.halted and (max_steps is None or executed < max_steps):
            self.step()
            executed += 1
        return self.output


def parse_instruction(line: str) -> Instruction:
    match = _COMMAND.search(line)
    if match is None:
        raise ValueError(f"Unknown instruction {line!r}")
    op, x, y = match.group(1), match.group(2), match.group(4)
    if op not in _TOGGLE:
        raise ValueError(f"Unknown instruction {line!r}")
    if op in _BINARY:
        if y is None:
            raise ValueError(f"{op} needs two operands: {line!r}")
        return Instruction(op, x, y)
    return Instruction(op, x)


def parse_program(text: str) -> list[Instruction]:
    return [parse_instruction(line) for line in text.splitlines() if line.strip()]


def run_program(text: str, registers: Mapping[str, int] | None = None) -> dict[str, int]:
    """Run a program to completion and return its final registers."""
    cpu = Cpu(parse_program(text), registers)
    cpu.run()
    return dict(cpu.registers)


def find_clock_signal(text: str, limit: int = 1000) -> int | None:
    """Lowest initial ``a`` below ``limit`` that makes the program emit 0, 1, 0, 1, ..."""
    program = parse_program(text)
    for start in range(limit):
        cpu = Cpu(program, {"a": start})
        output = cpu.run(MAX_INSTRUCTIONS)
        if output and all(value == index % 2 for index, value in enumerate(output)):
            return start
    return None