"""Command line entry point: run an assembunny program and print a register."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from advent2016.assembunny import REGISTERS, run_program

DEFAULT_ASSIGNMENTS = ("c=1",)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent2016",
        description="Run an assembunny program and print the value of a register.",
    )
    parser.add_argument(
        "program", nargs="?", default="input.txt", type=Path,
        help="file holding the program (default: input.txt)",
    )
    parser.add_argument(
        "--set", dest="assignments", action="append", metavar="REG=VALUE",
        help="initial register value; may be repeated (default: c=1)",
    )
    parser.add_argument(
        "--show", default="a", choices=REGISTERS,
        help="register to print when the program halts (default: a)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    assignments = args.assignments if args.assignments is not None else DEFAULT_ASSIGNMENTS
    registers: dict[str, int] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        name = name.strip()
        if not sep or name not in REGISTERS:
            parser.error(f"invalid assignment {assignment!r}")
        try:
            registers[name] = int(value)
        except ValueError:
            parser.error(f"invalid value in {assignment!r}")

    try:
        text = args.program.read_text()
    except OSError as exc:
        parser.error(f"cannot read {args.program}: {exc.strerror}")

    try:
        result = run_program(text, registers)
    except ValueError as exc:
        parser.error(str(exc))

    print(result[args.show])
    return 0