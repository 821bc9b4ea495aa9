import pytest

from advent2016.assembunny import (
    Cpu,
    Instruction,
    find_clock_signal,
    parse_instruction,
    parse_program,
    run_program,
)

COPY_EXAMPLE = """cpy 41 a
inc a
inc a
dec a
jnz a 2
dec a
"""

TOGGLE_EXAMPLE = """cpy 2 a
tgl a
tgl a
tgl a
cpy 1 a
dec a
dec a
"""

CLOCK = """out a
inc a
out a
dec a
jnz 1 -4
"""


def test_copy_example():
    assert run_program(COPY_EXAMPLE)["a"] == 42


def test_toggle_example():
    assert run_program(TOGGLE_EXAMPLE)["a"] == 3


def test_parse_instruction_operands():
    assert parse_instruction("jnz a -2") == Instruction("jnz", "a", "-2")
    assert parse_instruction("inc d") == Instruction("inc", "d")


@pytest.mark.parametrize(
    "op, toggled",
    [
        ("cpy", "jnz"),
        ("jnz", "cpy"),
        ("inc", "dec"),
        ("dec", "inc"),
        ("tgl", "inc"),
        ("out", "inc"),
    ],
)
def test_toggle_mapping(op, toggled):
    assert Instruction(op, "a", "b").toggled().op == toggled


def test_toggle_twice_on_two_operand_instruction_round_trips():
    ins = Instruction("cpy", "a", "b")
    assert ins.toggled().toggled() == ins


@pytest.mark.parametrize("line", ["", "foo a", "cpy 1", "jnz a"])
def test_parse_errors(line):
    with pytest.raises(ValueError):
        parse_instruction(line)


def test_initial_registers_override():
    assert run_program("cpy c a", {"c": 7})["a"] == 7


def test_unknown_register_rejected():
    with pytest.raises(ValueError):
        Cpu([], {"e": 1})


def test_copy_into_literal_is_skipped():
    assert run_program("cpy 1 2") == {"a": 0, "b": 0, "c": 0, "d": 0}


def test_toggle_outside_program_is_ignored():
    cpu = Cpu(parse_program("tgl 5"))
    cpu.run()
    assert [str(i) for i in cpu.program] == ["tgl 5"]


def test_output_values():
    cpu = Cpu(parse_program("out 3\nout a"))
    assert cpu.run() == [3, 0]


def test_max_steps_stops_infinite_loop():
    cpu = Cpu(parse_program("jnz 1 0"))
    cpu.run(max_steps=5)
    assert cpu.steps == 5
    assert cpu.ip == 0
    assert not cpu.halted


def test_step_after_halt_raises():
    cpu = Cpu(parse_program("inc a"))
    cpu.run()
    assert cpu.halted
    with pytest.raises(RuntimeError):
        cpu.step()


def test_program_is_copied():
    program = parse_program("cpy 1 a\ntgl a\ninc b")
    cpu = Cpu(program)
    cpu.run()
    assert program[2] == Instruction("inc", "b")
    assert cpu.program[2] == Instruction("dec", "b")


def test_clock_signal_found():
    assert find_clock_signal(CLOCK) == 0


def test_clock_signal_absent():
    assert find_clock_signal("out a\njnz 1 -1", limit=3) is None