# advent2016

Solvers for the puzzles of the 2016 puzzle calendar, written as plain
functions and small classes. Most solvers take the puzzle input as text and
return the answer; reading the input file is up to you.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Using the solvers

```python
from pathlib import Path

from advent2016.day09 import decompress, decompressed_length
from advent2016.day16 import fill
from advent2016.day17 import shortest_path
from advent2016.day18 import count_safe
from advent2016.day19 import steal_across, steal_left
from advent2016.day20 import IpRange, cleanup

decompress("A(1x5)BC")                     # "ABBBBBC"
decompressed_length("X(8x2)(3x3)ABCY")     # 20
fill("10000", 20)                          # "01100"
shortest_path("ihgpwlah")                  # "DDRRRD"
count_safe(".^^.^.^^^^", 10)               # 38
steal_left(5), steal_across(5)             # (3, 2)
cleanup([IpRange(5, 8), IpRange(0, 2), IpRange(4, 7)], max_ip=9)  # (3, 2)

text = Path("input.txt").read_text()
```

What each module offers:

| Module | Main entry points |
| --- | --- |
| `advent2016.day02` | `square_keypad_code`, `diamond_keypad_code` |
| `advent2016.day03` | `is_triangle`, `count_row_triangles`, `count_column_triangles` |
| `advent2016.day04` | `Room`, `parse_room`, `checksum`, `rotate`, `sum_real_sectors`, `find_sector` |
| `advent2016.day05` | `md5_hex`, `first_password`, `second_password` |
| `advent2016.day06` | `most_common_message`, `least_common_message` |
| `advent2016.day07` | `supports_tls`, `supports_ssl`, `count_tls`, `count_ssl` |
| `advent2016.day08` | `Screen` (`rect`, `rotate_row`, `rotate_column`, `apply`, `count_lit`), `run` |
| `advent2016.day09` | `decompress`, `decompressed_length` |
| `advent2016.day10` | `Factory`, `Robot`, `OutputBin`, `run_factory` |
| `advent2016.day11` | `Floor`, `Facility`, `Item`, `Move`, `Kind`, `Element`, `min_moves` |
| `advent2016.day13` | `is_wall`, `shortest_path`, `reachable_within` |
| `advent2016.day14` | `triple`, `hasher`, `key_index` |
| `advent2016.day15` | `Disc`, `parse_disc`, `aligned`, `first_drop_time`, `solve` |
| `advent2016.day16` | `dragon`, `checksum`, `fill` |
| `advent2016.day17` | `open_doors`, `shortest_path`, `longest_path_length` |
| `advent2016.day18` | `next_row`, `count_safe` |
| `advent2016.day19` | `steal_left`, `steal_across` |
| `advent2016.day20` | `IpRange`, `parse_ranges`, `merge_ranges`, `cleanup` |
| `advent2016.day21` | `SwapPosition`, `SwapLetter`, `RotateSteps`, `RotateLetter`, `Reverse`, `Move`, `parse_operation`, `scramble`, `unscramble` |
| `advent2016.day22` | `Node`, `parse_node`, `parse_nodes`, `count_viable_pairs` |
| `advent2016.assembunny` | `Instruction`, `Cpu`, `parse_instruction`, `parse_program`, `run_program`, `find_clock_signal` |

`advent2016.assembunny` is the register machine used by days 12, 23 and 25:
`run_program(text, registers)` runs a program to completion and returns the
final registers, and `find_clock_signal(text, limit)` returns the lowest start
value of register `a` that makes the program emit `0, 1, 0, 1, …`.

Some solvers (days 5 and 14, and the full-size inputs of days 11, 16 and 19)
do a lot of hashing or searching and take a while in pure Python.

## Command line

Installing the package adds an `advent2016` command that runs an assembunny
program and prints one register when it halts:

```
advent2016 input.txt --set c=1 --show a
```

The program file defaults to `input.txt`, the initial registers to `c=1`
(`--set` may be repeated), and the printed register to `a`. See all options
with:

```
advent2016 --help
```

## What is not included

There are no solvers for day 1 (following street directions) or day 24
(visiting the numbered points of the air-duct map). Day 22 only counts the
viable node pairs; the data-moving part of that puzzle is not solved. The
only command is the assembunny runner above; every other solver is used from
Python.