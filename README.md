# advent2024

Solutions to the Advent of Code 2024 puzzles for days 1 to 17. The package is
plain Python and needs nothing outside the standard library.

## Installation

```
pip install .
```

To install the test suite's requirements and run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `advent2024` command reads one day's puzzle input and prints the answers
to both parts:

```
advent2024 DAY [INPUT]
```

`DAY` is a number from 1 to 17. `INPUT` is the path of the input file. If you
leave it out, or give `-`, the input is read from standard input:

```
advent2024 5 day5.txt
advent2024 11 < day11.txt
```

The output looks like this:

```
Part 1: 143
Part 2: 123
```

If the file cannot be read, the command reports an error and exits with a
usage error status. `advent2024 --help` lists the options. You can also run
the command as `python -m advent2024.cli`.

## Library use

Each day has its own module, from `advent2024.day01` to `advent2024.day17`.
Each module provides `part1(text)` and `part2(text)`. Both take the puzzle
input as a string and return the answer. Day 17 returns its answers as
strings. Every other day returns integers.

```python
from pathlib import Path

from advent2024 import day01

text = Path("day1.txt").read_text()
print(day01.part1(text))
print(day01.part2(text))
```

Malformed input raises `ValueError` where a module checks its format, for
example in days 5, 7, 9, 10, 13, 14, 15 and 17.

Some modules also expose the pieces they are built from:

- `day02.is_safe(levels)` tests a single report.
- `day03.parse_instructions(text, conditionals)` returns `Mul` and `Switch`
  instructions.
- `day05.parse` and `day05.is_ordered` handle rules and page updates.
- `day06.parse_map` and `day06.guard_route` trace the guard. A route that
  loops comes back as `None`.
- `day07.concat(left, right)` and `day07.can_reach(target, numbers,
  operations)` work with the `Operation` enum.
- `day08.parse_antennas` and `day08.count_antinodes` find antennas and their
  antinodes.
- `day09.parse_part1`, `day09.parse_part2` and `day09.DataBlock` describe the
  disk map.
- `day10.parse` and `day10.trail_ends` explore the hiking trails.
- `day11.count_stones(stone, blinks)` is memoised.
- `day12.find_regions` and `day12.count_corners` work on garden regions.
- `day13.parse` returns `Game` records.
- `day14.parse`, `day14.safety_factor` and `day14.render` work with `Robot`.
  `render` draws the floor as text.
- `day15.parse_map`, `day15.parse_wide_map` and `day15.parse_instructions`
  read the warehouse.
- `day16.parse_map`, `day16.solve_part1` and `day16.solve_part2` solve the
  maze.
- `day17.parse` returns a `Computer`. Its `run(stop_if)` method executes the
  program. `day17.Opcode` lists the instructions.

The room in day 14 is 101 by 103 tiles. `day14.part1(text, size)` accepts a
different `(width, height)` for the first part, such as `(11, 7)` for the
puzzle's example. `day14.part2` always uses the full-size room.

## Limitations

- The package does not download puzzle inputs. You have to supply them
  yourself.
- It includes no benchmarking tools.
- `day17.part2` tries every value of register A in turn, starting at zero.
  This search can take a very long time on real inputs.