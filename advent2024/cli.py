"""Command line entry point: solve one day's puzzle for a given input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from types import ModuleType

from advent2024 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
)

DAYS: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
    16: day16,
    17: day17,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent2024", description="Solve both parts of a day's puzzle."
    )
    parser.add_argument("day", type=int, choices=sorted(DAYS), help="day number")
    parser.add_argument(
        "input", nargs="?", default="-", help="puzzle input file ('-' for stdin)"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Read the input, print both parts' answers and return the exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as error:
            parser.error(f"cannot read {args.input}: {error.strerror}")
    module = DAYS[args.day]
    print(f"Part 1: {module.part1(text)}")
    print(f"Part 2: {module.part2(text)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())