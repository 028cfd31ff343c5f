"""Day 2: checking reactor reports for safety."""

from collections.abc import Sequence


def is_safe(levels: Sequence[int]) -> bool:
    """True when levels all rise or all fall by steps of 1 to 3."""
    ascending: bool | None = None
    for previous, current in zip(levels, levels[1:]):
        step = abs(current - previous)
        if step == 0 or step > 3:
            return False
        if ascending is None:
            ascending = current > previous
        elif ascending != (current > previous):
            return False
    return True


def _reports(text: str) -> list[list[int]]:
    return [[int(word) for word in line.split()] for line in text.strip().splitlines()]


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in _reports(text) if is_safe(report))


def part2(text: str) -> int:
    """Number of reports made safe by dropping one level."""
    return sum(
        1
        for report in _reports(text)
        if any(is_safe(report[:i] + report[i + 1 :]) for i in range(len(report)))
    )