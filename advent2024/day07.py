"""Day 7: calibrating equations with operators."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Operation(Enum):
    """An operator placed between two numbers."""

    ADD = "+"
    MULTIPLY = "*"
    CONCAT = "||"


def concat(left: int, right: int) -> int:
    """Join the decimal digits of left and right."""
    scale = 1
    rest = right
    while rest > 0:
        rest //= 10
        scale *= 10
    return left * scale + right


def parse(text: str) -> list[tuple[int, list[int]]]:
    """Read lines of the form 'target: n1 n2 ...'."""
    equations = []
    for line in text.splitlines():
        if not line:
            continue
        target, sep, rest = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed equation: {line!r}")
        equations.append((int(target), [int(n) for n in rest.split(" ")]))
    return equations


def _apply(operation: Operation, total: int, number: int) -> int:
    if operation is Operation.ADD:
        return total + number
    if operation is Operation.MULTIPLY:
        return total * number
    return concat(total, number)


def _search(numbers: Sequence[int], total: int, target: int, operations: Sequence[Operation]) -> bool:
    number = numbers[0]
    for operation in operations:
        new_total = _apply(operation, total, number)
        if new_total == target and len(numbers) == 1:
            return True
        if new_total > target or len(numbers) <= 1:
            continue
        if _search(numbers[1:], new_total, target, operations):
            return True
    return False


def can_reach(target: int, numbers: Sequence[int], operations: Sequence[Operation]) -> bool:
    """True when some left-to-right choice of operators yields target."""
    minimum = sum(n for n in numbers if n != 1)
    if target < minimum:
        return False
    if target == minimum:
        return True
    if len(numbers) < 2:
        return False
    return _search(numbers[1:], numbers[0], target, operations)


def part1(text: str) -> int:
    """Sum of targets reachable with addition and multiplication."""
    operations = (Operation.ADD, Operation.MULTIPLY)
    return sum(t for t, numbers in parse(text) if can_reach(t, numbers, operations))


def part2(text: str) -> int:
    """Sum of targets reachable when concatenation is also allowed."""
    operations = tuple(Operation)
    return sum(t for t, numbers in parse(text) if can_reach(t, numbers, operations))