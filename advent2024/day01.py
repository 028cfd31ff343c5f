"""Day 1: comparing two location lists."""

from collections import Counter


def _parse(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        first, second, *_ = line.split()
        left.append(int(first))
        right.append(int(second))
    return left, right


def part1(text: str) -> int:
    """Sum of distances between the sorted left and right lists."""
    left, right = _parse(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left number times its count in the right list."""
    left, right = _parse(text)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)