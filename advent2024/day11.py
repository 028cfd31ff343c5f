"""Day 11: counting ever-splitting stones."""

from functools import cache

PART1_BLINKS = 25
PART2_BLINKS = 75


@cache
def count_stones(stone: int, blinks: int) -> int:
    """Number of stones a single stone becomes after the given blinks."""
    if blinks == 0:
        return 1
    if stone == 0:
        return count_stones(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return count_stones(int(digits[:half]), blinks - 1) + count_stones(
            int(digits[half:]), blinks - 1
        )
    return count_stones(stone * 2024, blinks - 1)


def _stones(text: str) -> list[int]:
    return [int(word) for word in text.split()]


def part1(text: str) -> int:
    """Stone count after 25 blinks."""
    return sum(count_stones(stone, PART1_BLINKS) for stone in _stones(text))


def part2(text: str) -> int:
    """Stone count after 75 blinks."""
    return sum(count_stones(stone, PART2_BLINKS) for stone in _stones(text))