"""Day 4: word search."""

from collections.abc import Sequence

_DIRECTIONS = [(-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1)]


def _matches(grid: Sequence[str], row: int, col: int, step: tuple[int, int], word: str) -> bool:
    di, dj = step
    for k, char in enumerate(word[1:], 1):
        i, j = row + di * k, col + dj * k
        if not (0 <= i < len(grid) and 0 <= j < len(grid[i])) or grid[i][j] != char:
            return False
    return True


def find_words(grid: Sequence[str], word: str) -> int:
    """Count occurrences of word in all eight directions."""
    return sum(
        _matches(grid, i, j, step, word)
        for i, row in enumerate(grid)
        for j, char in enumerate(row)
        if char == word[0]
        for step in _DIRECTIONS
    )


def find_x(grid: Sequence[str], word: str) -> int:
    """Count crossings of two diagonal copies of a three-letter word."""
    if len(word) != 3:
        raise ValueError("word must have exactly three letters")
    first, mid, last = word
    count = 0
    for i in range(1, len(grid) - 1):
        for j in range(1, len(grid[i]) - 1):
            if grid[i][j] != mid:
                continue
            top_left, top_right = grid[i - 1][j - 1], grid[i - 1][j + 1]
            bottom_left, bottom_right = grid[i + 1][j - 1], grid[i + 1][j + 1]
            falling = {top_left, bottom_right} == {first, last} and top_left != bottom_right
            rising = {top_right, bottom_left} == {first, last} and top_right != bottom_left
            if first == last:
                falling = top_left == bottom_right == first
                rising = top_right == bottom_left == first
            if falling and rising:
                count += 1
    return count


def part1(text: str) -> int:
    """Occurrences of XMAS."""
    return find_words(text.splitlines(), "XMAS")


def part2(text: str) -> int:
    """Occurrences of an X made of two MAS."""
    return find_x(text.splitlines(), "MAS")