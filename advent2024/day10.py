"""Day 10: hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator

Position = tuple[int, int]
Grid = list[list[int]]

_STEPS = [(0, -1), (0, 1), (-1, 0), (1, 0)]


def parse(text: str) -> tuple[Grid, list[Position]]:
    """Read the height grid and the positions of every trailhead (height 0)."""
    grid: Grid = []
    starts: list[Position] = []
    for y, line in enumerate(text.splitlines()):
        row = []
        for x, char in enumerate(line):
            if not char.isdigit():
                raise ValueError(f"not a height: {char!r}")
            if char == "0":
                starts.append((x, y))
            row.append(int(char))
        grid.append(row)
    return grid, starts


def _walk(grid: Grid, position: Position, height: int) -> Iterator[Position]:
    width, depth = len(grid[0]), len(grid)
    for dx, dy in _STEPS:
        x, y = position[0] + dx, position[1] + dy
        if not (0 <= x < width and 0 <= y < depth):
            continue
        following = grid[y][x]
        if height == 8 and following == 9:
            yield (x, y)
        elif following == height + 1:
            yield from _walk(grid, (x, y), following)


def trail_ends(grid: Grid, start: Position) -> list[Position]:
    """Summits reached from start, once for every distinct trail."""
    return list(_walk(grid, start, 0))


def part1(text: str) -> int:
    """Sum of trailhead scores (distinct summits reachable)."""
    grid, starts = parse(text)
    return sum(len(set(trail_ends(grid, start))) for start in starts)


def part2(text: str) -> int:
    """Sum of trailhead ratings (distinct trails)."""
    grid, starts = parse(text)
    return sum(len(trail_ends(grid, start)) for start in starts)