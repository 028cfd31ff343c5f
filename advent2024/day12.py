"""Day 12: fencing garden regions."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

Position = tuple[int, int]

_DIRECTIONS: list[Position] = [(1, 0), (0, 1), (-1, 0), (0, -1)]


def find_regions(grid: Sequence[str]) -> list[frozenset[Position]]:
    """Connected areas of equal plants, in reading order of their first cell."""
    height = len(grid)
    seen: set[Position] = set()
    regions: list[frozenset[Position]] = []
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            if (x, y) in seen:
                continue
            region = {(x, y)}
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                for dx, dy in _DIRECTIONS:
                    nx, ny = cx + dx, cy + dy
                    if (
                        0 <= ny < height
                        and 0 <= nx < len(grid[ny])
                        and (nx, ny) not in region
                        and grid[ny][nx] == plant
                    ):
                        region.add((nx, ny))
                        stack.append((nx, ny))
            seen |= region
            regions.append(frozenset(region))
    return regions


def _perimeter(region: frozenset[Position]) -> int:
    return sum(
        (x + dx, y + dy) not in region for x, y in region for dx, dy in _DIRECTIONS
    )


def count_corners(
    cell: Position, region: frozenset[Position], height: int, width: int
) -> int:
    """Number of region corners (outer and inner) at this cell."""

    def inside(p: Position) -> bool:
        return 0 <= p[0] < width and 0 <= p[1] < height

    x, y = cell
    corners = 0
    for (ax, ay), (bx, by) in pairwise(_DIRECTIONS + _DIRECTIONS[:1]):
        current = (x + ax, y + ay)
        following = (x + bx, y + by)
        diagonal = (x + ax + bx, y + ay + by)
        inner = (
            inside(current)
            and inside(following)
            and current in region
            and following in region
            and diagonal not in region
            and inside(diagonal)
        )
        outer = current not in region and following not in region
        if inner or outer:
            corners += 1
    return corners


def part1(text: str) -> int:
    """Total fence price: area times perimeter for each region."""
    return sum(
        len(region) * _perimeter(region) for region in find_regions(text.splitlines())
    )


def part2(text: str) -> int:
    """Discounted price: area times number of sides for each region."""
    grid = text.splitlines()
    if not grid:
        raise ValueError("map is empty")
    height, width = len(grid), len(grid[0])
    return sum(
        len(region) * sum(count_corners(cell, region, height, width) for cell in region)
        for region in find_regions(grid)
    )