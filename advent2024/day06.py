"""Day 6: following a patrolling guard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Position = tuple[int, int]


class Direction(Enum):
    """Facing of the guard, valued by its (dx, dy) step."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def turn(self) -> Direction:
        """The direction after a right turn."""
        members = list(Direction)
        return members[(members.index(self) + 1) % len(members)]


@dataclass(frozen=True)
class GuardMap:
    """Obstacles, the guard's start and the map's size."""

    obstacles: frozenset[Position]
    guard: Position
    width: int
    height: int

    def contains(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height


def parse_map(text: str) -> GuardMap:
    """Read the map: '^' is the guard, '#' an obstacle."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("map is empty")
    guard = (0, 0)
    obstacles: set[Position] = set()
    for y, line in enumerate(lines):
        for x, cell in enumerate(line):
            if cell == "^":
                guard = (x, y)
            elif cell == "#":
                obstacles.add((x, y))
    return GuardMap(frozenset(obstacles), guard, len(lines[0]), len(lines))


def guard_route(area: GuardMap, extra_obstacle: Position | None = None) -> list[Position] | None:
    """Positions the guard steps on until leaving the map, or None if it loops."""
    position = area.guard
    direction = Direction.UP
    visited: list[Position] = []
    seen: set[tuple[Position, Direction]] = set()
    while True:
        dx, dy = direction.value
        ahead = (position[0] + dx, position[1] + dy)
        if not area.contains(ahead):
            return visited
        if ahead in area.obstacles or ahead == extra_obstacle:
            direction = direction.turn()
            continue
        position = ahead
        if (position, direction) in seen:
            return None
        seen.add((position, direction))
        visited.append(position)


def part1(text: str) -> int:
    """Number of distinct positions the guard visits."""
    route = guard_route(parse_map(text))
    return 0 if route is None else len(set(route))


def part2(text: str) -> int:
    """Number of positions where one new obstacle traps the guard in a loop."""
    area = parse_map(text)
    route = guard_route(area)
    if route is None:
        return 0
    return sum(
        1
        for position in set(route)
        if position != area.guard and guard_route(area, position) is None
    )