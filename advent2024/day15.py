"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

Position = tuple[int, int]
Warehouse = dict[Position, "Obstacle"]


class Obstacle(Enum):
    """What occupies a warehouse tile."""

    WALL = "#"
    BOX = "O"
    BOX_LEFT = "["
    BOX_RIGHT = "]"


class Instruction(Enum):
    """A robot move, valued by its (dx, dy) step."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def is_vertical(self) -> bool:
        return self.value[0] == 0


_SYMBOLS = {
    "^": Instruction.NORTH,
    ">": Instruction.EAST,
    "v": Instruction.SOUTH,
    "<": Instruction.WEST,
}


def parse_map(text: str) -> tuple[Position, Warehouse]:
    """Read the robot's start and the walls and boxes."""
    start = (0, 0)
    grid: Warehouse = {}
    for y, line in enumerate(text.splitlines()):
        for x, char in enumerate(line):
            if char == "#":
                grid[(x, y)] = Obstacle.WALL
            elif char == "O":
                grid[(x, y)] = Obstacle.BOX
            elif char == "@":
                start = (x, y)
    return start, grid


def parse_wide_map(text: str) -> tuple[Position, Warehouse]:
    """Read the map with every tile doubled in width."""
    start = (0, 0)
    grid: Warehouse = {}
    for y, line in enumerate(text.splitlines()):
        for column, char in enumerate(line):
            x = column * 2
            if char == "#":
                grid[(x, y)] = Obstacle.WALL
                grid[(x + 1, y)] = Obstacle.WALL
            elif char == "O":
                grid[(x, y)] = Obstacle.BOX_LEFT
                grid[(x + 1, y)] = Obstacle.BOX_RIGHT
            elif char == "@":
                start = (x, y)
    return start, grid


def parse_instructions(text: str) -> list[Instruction]:
    """Moves in order; characters other than arrows are ignored."""
    return [_SYMBOLS[char] for char in text if char in _SYMBOLS]


def _push(grid: Warehouse, robot: Position, instruction: Instruction) -> Position:
    """Move the robot and any boxes it pushes; return its new position."""
    dx, dy = instruction.value
    frontier = [robot]
    to_move: set[Position] = set()
    while frontier:
        ahead: list[Position] = []
        for x, y in frontier:
            cell = (x + dx, y + dy)
            if cell in to_move:
                continue
            obstacle = grid.get(cell)
            if obstacle is None:
                continue
            if obstacle is Obstacle.WALL:
                return robot
            to_move.add(cell)
            ahead.append(cell)
            if instruction.is_vertical and obstacle in (Obstacle.BOX_LEFT, Obstacle.BOX_RIGHT):
                offset = 1 if obstacle is Obstacle.BOX_LEFT else -1
                partner = (cell[0] + offset, cell[1])
                if partner not in to_move:
                    to_move.add(partner)
                    ahead.append(partner)
        frontier = ahead
    moved = {cell: grid.pop(cell) for cell in to_move}
    grid.update({(x + dx, y + dy): obstacle for (x, y), obstacle in moved.items()})
    return robot[0] + dx, robot[1] + dy


def _score(grid: Warehouse) -> int:
    return sum(
        100 * y + x
        for (x, y), obstacle in grid.items()
        if obstacle in (Obstacle.BOX, Obstacle.BOX_LEFT)
    )


def _simulate(text: str, read_map: Callable[[str], tuple[Position, Warehouse]]) -> int:
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("input needs a map section and a moves section")
    robot, grid = read_map(sections[0])
    for instruction in parse_instructions(sections[1]):
        robot = _push(grid, robot, instruction)
    return _score(grid)


def part1(text: str) -> int:
    """Sum of box GPS coordinates after all moves."""
    return _simulate(text, parse_map)


def part2(text: str) -> int:
    """Sum of box GPS coordinates in the doubled-width warehouse."""
    return _simulate(text, parse_wide_map)