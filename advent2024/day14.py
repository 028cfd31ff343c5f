"""Day 14: robots patrolling a wrapping bathroom floor."""

from __future__ import annotations

import re
from dataclasses import dataclass
from math import prod

Vector = tuple[int, int]

PART1_TIME = 100
FLOOR_SIZE: Vector = (101, 103)

_ROBOT = re.compile(r"p=(\d+),(\d+)\s+v=(-?\d+),(-?\d+)")


@dataclass(frozen=True)
class Robot:
    """A robot's position and its velocity per second."""

    position: Vector
    velocity: Vector

    def moved(self, seconds: int, size: Vector) -> Robot:
        """The robot after the given seconds on a floor that wraps around."""
        (x, y), (vx, vy), (width, height) = self.position, self.velocity, size
        return Robot(((x + vx * seconds) % width, (y + vy * seconds) % height), self.velocity)


def parse(text: str) -> list[Robot]:
    """Read lines of the form 'p=x,y v=dx,dy'."""
    robots = []
    for line in text.strip().splitlines():
        match = _ROBOT.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"malformed robot: {line!r}")
        x, y, vx, vy = map(int, match.groups())
        robots.append(Robot((x, y), (vx, vy)))
    return robots


def safety_factor(robots: list[Robot], size: Vector) -> int:
    """Product of robot counts in the four quadrants; middle lines are ignored."""
    mid_x, mid_y = size[0] // 2, size[1] // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        x, y = robot.position
        if x == mid_x or y == mid_y:
            continue
        quadrants[(x > mid_x) + 2 * (y > mid_y)] += 1
    return prod(quadrants)


def render(robots: list[Robot], size: Vector) -> str:
    """Draw the floor: 'x' where a robot stands, '.' elsewhere."""
    occupied = {robot.position for robot in robots}
    width, height = size
    return "".join(
        "".join("x" if (x, y) in occupied else "." for x in range(width)) + "\n"
        for y in range(height)
    )


def part1(text: str, size: Vector = FLOOR_SIZE) -> int:
    """Safety factor after 100 seconds."""
    robots = [robot.moved(PART1_TIME, size) for robot in parse(text)]
    return safety_factor(robots, size)


def part2(text: str) -> int:
    """First second at which no two robots share a tile."""
    robots = parse(text)
    width, height = FLOOR_SIZE
    for second in range(1, width * height + 1):
        positions = {robot.moved(second, FLOOR_SIZE).position for robot in robots}
        if len(positions) == len(robots):
            return second
    raise ValueError("robots never stand on distinct tiles")