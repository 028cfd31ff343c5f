"""Day 13: claw machines."""

from __future__ import annotations

import re
from dataclasses import dataclass

A_COST = 3
B_COST = 1
PART2_BONUS = 10_000_000_000_000
_MAX_B_PRESSES = 100

_GAME = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\n"
    r"Button B: X\+(\d+), Y\+(\d+)\n"
    r"Prize: X=(\d+), Y=(\d+)"
)


@dataclass(frozen=True)
class Game:
    """Offsets of each button and the prize location, as (x, y)."""

    button_a: tuple[int, int]
    button_b: tuple[int, int]
    prize: tuple[int, int]


def parse(text: str) -> list[Game]:
    """Read machines separated by blank lines."""
    games = []
    for chunk in text.strip().split("\n\n"):
        match = _GAME.fullmatch(chunk.strip())
        if match is None:
            raise ValueError(f"malformed machine: {chunk!r}")
        ax, ay, bx, by, px, py = map(int, match.groups())
        games.append(Game((ax, ay), (bx, by), (px, py)))
    return games


def _brute_force(game: Game) -> int:
    (ax, ay), (bx, by), (px, py) = game.button_a, game.button_b, game.prize
    costs = []
    for presses in range(_MAX_B_PRESSES + 1):
        cx, cy = presses * bx, presses * by
        if cx > px or cy > py:
            break
        dx, dy = px - cx, py - cy
        if dx % ax == 0 and dy % ay == 0 and dy // ay == dx // ax:
            costs.append(presses * B_COST + (dx // ax) * A_COST)
    return min(costs, default=0)


def _solve(game: Game, bonus: int) -> int:
    (ax, ay), (bx, by) = game.button_a, game.button_b
    px, py = game.prize[0] + bonus, game.prize[1] + bonus
    det = ax * by - bx * ay
    if det == 0:
        return 0
    det_a = px * by - bx * py
    det_b = ax * py - px * ay
    if det_a % det or det_b % det:
        return 0
    a, b = det_a // det, det_b // det
    if a < 0 or b < 0:
        return 0
    return a * A_COST + b * B_COST


def part1(text: str) -> int:
    """Fewest tokens to win every winnable prize, at most 100 B presses."""
    return sum(_brute_force(game) for game in parse(text))


def part2(text: str) -> int:
    """Fewest tokens with prizes moved far away."""
    return sum(_solve(game, PART2_BONUS) for game in parse(text))