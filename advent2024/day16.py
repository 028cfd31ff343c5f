"""Day 16: the reindeer maze."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterator, Sequence

Position = tuple[int, int]
Step = tuple[int, int]
State = tuple[Step, Position]

NORTH: Step = (0, -1)
EAST: Step = (1, 0)
SOUTH: Step = (0, 1)
WEST: Step = (-1, 0)
_DIRECTIONS = (NORTH, EAST, SOUTH, WEST)

STEP_SCORE = 1
TURN_SCORE = 1000


def parse_map(text: str) -> tuple[list[str], Position, Position]:
    """Read the maze; 'S' and 'E' become open tiles and are returned as start and end."""
    start = (0, 0)
    end = (0, 0)
    grid: list[str] = []
    for y, line in enumerate(text.splitlines()):
        if "S" in line:
            start = (line.index("S"), y)
        if "E" in line:
            end = (line.index("E"), y)
        grid.append(line.replace("S", ".").replace("E", "."))
    return grid, start, end


def _successors(grid: Sequence[str], state: State) -> Iterator[tuple[State, int]]:
    facing, (x, y) = state
    for direction in _DIRECTIONS:
        nx, ny = x + direction[0], y + direction[1]
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[ny]) and grid[ny][nx] == ".":
            cost = STEP_SCORE if direction == facing else TURN_SCORE + STEP_SCORE
            yield (direction, (nx, ny)), cost


def _explore(
    grid: Sequence[str], start: Position, end: Position
) -> tuple[int, list[State], dict[State, list[State]]]:
    """Cheapest cost to the end, the end states reached at that cost, and predecessors."""
    origin: State = (EAST, start)
    dist: dict[State, int] = {origin: 0}
    preds: dict[State, list[State]] = defaultdict(list)
    heap: list[tuple[int, State]] = [(0, origin)]
    best: int | None = None
    ends: list[State] = []
    while heap:
        cost, state = heapq.heappop(heap)
        if cost > dist[state]:
            continue
        if best is not None and cost > best:
            break
        if state[1] == end:
            best = cost
            ends.append(state)
            continue
        for following, step in _successors(grid, state):
            new_cost = cost + step
            known = dist.get(following)
            if known is None or new_cost < known:
                dist[following] = new_cost
                preds[following] = [state]
                heapq.heappush(heap, (new_cost, following))
            elif new_cost == known:
                preds[following].append(state)
    if best is None:
        raise ValueError("no path from start to end")
    return best, ends, preds


def solve_part1(grid: Sequence[str], start: Position, end: Position) -> int:
    """Lowest score of any path from start (facing east) to end."""
    best, _, _ = _explore(grid, start, end)
    return best


def solve_part2(grid: Sequence[str], start: Position, end: Position) -> int:
    """Number of tiles lying on at least one lowest-score path."""
    _, ends, preds = _explore(grid, start, end)
    seen: set[State] = set(ends)
    stack = list(ends)
    while stack:
        state = stack.pop()
        for previous in preds.get(state, ()):
            if previous not in seen:
                seen.add(previous)
                stack.append(previous)
    return len({position for _, position in seen})


def part1(text: str) -> int:
    """Lowest possible score through the maze."""
    grid, start, end = parse_map(text)
    return solve_part1(grid, start, end)


def part2(text: str) -> int:
    """Tiles that are part of some best path."""
    grid, start, end = parse_map(text)
    return solve_part2(grid, start, end)