"""Day 8: antinodes of resonant antennas."""

from __future__ import annotations

from itertools import combinations

Position = tuple[int, int]


def parse_antennas(text: str) -> dict[str, list[Position]]:
    """Map each frequency (letter or digit) to its antenna positions."""
    antennas: dict[str, list[Position]] = {}
    for y, line in enumerate(text.splitlines()):
        for x, char in enumerate(line):
            if char.isascii() and char.isalnum():
                antennas.setdefault(char, []).append((x, y))
    return dict(sorted(antennas.items()))


def count_antinodes(
    antennas: dict[str, list[Position]], width: int, height: int, harmonics: bool
) -> int:
    """Number of distinct in-bounds antinode positions."""

    def inside(p: Position) -> bool:
        return 0 <= p[0] < width and 0 <= p[1] < height

    def walk(start: Position, dx: int, dy: int):
        x, y = start
        while inside((x, y)):
            yield (x, y)
            x, y = x + dx, y + dy

    antinodes: set[Position] = set()
    for positions in antennas.values():
        for (x1, y1), (x2, y2) in combinations(positions, 2):
            dx, dy = x1 - x2, y1 - y2
            if harmonics:
                candidates = [*walk((x1, y1), dx, dy), *walk((x2, y2), -dx, -dy)]
            else:
                candidates = [(x1 + dx, y1 + dy), (x2 - dx, y2 - dy)]
            antinodes.update(p for p in candidates if inside(p))
    return len(antinodes)


def _size(text: str) -> tuple[int, int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("map is empty")
    return len(lines), len(lines[0])


def part1(text: str) -> int:
    """Antinodes without harmonics."""
    width, height = _size(text)
    return count_antinodes(parse_antennas(text), width, height, False)


def part2(text: str) -> int:
    """Antinodes including resonant harmonics."""
    width, height = _size(text)
    return count_antinodes(parse_antennas(text), width, height, True)