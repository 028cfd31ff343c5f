from advent2024.day08 import count_antinodes, parse_antennas, part1, part2

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""


def test_part1():
    assert part1(EXAMPLE) == 14


def test_part2():
    assert part2(EXAMPLE) == 34


def test_parse_antennas():
    antennas = parse_antennas(EXAMPLE)
    assert antennas["0"] == [(8, 1), (5, 2), (7, 3), (4, 4)]
    assert antennas["A"] == [(6, 5), (8, 8), (9, 9)]
    assert set(antennas) == {"0", "A"}


def test_single_pair_without_harmonics():
    antennas = {"a": [(4, 3), (5, 5)]}
    assert count_antinodes(antennas, 10, 10, False) == 2


def test_lonely_antenna_has_no_antinodes():
    assert count_antinodes({"a": [(1, 1)]}, 5, 5, True) == 0