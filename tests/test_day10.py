import pytest

from advent2024.day10 import parse, part1, part2, trail_ends

BIG = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732"""


def test_part1_small():
    assert part1("0123\n1234\n8765\n9876") == 1


def test_part1_big():
    assert part1(BIG) == 36


def test_part2_small():
    text = "012345\n123456\n234567\n345678\n416789\n567891"
    assert part2(text) == 227


def test_part2_big():
    assert part2(BIG) == 81


def test_parse():
    grid, starts = parse("0123\n1234\n8765\n9876")
    assert grid[2] == [8, 7, 6, 5]
    assert starts == [(0, 0)]


def test_trail_ends():
    grid, _ = parse("0123\n1234\n8765\n9876")
    assert set(trail_ends(grid, (0, 0))) == {(0, 3)}


def test_parse_rejects_non_digit():
    with pytest.raises(ValueError):
        parse("01.3")