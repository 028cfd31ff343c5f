import pytest

from advent2024.day05 import is_ordered, parse, part1, part2

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


def test_part1():
    assert part1(EXAMPLE) == 143


def test_part2():
    assert part2(EXAMPLE) == 123


def test_parse_counts():
    rules, updates = parse(EXAMPLE)
    assert len(rules) == 21
    assert updates[2] == [75, 29, 13]


def test_is_ordered():
    rules, _ = parse(EXAMPLE)
    assert is_ordered([75, 47, 61, 53, 29], rules) is True
    assert is_ordered([75, 97, 47, 61, 53], rules) is False


def test_missing_updates_section():
    with pytest.raises(ValueError):
        parse("1|2\n3|4")