"""Day 5: ordering print-queue updates."""

from functools import cmp_to_key

Rules = set[tuple[int, int]]


def parse(text: str) -> tuple[Rules, list[list[int]]]:
    """Split input into ordering rules and page updates."""
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("input needs a rules section and an updates section")
    rules: Rules = set()
    for line in sections[0].splitlines():
        if not line:
            break
        before, after = line.split("|")[:2]
        rules.add((int(before), int(after)))
    updates = [
        [int(page) for page in line.split(",")] for line in sections[1].splitlines()
    ]
    return rules, updates


def is_ordered(pages: list[int], rules: Rules) -> bool:
    """True when no adjacent pair violates a rule."""
    return all((b, a) not in rules for a, b in zip(pages, pages[1:]))


def part1(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = parse(text)
    return sum(pages[len(pages) // 2] for pages in updates if is_ordered(pages, rules))


def part2(text: str) -> int:
    """Sum of middle pages of misordered updates after reordering."""
    rules, updates = parse(text)

    def compare(a: int, b: int) -> int:
        if (a, b) in rules:
            return -1
        if (b, a) in rules:
            return 1
        return 0

    key = cmp_to_key(compare)
    return sum(
        sorted(pages, key=key)[len(pages) // 2]
        for pages in updates
        if not is_ordered(pages, rules)
    )