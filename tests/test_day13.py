import pytest

from advent2024.day13 import Game, parse, part1, part2

MACHINES = [
    ((94, 34), (22, 67), (8400, 5400)),
    ((26, 66), (67, 21), (12748, 12176)),
    ((17, 86), (84, 37), (7870, 6450)),
    ((69, 23), (27, 71), (18641, 10279)),
]


def _machine(button_a, button_b, prize):
    return (
        f"Button A: X+{button_a[0]}, Y+{button_a[1]}\n"
        f"Button B: X+{button_b[0]}, Y+{button_b[1]}\n"
        f"Prize: X={prize[0]}, Y={prize[1]}"
    )


EXAMPLE = "\n\n".join(_machine(*machine) for machine in MACHINES)


def test_parse():
    text = _machine(*MACHINES[0]) + "\n"
    assert parse(text) == [Game((94, 34), (22, 67), (8400, 5400))]


def test_parse_counts_machines():
    assert len(parse(EXAMPLE)) == 4


def test_part1():
    assert part1(EXAMPLE) == 480


def test_part2():
    assert part2(EXAMPLE) == 875318608908


def test_part1_first_machine():
    assert part1(_machine(*MACHINES[0])) == 280


def test_part1_unwinnable_machine():
    assert part1(_machine(*MACHINES[1])) == 0


def test_malformed_input_raises():
    with pytest.raises(ValueError):
        parse("Button A: X+1\nPrize: X=1, Y=1")