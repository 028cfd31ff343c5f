import pytest

from advent2024.day15 import (
    Instruction,
    Obstacle,
    parse_instructions,
    parse_map,
    parse_wide_map,
    part1,
    part2,
)


def _puzzle(rows, moves):
    """Build puzzle text from '/'-separated grid rows and move chunks."""
    return rows.replace("/", "\n") + "\n\n" + "\n".join(moves)


SMALL = _puzzle(
    "########/#..O.O.#/##@.O..#/#...O..#"
    "/#.#.O..#/#...O..#/#......#/########",
    ["<^^>>>vv" "<v>>v<<"],
)

LARGE_GRID = (
    "##########/#..O..O.O#/#......O.#/#.OO..O.O#/#..O@..O.#"
    "/#O#..O...#/#O..O..O.#/#.OO.O.OO#/#....O...#/##########"
)

LARGE_MOVES = [
    "<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^><" "<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^",
    "vvv<<^>^v^^><<>>><>^<<><^vv^^<>vvv<" ">><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v",
    "><>vv>v^v^<>><>>>><^^>vv>v<^^^>>v^v" "^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<",
    "<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^vv^" "<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^",
    "^><^><>>><>^^<<^^v>>><^<v>^<vv>>v>>" ">^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><",
    "^>><>^v<><^vvv<^^<><v<<<<<><^v<<<><" "<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^",
    ">^>>^v>vv>^<<^v<>><<><<v<<v><>v<^vv" "<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^",
    "<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<^><" "<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>",
    "^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^vvv^" ">vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>",
    "v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^v^v>" "<^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^",
]

LARGE = _puzzle(LARGE_GRID, LARGE_MOVES)

WIDE_SMALL = _puzzle(
    "#######/#...#.#/#.....#/#..OO@#/#..O..#/#.....#/#######",
    ["<vv<<" "^^<<^^"],
)


def test_part1_small():
    assert part1(SMALL) == 2028


def test_part1_large():
    assert part1(LARGE) == 10092


def test_part2_small():
    assert part2(WIDE_SMALL) == 618


def test_part2_large():
    assert part2(LARGE) == 9021


def test_parse_map():
    start, grid = parse_map("#@O.")
    assert start == (1, 0)
    assert grid == {(0, 0): Obstacle.WALL, (2, 0): Obstacle.BOX}


def test_parse_wide_map():
    start, grid = parse_wide_map("#@O.")
    assert start == (2, 0)
    assert grid == {
        (0, 0): Obstacle.WALL,
        (1, 0): Obstacle.WALL,
        (4, 0): Obstacle.BOX_LEFT,
        (5, 0): Obstacle.BOX_RIGHT,
    }


def test_parse_instructions_skips_newlines():
    assert parse_instructions("<^\n>v") == [
        Instruction.WEST,
        Instruction.NORTH,
        Instruction.EAST,
        Instruction.SOUTH,
    ]


def test_is_vertical():
    parsed = parse_instructions("^>v<")
    assert [i.is_vertical for i in parsed] == [True, False, True, False]


def test_box_blocked_by_wall_stays():
    # Robot pushes box east into a wall: nothing moves, box at x=2.
    assert part1("#@O#\n\n>>") == 2


def test_missing_moves_section():
    with pytest.raises(ValueError):
        part1("#@O.#")