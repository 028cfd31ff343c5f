import io

import pytest

from advent2024.cli import main

DAY1 = """3   4
4   3
2   5
1   3
3   9
3   3"""

DAY7 = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_day1_from_file(tmp_path, capsys):
    path = tmp_path / "day1.txt"
    path.write_text(DAY1)
    assert main(["1", str(path)]) == 0
    assert capsys.readouterr().out == "Part 1: 11\nPart 2: 31\n"


def test_day7_from_file(tmp_path, capsys):
    path = tmp_path / "day7.txt"
    path.write_text(DAY7)
    assert main(["7", str(path)]) == 0
    assert capsys.readouterr().out == "Part 1: 3749\nPart 2: 11387\n"


def test_day11_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("125 17"))
    assert main(["11"]) == 0
    assert capsys.readouterr().out == "Part 1: 55312\nPart 2: 65601038650482\n"


def test_unknown_day_exits():
    with pytest.raises(SystemExit) as info:
        main(["25"])
    assert info.value.code == 2


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["1", str(tmp_path / "absent.txt")])
    assert info.value.code == 2