"""Day 9: compacting an amphipod's disk map."""

from __future__ import annotations

from bisect import insort
from dataclasses import dataclass
from operator import attrgetter

_BY_INDEX = attrgetter("index")


@dataclass(frozen=True)
class DataBlock:
    """A run of count cells starting at index; block_id is None for free space."""

    block_id: int | None
    count: int
    index: int

    @property
    def is_free(self) -> bool:
        return self.block_id is None


def _digits(text: str) -> list[int]:
    digits = []
    for char in text.strip():
        if not char.isdigit():
            raise ValueError(f"not a digit: {char!r}")
        digits.append(int(char))
    return digits


def parse_part1(text: str) -> list[int | None]:
    """Expand the disk map into single cells: a file id, or None when free."""
    cells: list[int | None] = []
    for position, length in enumerate(_digits(text)):
        if position % 2:
            cells.extend([None] * length)
        else:
            cells.extend([position // 2] * length)
    return cells


def parse_part2(text: str) -> list[DataBlock]:
    """Read the disk map as whole runs, skipping runs of length zero."""
    blocks: list[DataBlock] = []
    file_id = 0
    index = 0
    for position, count in enumerate(_digits(text)):
        if count == 0:
            continue
        if position % 2:
            blocks.append(DataBlock(None, count, index))
        else:
            blocks.append(DataBlock(file_id, count, index))
            file_id += 1
        index += count
    return blocks


def part1(text: str) -> int:
    """Checksum after moving single cells from the end into free space."""
    cells = parse_part1(text)
    from_end = reversed(list(enumerate(cells)))
    last_moved: int | None = None
    checksum = 0
    for position, cell in enumerate(cells):
        if last_moved is not None and last_moved <= position:
            break
        if cell is not None:
            checksum += position * cell
            continue
        for back_position, back_cell in from_end:
            if back_position <= position:
                break
            if back_cell is not None:
                last_moved = back_position
                checksum += position * back_cell
                break
    return checksum


def part2(text: str) -> int:
    """Checksum after moving whole files into the leftmost space that fits."""
    blocks = parse_part2(text)
    spaces = [block for block in blocks if block.is_free]
    placed: dict[int, DataBlock] = {}

    for block in reversed(blocks):
        if block.is_free:
            placed.setdefault(block.index, block)
            continue
        target = next(
            (
                space
                for space in spaces
                if space.index < block.index and space.count >= block.count
            ),
            None,
        )
        if target is None:
            placed.setdefault(block.index, block)
            continue
        placed.setdefault(target.index, DataBlock(block.block_id, block.count, target.index))
        placed.setdefault(block.index, DataBlock(None, block.count, block.index))
        spaces.remove(target)
        remainder = target.count - block.count
        if remainder > 0:
            insort(
                spaces,
                DataBlock(None, remainder, target.index + block.count),
                key=_BY_INDEX,
            )

    return sum(
        block.block_id * sum(range(block.index, block.index + block.count))
        for block in placed.values()
        if block.block_id is not None
    )