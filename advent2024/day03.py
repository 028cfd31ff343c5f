"""Day 3: scanning corrupted memory for multiplications."""

import re
from dataclasses import dataclass

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_WITH_SWITCHES = re.compile(r"(mul)\((\d{1,3}),(\d{1,3})\)|(do)\(\)|(don't)\(\)")


@dataclass(frozen=True)
class Mul:
    """A multiplication of two numbers."""

    left: int
    right: int

    @property
    def product(self) -> int:
        return self.left * self.right


@dataclass(frozen=True)
class Switch:
    """A do() (enabled) or don't() (disabled) instruction."""

    enabled: bool


def parse_instructions(text: str, conditionals: bool) -> list[Mul | Switch]:
    """Find instructions in order; switches only when conditionals is true."""
    if not conditionals:
        return [Mul(int(a), int(b)) for a, b in _MUL.findall(text)]
    instructions: list[Mul | Switch] = []
    for match in _WITH_SWITCHES.finditer(text):
        if match.group(4):
            instructions.append(Switch(True))
        elif match.group(5):
            instructions.append(Switch(False))
        else:
            instructions.append(Mul(int(match.group(2)), int(match.group(3))))
    return instructions


def part1(text: str) -> int:
    """Sum of all multiplications."""
    return sum(
        i.product for i in parse_instructions(text, False) if isinstance(i, Mul)
    )


def part2(text: str) -> int:
    """Sum of multiplications that are enabled at the time they occur."""
    enabled = True
    total = 0
    for instruction in parse_instructions(text, True):
        if isinstance(instruction, Switch):
            enabled = instruction.enabled
        elif enabled:
            total += instruction.product
    return total