"""Day 17: a three-bit computer."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import IntEnum

_PROGRAM = re.compile(
    r"Register [A-Za-z]+: (\d+)\n"
    r"Register [A-Za-z]+: (\d+)\n"
    r"Register [A-Za-z]+: (\d+)\n"
    r"\n"
    r"Program: (\d+(?:,\d+)*)"
)


class Opcode(IntEnum):
    """The eight instructions of the machine."""

    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


@dataclass
class Computer:
    """Registers, program and the values output so far."""

    register_a: int
    register_b: int
    register_c: int
    program: list[int]
    output: list[int] = field(default_factory=list)

    def _combo(self, operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.register_a
        if operand == 5:
            return self.register_b
        if operand == 6:
            return self.register_c
        raise ValueError(f"invalid combo operand: {operand}")

    def run(self, stop_if: Sequence[int] | None = None) -> None:
        """Execute until halting, or until output stops being a prefix of stop_if."""
        pointer = 0
        while pointer < len(self.program):
            try:
                opcode = Opcode(self.program[pointer])
            except ValueError:
                raise ValueError(f"invalid opcode: {self.program[pointer]}") from None
            if pointer + 1 >= len(self.program):
                raise ValueError("instruction is missing its operand")
            operand = self.program[pointer + 1]

            if opcode is Opcode.ADV:
                self.register_a >>= self._combo(operand)
            elif opcode is Opcode.BXL:
                self.register_b ^= operand
            elif opcode is Opcode.BST:
                self.register_b = self._combo(operand) % 8
            elif opcode is Opcode.JNZ:
                if self.register_a != 0:
                    pointer = operand
                    continue
            elif opcode is Opcode.BXC:
                self.register_b ^= self.register_c
            elif opcode is Opcode.OUT:
                self.output.append(self._combo(operand) % 8)
            elif opcode is Opcode.BDV:
                self.register_b = self.register_a >> self._combo(operand)
            else:
                self.register_c = self.register_a >> self._combo(operand)

            if stop_if is not None and self.output != list(stop_if[: len(self.output)]):
                break
            pointer += 2


def parse(text: str) -> Computer:
    """Read three registers and the program."""
    match = _PROGRAM.fullmatch(text.strip())
    if match is None:
        raise ValueError("malformed computer description")
    a, b, c, program = match.groups()
    return Computer(int(a), int(b), int(c), [int(n) for n in program.split(",")])


def part1(text: str) -> str:
    """The program's output, joined with commas."""
    computer = parse(text)
    computer.run()
    return ",".join(str(value) for value in computer.output)


def part2(text: str) -> str:
    """Lowest value of register A for which the program outputs itself."""
    computer = parse(text)
    candidate = 0
    while True:
        trial = replace(computer, register_a=candidate, output=[])
        trial.run(computer.program)
        if trial.output == trial.program:
            return str(candidate)
        candidate += 1