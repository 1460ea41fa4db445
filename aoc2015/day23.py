"""Day 23: a tiny two-register computer."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

_MASK = 0xFFFFFFFF

Instruction = tuple[str, ...]


def get_instructions(lines: Iterable[str]) -> list[Instruction]:
    """Each line split into its opcode and operands, commas removed."""
    return [tuple(line.replace(",", "").split(" ")) for line in lines]


def run(instructions: Sequence[Instruction], a: int) -> dict[str, int]:
    """Run the program with register ``a`` preset and return the registers.

    Registers hold unsigned 32-bit values; the program halts when the
    instruction pointer leaves the program.
    """
    registers: defaultdict[str, int] = defaultdict(int, {"a": a & _MASK, "b": 0})
    pointer = 0
    while 0 <= pointer < len(instructions):
        op, *operands = instructions[pointer]
        if op == "hlf":
            registers[operands[0]] //= 2
            pointer += 1
        elif op == "tpl":
            registers[operands[0]] = registers[operands[0]] * 3 & _MASK
            pointer += 1
        elif op == "inc":
            registers[operands[0]] = registers[operands[0]] + 1 & _MASK
            pointer += 1
        elif op == "jmp":
            pointer += int(operands[0])
        elif op == "jie":
            pointer += 1 if registers[operands[0]] % 2 else int(operands[1])
        elif op == "jio":
            pointer += int(operands[1]) if registers[operands[0]] == 1 else 1
        else:
            raise ValueError(f"unknown instruction: {' '.join(instructions[pointer])!r}")
    return dict(registers)


def part_one(lines: Sequence[str]) -> int:
    return run(get_instructions(lines), 0)["b"]


def part_two(lines: Sequence[str]) -> int:
    return run(get_instructions(lines), 1)["b"]