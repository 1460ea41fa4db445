"""Day 25: the weather machine's code at a row and column."""

from __future__ import annotations

FIRST_CODE = 20151125
MULTIPLIER = 252533
MODULUS = 33554393
ROW = 2978
COLUMN = 3083


def find_code(row: int, col: int) -> int:
    """The code at ``row`` and ``col`` of the diagonally filled table."""
    if row < 1 or col < 1:
        raise ValueError(f"row and column start at 1: {row}, {col}")
    diagonal = row + col - 1
    index = diagonal * (diagonal - 1) // 2 + col
    return FIRST_CODE * pow(MULTIPLIER, index - 1, MODULUS) % MODULUS


def part_one() -> int:
    return find_code(ROW, COLUMN)