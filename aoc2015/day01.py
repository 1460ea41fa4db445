"""Day 1: follow parentheses up and down the floors of a building."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

_STEP = {"(": 1, ")": -1}


def _floors(directions: str):
    return accumulate(_STEP.get(char, 0) for char in directions)


def final_floor(directions: str) -> int:
    """The floor reached after following every direction."""
    return directions.count("(") - directions.count(")")


def first_basement_position(directions: str) -> int:
    """The 1-based position of the character that first reaches floor -1."""
    for position, floor in enumerate(_floors(directions), start=1):
        if floor == -1:
            return position
    raise ValueError("the directions never reach the basement")


def part_one(lines: Sequence[str]) -> int:
    return final_floor(lines[0])


def part_two(lines: Sequence[str]) -> int:
    return first_basement_position(lines[0])