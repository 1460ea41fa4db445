"""Day 6: a grid of lights switched by rectangular instructions."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

GRID_SIZE = 1000

_PATTERN = re.compile(
    r"^(turn on|turn off|toggle) (\d+),(\d+) through (\d+),(\d+)$"
)


class Action(enum.Enum):
    ON = "turn on"
    OFF = "turn off"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class Instruction:
    """One instruction: an action over the inclusive rectangle start..end."""

    action: Action
    start: tuple[int, int]
    end: tuple[int, int]


def parse_instruction(line: str) -> Instruction:
    """Parse a line such as ``turn on 0,0 through 999,999``."""
    match = _PATTERN.match(line.strip())
    if match is None:
        raise ValueError(f"not a light instruction: {line!r}")
    action, x1, y1, x2, y2 = match.groups()
    return Instruction(Action(action), (int(x1), int(y1)), (int(x2), int(y2)))


_Rules = dict[Action, Callable[[int], int]]

_SWITCH: _Rules = {
    Action.ON: lambda value: 1,
    Action.OFF: lambda value: 0,
    Action.TOGGLE: lambda value: 0 if value == 1 else 1,
}

_BRIGHTNESS: _Rules = {
    Action.ON: lambda value: value + 1,
    Action.OFF: lambda value: value - 1 if value > 0 else value,
    Action.TOGGLE: lambda value: value + 2,
}


def _run(lines: Iterable[str], rules: _Rules) -> int:
    grid = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for line in lines:
        instruction = parse_instruction(line)
        (x1, y1), (x2, y2) = instruction.start, instruction.end
        if max(x1, x2, y1, y2) >= GRID_SIZE:
            raise ValueError(f"instruction leaves the grid: {line!r}")
        change = rules[instruction.action]
        for row in grid[x1 : x2 + 1]:
            row[y1 : y2 + 1] = [change(value) for value in row[y1 : y2 + 1]]
    return sum(sum(row) for row in grid)


def part_one(lines: Iterable[str]) -> int:
    """Number of lights left on."""
    return _run(lines, _SWITCH)


def part_two(lines: Iterable[str]) -> int:
    """Total brightness of all lights."""
    return _run(lines, _BRIGHTNESS)