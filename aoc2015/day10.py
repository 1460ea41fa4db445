"""Day 10: the look-and-say sequence."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby


def _next_term(text: str) -> str:
    return "".join(f"{len(list(run))}{digit}" for digit, run in groupby(text))


def look_and_say(text: str, depth: int) -> int:
    """Length of the term reached after ``depth`` look-and-say steps."""
    for _ in range(depth):
        text = _next_term(text)
    return len(text)


def part_one(lines: Sequence[str]) -> int:
    return look_and_say(lines[0], 40)


def part_two(lines: Sequence[str]) -> int:
    return look_and_say(lines[0], 50)