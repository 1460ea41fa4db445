"""Day 5: naughty or nice strings."""

from __future__ import annotations

import re
from collections.abc import Iterable

_FORBIDDEN = ("ab", "cd", "pq", "xy")
_VOWELS = frozenset("aeiou")
_DOUBLE = re.compile(r"([a-z])\1")
_REPEATED_PAIR = re.compile(r"([a-z]{2}).*\1")
_SANDWICH = re.compile(r"([a-z])[a-z]\1")


def is_nice(text: str) -> bool:
    """First set of rules: three vowels, a double letter, no forbidden pair."""
    if any(pair in text for pair in _FORBIDDEN):
        return False
    vowels = sum(1 for char in text if char in _VOWELS)
    return vowels >= 3 and _DOUBLE.search(text) is not None


def is_nice_two(text: str) -> bool:
    """Second set of rules: a pair seen twice apart and a letter sandwich."""
    return (
        _REPEATED_PAIR.search(text) is not None
        and _SANDWICH.search(text) is not None
    )


def count_nice_strings(lines: Iterable[str]) -> int:
    return sum(1 for line in lines if is_nice(line))


def count_nice_strings_two(lines: Iterable[str]) -> int:
    return sum(1 for line in lines if is_nice_two(line))


def part_one(lines: Iterable[str]) -> int:
    return count_nice_strings(lines)


def part_two(lines: Iterable[str]) -> int:
    return count_nice_strings_two(lines)