"""Day 11: Santa's next password."""

from __future__ import annotations

import re
from collections.abc import Sequence
from itertools import pairwise

_FORBIDDEN = frozenset("iol")
_PAIR = re.compile(r"(.)\1")


def increment_string(text: str) -> str:
    """Count up one in base 26 over a..z, growing the string on overflow."""
    stripped = text.rstrip("z")
    wrapped = "a" * (len(text) - len(stripped))
    if not stripped:
        return "a" + wrapped
    return stripped[:-1] + chr(ord(stripped[-1]) + 1) + wrapped


def _has_straight(text: str) -> bool:
    run = 0
    for left, right in pairwise(text):
        run = run + 1 if ord(right) - ord(left) == 1 else 0
        if run >= 2:
            return True
    return False


def password_is_valid(text: str) -> bool:
    """A straight of three letters, no i, o or l, and two non-overlapping pairs."""
    return (
        _has_straight(text)
        and not _FORBIDDEN.intersection(text)
        and len(_PAIR.findall(text)) >= 2
    )


def next_password(text: str) -> str:
    """The next valid password after ``text``."""
    while True:
        text = increment_string(text)
        if password_is_valid(text):
            return text


def part_one(lines: Sequence[str]) -> str:
    return next_password(lines[0])


def part_two(lines: Sequence[str]) -> str:
    return next_password(next_password(lines[0]))