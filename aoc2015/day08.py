"""Day 8: characters of code versus characters in memory."""

from __future__ import annotations

import re
from collections.abc import Iterable

_ESCAPE = re.compile(r'\\(?:[\\"]|x..)', re.DOTALL)


def decoded_overhead(line: str) -> int:
    """Characters of code minus characters held in memory for a quoted string."""
    decoded = _ESCAPE.sub("_", line)
    if "\\" in decoded:
        raise ValueError(f"unknown escape in {line!r}")
    return len(line) - (len(decoded) - 2)


def encoded_overhead(line: str) -> int:
    """Extra characters needed to write ``line`` as a new quoted string."""
    return line.count('"') + line.count("\\") + 2


def part_one(lines: Iterable[str]) -> int:
    return sum(decoded_overhead(line) for line in lines)


def part_two(lines: Iterable[str]) -> int:
    return sum(encoded_overhead(line) for line in lines)