"""Day 12: summing the numbers in a JSON document."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any


def _number(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def sum_integers(value: Any) -> int:
    """Sum every number in a parsed JSON value, truncating fractions."""
    if isinstance(value, dict):
        return sum(sum_integers(item) for item in value.values())
    if isinstance(value, list):
        return sum(sum_integers(item) for item in value)
    return _number(value) or 0


def sum_integers_ignore_red(value: Any) -> int:
    """Like :func:`sum_integers`, skipping objects with a string value holding "red"."""
    if isinstance(value, dict):
        if any(isinstance(item, str) and "red" in item for item in value.values()):
            return 0
        return sum(sum_integers_ignore_red(item) for item in value.values())
    if isinstance(value, list):
        return sum(sum_integers_ignore_red(item) for item in value)
    return _number(value) or 0


def part_one(lines: Sequence[str]) -> int:
    return sum_integers(json.loads(lines[0]))


def part_two(lines: Sequence[str]) -> int:
    return sum_integers_ignore_red(json.loads(lines[0]))