"""Day 2: wrapping paper and ribbon for presents."""

from __future__ import annotations

from collections.abc import Iterable

from .tools import parse_ints, split_string


def surface_area(length: int, width: int, height: int) -> int:
    return 2 * length * width + 2 * width * height + 2 * height * length


def smallest_side(length: int, width: int, height: int) -> int:
    return min(length * width, width * height, height * length)


def smallest_perimeter(length: int, width: int, height: int) -> int:
    first, second, _ = sorted((length, width, height))
    return 2 * first + 2 * second


def volume(length: int, width: int, height: int) -> int:
    return length * width * height


def _dimensions(lines: Iterable[str]):
    for line in lines:
        length, width, height = parse_ints(split_string(line, "x"))[:3]
        yield length, width, height


def part_one(lines: Iterable[str]) -> int:
    """Total paper: surface area plus the smallest side as slack."""
    return sum(
        surface_area(*box) + smallest_side(*box) for box in _dimensions(lines)
    )


def part_two(lines: Iterable[str]) -> int:
    """Total ribbon: smallest perimeter plus the volume for the bow."""
    return sum(
        smallest_perimeter(*box) + volume(*box) for box in _dimensions(lines)
    )