"""Day 17: ways to fill containers with exactly 150 litres of eggnog."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .tools import parse_ints

EGGNOG_LITRES = 150


def _fills(numbers: Sequence[int], target: int, used: int = 0) -> Iterator[int]:
    """Yield the number of containers used by every way of reaching ``target``."""
    if target == 0:
        yield used
        return
    if target < 0:
        return
    for index, size in enumerate(numbers):
        yield from _fills(numbers[index + 1 :], target - size, used + 1)


def count_combinations(numbers: Sequence[int], target: int) -> int:
    """How many selections of containers hold exactly ``target`` litres."""
    return sum(1 for _ in _fills(tuple(numbers), target))


def container_counts(numbers: Sequence[int], target: int) -> list[int]:
    """The number of containers used by each selection that holds ``target``."""
    return list(_fills(tuple(numbers), target))


def part_one(lines: Sequence[str]) -> int:
    return count_combinations(parse_ints(lines), EGGNOG_LITRES)


def part_two(lines: Sequence[str]) -> int:
    """How many selections use the fewest containers possible."""
    counts = container_counts(parse_ints(lines), EGGNOG_LITRES)
    if not counts:
        return 0
    return counts.count(min(counts))