"""Day 24: balancing the sleigh with the smallest front group."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations
from math import prod

from .tools import parse_ints


def best_configuration(packages: Sequence[int], groups: int) -> int:
    """Quantum entanglement of the first smallest group that weighs a share.

    Groups of two packages upwards are tried in order; within a size the
    first matching combination in input order wins. Returns 0 if none is found.
    """
    if groups <= 0:
        raise ValueError(f"number of groups must be positive: {groups}")
    target = sum(packages) // groups
    largest = len(packages) // groups
    for size in range(2, largest + 1):
        for group in combinations(packages, size):
            if sum(group) == target:
                return prod(group)
    return 0


def part_one(lines: Sequence[str]) -> int:
    return best_configuration(parse_ints(lines), 3)


def part_two(lines: Sequence[str]) -> int:
    return best_configuration(parse_ints(lines), 4)