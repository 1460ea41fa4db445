"""Day 20: the first house to receive enough presents from the elves."""

from __future__ import annotations

from collections.abc import Sequence

_PRESENTS_PER_ELF = 10
_PRESENTS_PER_LAZY_ELF = 11
_LAZY_ELF_HOUSES = 50


def _first_house(target: int, multiplier: int, visits: int | None) -> int:
    """The lowest house number below ``target`` that gets ``target`` presents.

    Returns ``target`` itself when no lower house does.
    """
    if target <= 0:
        return 0
    # House h always gets at least h * multiplier presents from its own elf.
    limit = min(target - 1, -(-target // multiplier))
    presents = [0] * (limit + 1)
    for elf in range(1, limit + 1):
        stop = limit + 1 if visits is None else min(limit + 1, elf * visits + 1)
        for house in range(elf, stop, elf):
            presents[house] += elf
    for house, total in enumerate(presents):
        if total * multiplier >= target:
            return house
    return target


def find_lowest_house_number(n: int) -> int:
    """Every elf visits every multiple of its number, leaving ten presents each."""
    return _first_house(n, _PRESENTS_PER_ELF, None)


def find_lowest_house_number_two(n: int) -> int:
    """Each elf visits only fifty houses, leaving eleven presents each."""
    return _first_house(n, _PRESENTS_PER_LAZY_ELF, _LAZY_ELF_HOUSES)


def part_one(lines: Sequence[str]) -> int:
    return find_lowest_house_number(int(lines[0].strip()))


def part_two(lines: Sequence[str]) -> int:
    return find_lowest_house_number_two(int(lines[0].strip()))