"""Day 19: medicine molecules built by replacement rules."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

TARGET = "e"
_MAX_RESTARTS = 100_000
_SEED = 1

Replacement = tuple[str, str]


def get_replacements(lines: Iterable[str]) -> list[Replacement]:
    """The ``source => product`` rules among the lines, in order."""
    replacements = []
    for line in lines:
        if "=>" not in line:
            continue
        parts = line.split(" => ")
        if len(parts) < 2:
            raise ValueError(f"not a replacement: {line!r}")
        replacements.append((parts[0], parts[1]))
    return replacements


def count_distinct_molecules(replacements: Iterable[Replacement], molecule: str) -> int:
    """How many different molecules one replacement step can make."""
    molecules = set()
    for source, product in replacements:
        position = molecule.find(source)
        while position != -1:
            molecules.add(molecule[:position] + product + molecule[position + len(source) :])
            position = molecule.find(source, position + 1)
    return len(molecules)


def calculate_minimum_steps(molecule: str, replacements: Sequence[Replacement]) -> int:
    """Steps to reduce ``molecule`` to ``e`` by greedily undoing replacements.

    When no rule applies any more the search starts again with the rules
    shuffled; the caller's list is left untouched.
    """
    order = list(replacements)
    if any(not product for _, product in order):
        raise ValueError("a replacement must produce something")
    rng = random.Random(_SEED)
    target = molecule
    steps = 0
    restarts = 0
    while target != TARGET:
        before = target
        for source, product in order:
            if product in target:
                target = target.replace(product, source, 1)
                steps += 1
        if target == before:
            restarts += 1
            if restarts > _MAX_RESTARTS:
                raise ValueError(f"cannot reduce {molecule!r} to {TARGET!r}")
            target = molecule
            steps = 0
            rng.shuffle(order)
    return steps


def part_one(lines: Sequence[str]) -> int:
    return count_distinct_molecules(get_replacements(lines), lines[-1])


def part_two(lines: Sequence[str]) -> int:
    return calculate_minimum_steps(lines[-1], get_replacements(lines))