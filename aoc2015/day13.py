"""Day 13: the seating arrangement with the greatest total happiness."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from itertools import permutations

GUEST = "Trevor"

_Happiness = Mapping[tuple[str, str], int]


def _parse(line: str) -> tuple[str, str, int]:
    tokens = line.split(" ")
    if len(tokens) != 11 or tokens[2] not in ("gain", "lose"):
        raise ValueError(f"not a happiness rule: {line!r}")
    amount = int(tokens[3])
    neighbour = tokens[10][:-1]
    return tokens[0], neighbour, amount if tokens[2] == "gain" else -amount


def create_adjacency_map(lines: Iterable[str]) -> dict[tuple[str, str], int]:
    """Happiness change for (person, neighbour); the first rule for a pair wins."""
    happiness: dict[tuple[str, str], int] = {}
    for line in lines:
        person, neighbour, amount = _parse(line)
        happiness.setdefault((person, neighbour), amount)
    return happiness


def get_all_names(lines: Iterable[str]) -> list[str]:
    """Every person named, sorted."""
    names = set()
    for line in lines:
        person, neighbour, _ = _parse(line)
        names.update((person, neighbour))
    return sorted(names)


def _score(happiness: _Happiness, seating: Sequence[str]) -> int:
    neighbours = zip(seating, (*seating[1:], *seating[:1]))
    return sum(happiness[(a, b)] + happiness[(b, a)] for a, b in neighbours)


def calculate_optimal_score(happiness: _Happiness, names: Sequence[str]) -> int:
    """The best total happiness around a round table, never below zero."""
    if not names:
        return 0
    first, *rest = names
    best = 0
    # Rotations of a round table score the same, so the first seat stays fixed.
    for order in permutations(rest):
        best = max(best, _score(happiness, (first, *order)))
    return best


def part_one(lines: Sequence[str]) -> int:
    return calculate_optimal_score(create_adjacency_map(lines), get_all_names(lines))


def part_two(lines: Sequence[str]) -> int:
    """The best score once a neutral guest joins the table."""
    happiness = create_adjacency_map(lines)
    names = get_all_names(lines)
    for name in names:
        happiness.setdefault((GUEST, name), 0)
        happiness.setdefault((name, GUEST), 0)
    return calculate_optimal_score(happiness, [*names, GUEST])