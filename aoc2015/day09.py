"""Day 9: shortest and longest routes visiting every city once."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from itertools import pairwise, permutations


def _parse(line: str) -> tuple[str, str, int]:
    tokens = line.split(" ")
    if len(tokens) != 5 or tokens[1] != "to" or tokens[3] != "=":
        raise ValueError(f"not a distance: {line!r}")
    return tokens[0], tokens[2], int(tokens[4])


def create_map(lines: Iterable[str]) -> dict[tuple[str, str], int]:
    """Distances keyed by ordered city pairs, in both directions."""
    distances: dict[tuple[str, str], int] = {}
    for line in lines:
        first, second, distance = _parse(line)
        distances.setdefault((first, second), distance)
        distances.setdefault((second, first), distance)
    return distances


def get_cities(lines: Iterable[str]) -> list[str]:
    """Every city named, sorted."""
    cities = set()
    for line in lines:
        first, second, _ = _parse(line)
        cities.update((first, second))
    return sorted(cities)


def _route_lengths(distances: Mapping[tuple[str, str], int], cities: Sequence[str]):
    for route in permutations(cities):
        yield sum(distances[leg] for leg in pairwise(route))


def get_shortest(distances: Mapping[tuple[str, str], int], cities: Sequence[str]) -> int:
    return min(_route_lengths(distances, cities))


def get_longest(distances: Mapping[tuple[str, str], int], cities: Sequence[str]) -> int:
    return max(_route_lengths(distances, cities))


def part_one(lines: Sequence[str]) -> int:
    return get_shortest(create_map(lines), get_cities(lines))


def part_two(lines: Sequence[str]) -> int:
    return get_longest(create_map(lines), get_cities(lines))