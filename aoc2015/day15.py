"""Day 15: the highest-scoring cookie recipe of one hundred teaspoons."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from math import prod

TEASPOONS = 100
CALORIE_TARGET = 500
_PROPERTIES = 4
_INGREDIENTS = 4


def get_ingredient_scores(lines: Iterable[str]) -> list[list[int]]:
    """Capacity, durability, flavour, texture and calories of each ingredient."""
    scores = []
    for line in lines:
        tokens = line.replace(",", "").split(" ")
        if len(tokens) < 11:
            raise ValueError(f"not an ingredient: {line!r}")
        scores.append([int(tokens[index]) for index in (2, 4, 6, 8, 10)])
    return scores


def _mixtures() -> Iterator[tuple[int, int, int, int]]:
    # The last ingredient always gets at least one teaspoon.
    for first in range(TEASPOONS):
        for second in range(TEASPOONS - first):
            for third in range(TEASPOONS - first - second):
                yield first, second, third, TEASPOONS - first - second - third


def _recipes(scores: Sequence[Sequence[int]]) -> Iterator[tuple[int, list[int]]]:
    """Yield (score, property totals) for every mixture of the first four ingredients."""
    if len(scores) < _INGREDIENTS:
        raise ValueError(f"need {_INGREDIENTS} ingredients, got {len(scores)}")
    columns = list(zip(*scores[:_INGREDIENTS]))
    for amounts in _mixtures():
        totals = [sum(a * v for a, v in zip(amounts, column)) for column in columns]
        yield prod(max(total, 0) for total in totals[:_PROPERTIES]), totals


def calculate_max_score(scores: Sequence[Sequence[int]]) -> int:
    """The best cookie score of any mixture."""
    return max((score for score, _ in _recipes(scores)), default=0)


def calculate_calorie_restricted_max_score(scores: Sequence[Sequence[int]]) -> int:
    """The best cookie score among mixtures with exactly 500 calories."""
    return max(
        (
            score
            for score, totals in _recipes(scores)
            if totals[_PROPERTIES] == CALORIE_TARGET
        ),
        default=0,
    )


def part_one(lines: Sequence[str]) -> int:
    return calculate_max_score(get_ingredient_scores(lines))


def part_two(lines: Sequence[str]) -> int:
    return calculate_calorie_restricted_max_score(get_ingredient_scores(lines))