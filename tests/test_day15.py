import pytest

from aoc2015.day15 import (
    calculate_calorie_restricted_max_score,
    calculate_max_score,
    get_ingredient_scores,
    part_one,
    part_two,
)

BUTTERSCOTCH = "Butterscotch: capacity -1, durability -2, flavor 6, texture 3, calories 8"
CINNAMON = "Cinnamon: capacity 2, durability 3, flavor -2, texture -1, calories 3"
FILLER = "Filler: capacity 0, durability 0, flavor 0, texture 0, calories 0"

EXAMPLE = [BUTTERSCOTCH, FILLER, FILLER, CINNAMON]


def test_parse_ingredients():
    assert get_ingredient_scores([BUTTERSCOTCH]) == [[-1, -2, 6, 3, 8]]


def test_example_best_score():
    assert part_one(EXAMPLE) == 62842880


def test_example_calorie_restricted_score():
    assert part_two(EXAMPLE) == 57600000


def test_identical_ingredients_score_the_same_everywhere():
    scores = [[1, 1, 1, 1, 5]] * 4
    assert calculate_max_score(scores) == 100**4
    assert calculate_calorie_restricted_max_score(scores) == 100**4


def test_unreachable_calories_give_zero():
    scores = [[1, 1, 1, 1, 3]] * 4
    assert calculate_calorie_restricted_max_score(scores) == 0


def test_negative_property_clamps_to_zero():
    scores = [[-1, 1, 1, 1, 5]] * 4
    assert calculate_max_score(scores) == 0


def test_too_few_ingredients_rejected():
    with pytest.raises(ValueError):
        calculate_max_score([[1, 1, 1, 1, 1]])


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        get_ingredient_scores(["Sugar: capacity 3"])