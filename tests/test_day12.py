import pytest

from aoc2015.day12 import part_one, part_two, sum_integers, sum_integers_ignore_red


@pytest.mark.parametrize("values", [[1, 2, 3], [-1, 1], [], [10, -4, 7]])
def test_flat_list_sums(values):
    assert sum_integers(values) == sum(values)


def test_nested_equals_flat():
    assert sum_integers({"a": [1, {"b": 2}], "c": 3}) == sum_integers([1, 2, 3])


def test_red_object_ignored():
    assert sum_integers_ignore_red([1, {"c": "red", "b": 2}, 3]) == 4
    assert sum_integers_ignore_red({"d": "red", "e": [1, 2, 3, 4], "f": 5}) == 0


def test_red_in_array_counts():
    value = [1, "red", 5]
    assert sum_integers_ignore_red(value) == sum_integers(value)


@pytest.mark.parametrize("value", [[1, {"a": "blue", "b": 4}], {"x": [2, 3]}, 7])
def test_without_red_both_agree(value):
    assert sum_integers_ignore_red(value) == sum_integers(value)


def test_floats_truncated_and_booleans_ignored():
    assert sum_integers([1.5]) == 1
    assert sum_integers([True, 2, None, "5"]) == sum_integers([2])


def test_parts_parse_json():
    lines = ['[1,{"c":"red","b":2},3]']
    assert part_one(lines) == sum_integers([1, {"b": 2}, 3])
    assert part_two(lines) == sum_integers([1, 3])
    assert part_two(lines) <= part_one(lines)