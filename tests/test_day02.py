from itertools import permutations

import pytest

from aoc2015 import day02


def test_example_box():
    assert day02.surface_area(2, 3, 4) == 52
    assert day02.smallest_side(2, 3, 4) == 2 * 3
    assert day02.smallest_perimeter(2, 3, 4) == 10
    assert day02.volume(2, 3, 4) == 2 * 3 * 4


@pytest.mark.parametrize(
    "function",
    [day02.surface_area, day02.smallest_side, day02.smallest_perimeter, day02.volume],
)
def test_functions_ignore_dimension_order(function):
    results = {function(*box) for box in permutations((5, 1, 7))}
    assert len(results) == 1


def test_cube():
    side = 3
    assert day02.surface_area(side, side, side) == 6 * side * side
    assert day02.smallest_side(side, side, side) == side * side
    assert day02.smallest_perimeter(side, side, side) == 4 * side


def test_part_one_single_box():
    assert day02.part_one(["2x3x4"]) == (
        day02.surface_area(2, 3, 4) + day02.smallest_side(2, 3, 4)
    )


def test_part_two_single_box():
    assert day02.part_two(["1x1x10"]) == (
        day02.smallest_perimeter(1, 1, 10) + day02.volume(1, 1, 10)
    )


@pytest.mark.parametrize("part", [day02.part_one, day02.part_two])
def test_parts_add_up_over_lines(part):
    assert part(["2x3x4", "1x1x10"]) == part(["2x3x4"]) + part(["1x1x10"])


def test_part_one_empty():
    assert day02.part_one([]) == 0