import pytest

from aoc2015.day24 import best_configuration, part_one, part_two

PACKAGES = [1, 2, 3, 4, 5, 7, 8, 9, 10, 11]
LINES = [str(p) for p in PACKAGES]


def test_three_groups_example():
    assert best_configuration(PACKAGES, 3) == 99


def test_four_groups_example():
    assert best_configuration(PACKAGES, 4) == 44


def test_parts_read_lines():
    assert (part_one(LINES), part_two(LINES)) == (
        best_configuration(PACKAGES, 3),
        best_configuration(PACKAGES, 4),
    )


def test_no_group_found():
    assert best_configuration([1, 1, 5], 3) == 0


def test_non_positive_groups():
    with pytest.raises(ValueError):
        best_configuration(PACKAGES, 0)