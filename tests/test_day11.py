import pytest

from aoc2015.day11 import (
    increment_string,
    next_password,
    part_one,
    part_two,
    password_is_valid,
)


def test_increment_pinned():
    assert increment_string("xz") == "ya"
    assert increment_string("z") == "aa"


@pytest.mark.parametrize("text", ["a", "xx", "abcz", "hxbxwxba", "azzz"])
def test_increment_orders_same_length(text):
    result = increment_string(text)
    assert len(result) == len(text)
    assert result > text


def test_increment_overflow_grows():
    assert increment_string("zzz") == "a" * 4


@pytest.mark.parametrize("text", ["hijklmmn", "abbceffg", "abbcegjk", "abc", "a"])
def test_invalid_passwords(text):
    assert not password_is_valid(text)


def test_valid_password():
    assert password_is_valid("abcdffaa")


def test_next_password_example():
    assert next_password("abcdefgh") == "abcdffaa"


def test_parts_are_valid_and_ordered():
    first = part_one(["abcdefgh"])
    second = part_two(["abcdefgh"])
    assert password_is_valid(first)
    assert password_is_valid(second)
    assert second > first
    assert second == next_password(first)