import json

import pytest

from aoc2015.day08 import decoded_overhead, encoded_overhead, part_one, part_two

LINES = ['""', '"abc"', r'"aaa\"aaa"', r'"\x27"', r'"a\\b"']


def test_pinned_values():
    assert decoded_overhead('"abc"') == 2
    assert decoded_overhead(r'"\x27"') == 5
    assert encoded_overhead('""') == 4


@pytest.mark.parametrize("line", ['""', '"abc"', r'"aaa\"aaa"', r'"a\\b"', r'"\\\""'])
def test_decoded_matches_json(line):
    assert decoded_overhead(line) == len(line) - len(json.loads(line))


@pytest.mark.parametrize("line", LINES)
def test_encoded_matches_json(line):
    assert encoded_overhead(line) == len(json.dumps(line)) - len(line)


def test_parts_sum_lines():
    assert part_one(LINES) == sum(decoded_overhead(line) for line in LINES)
    assert part_two(LINES) == sum(encoded_overhead(line) for line in LINES)


def test_unknown_escape_raises():
    with pytest.raises(ValueError):
        decoded_overhead(r'"\q"')