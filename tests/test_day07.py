import pytest

from aoc2015.day07 import (
    Gate,
    Op,
    emulate,
    get_gates,
    get_starting_wires,
    part_one,
    part_two,
)

EXAMPLE = [
    "123 -> x",
    "456 -> y",
    "x AND y -> d",
    "x OR y -> e",
    "x LSHIFT 2 -> f",
    "y RSHIFT 2 -> g",
    "NOT x -> h",
    "NOT y -> i",
]


def _solve(lines):
    return emulate(get_starting_wires(lines), get_gates(lines))


def test_starting_wires():
    assert get_starting_wires(EXAMPLE) == {"x": 123, "y": 456}


def test_gates_parsed():
    gates = get_gates(EXAMPLE)
    assert len(gates) == 6
    assert gates[0] == Gate(Op.AND, ("x", "y"), "d")
    assert gates[4] == Gate(Op.NOT, ("x",), "h")


def test_example_values():
    result = _solve(EXAMPLE)
    assert result["d"] == 72
    assert result["e"] == 507
    assert result["h"] == 65412


def test_example_invariants():
    result = _solve(EXAMPLE)
    assert result["f"] >> 2 == result["x"]
    assert result["g"] << 2 <= result["y"]
    assert result["h"] + result["x"] == 0xFFFF
    assert result["i"] + result["y"] == 0xFFFF
    assert result["d"] | result["e"] == result["e"]


def test_emulate_does_not_change_input():
    wires = get_starting_wires(EXAMPLE)
    before = dict(wires)
    emulate(wires, get_gates(EXAMPLE))
    assert wires == before


def test_literal_operand_and_assignment():
    lines = ["7 -> b", "1 AND b -> c", "c -> a"]
    result = _solve(lines)
    assert result["a"] == result["c"]
    assert result["c"] == 7 & 1


def test_parts():
    lines = ["5 -> b", "b LSHIFT 1 -> a"]
    first = part_one(lines)
    assert first == _solve(lines)["a"]
    assert part_two(lines) == 2 * first


def test_unresolvable_raises():
    with pytest.raises(ValueError):
        emulate({}, get_gates(["x AND y -> z"]))


def test_bad_instruction_raises():
    with pytest.raises(ValueError):
        get_gates(["x XOR y -> z"])