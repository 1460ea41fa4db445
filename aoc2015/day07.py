"""Day 7: a circuit of 16-bit wires and bitwise gates."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

_MASK = 0xFFFF


class Op(enum.Enum):
    AND = "AND"
    OR = "OR"
    LSHIFT = "LSHIFT"
    RSHIFT = "RSHIFT"
    NOT = "NOT"
    ASSIGN = "ASSIGN"


_BINARY = {Op.AND, Op.OR, Op.LSHIFT, Op.RSHIFT}

_APPLY = {
    Op.AND: lambda a, b: a & b,
    Op.OR: lambda a, b: a | b,
    Op.LSHIFT: lambda a, b: (a << b) & _MASK,
    Op.RSHIFT: lambda a, b: a >> b,
    Op.NOT: lambda a: ~a & _MASK,
    Op.ASSIGN: lambda a: a,
}


@dataclass(frozen=True)
class Gate:
    """A gate reading its inputs (wire names or numbers) into one output wire."""

    op: Op
    inputs: tuple[str, ...]
    output: str


def _is_number(token: str) -> bool:
    return token[:1].isdigit()


def get_starting_wires(lines: Iterable[str]) -> dict[str, int]:
    """Wires given a constant signal, such as ``123 -> x``."""
    wires: dict[str, int] = {}
    for line in lines:
        tokens = line.split(" ")
        if len(tokens) == 3 and _is_number(tokens[0]):
            wires.setdefault(tokens[2], int(tokens[0]) & _MASK)
    return wires


def get_gates(lines: Iterable[str]) -> list[Gate]:
    """Every instruction that is not a constant signal, as a gate."""
    gates = []
    for line in lines:
        tokens = line.split(" ")
        if len(tokens) == 5 and tokens[3] == "->" and tokens[1] in Op.__members__:
            op = Op(tokens[1])
            if op not in _BINARY:
                raise ValueError(f"not a circuit instruction: {line!r}")
            gates.append(Gate(op, (tokens[0], tokens[2]), tokens[4]))
        elif len(tokens) == 4 and tokens[0] == "NOT" and tokens[2] == "->":
            gates.append(Gate(Op.NOT, (tokens[1],), tokens[3]))
        elif len(tokens) == 3 and tokens[1] == "->":
            if not _is_number(tokens[0]):
                gates.append(Gate(Op.ASSIGN, (tokens[0],), tokens[2]))
        else:
            raise ValueError(f"not a circuit instruction: {line!r}")
    return gates


def emulate(wires: Mapping[str, int], gates: Iterable[Gate]) -> dict[str, int]:
    """Resolve every gate's signal; wires already known are never overwritten."""
    resolved = dict(wires)
    pending = [gate for gate in gates if gate.output not in resolved]
    while pending:
        waiting = []
        for gate in pending:
            if gate.output in resolved:
                continue
            values = [
                int(token) & _MASK if _is_number(token) else resolved.get(token)
                for token in gate.inputs
            ]
            if any(value is None for value in values):
                waiting.append(gate)
                continue
            resolved[gate.output] = _APPLY[gate.op](*values)
        if len(waiting) == len(pending):
            missing = sorted({gate.output for gate in waiting})
            raise ValueError(f"cannot resolve wires: {', '.join(missing)}")
        pending = waiting
    return resolved


def part_one(lines: Sequence[str]) -> int:
    """The signal on wire ``a``."""
    return emulate(get_starting_wires(lines), get_gates(lines))["a"]


def part_two(lines: Sequence[str]) -> int:
    """The signal on ``a`` after feeding the first answer into wire ``b``."""
    first = part_one(lines)
    wires = get_starting_wires(lines)
    wires["b"] = first
    return emulate(wires, get_gates(lines))["a"]