"""Day 16: which Aunt Sue sent the gift."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

MFCSAM = {
    "children": 3,
    "cats": 7,
    "samoyeds": 2,
    "pomeranians": 3,
    "akitas": 0,
    "vizslas": 0,
    "goldfish": 5,
    "trees": 3,
    "cars": 2,
    "perfumes": 1,
}

_MORE_THAN_READING = frozenset({"cats", "trees"})
_FEWER_THAN_READING = frozenset({"pomeranians", "goldfish"})


def parse_sue(line: str) -> tuple[int, dict[str, int]]:
    """Parse ``Sue 1: goldfish: 6, trees: 9, akitas: 0`` into her number and things."""
    tokens = line.replace(",", "").replace(":", "").split(" ")
    if len(tokens) < 2 or tokens[0] != "Sue" or len(tokens) % 2:
        raise ValueError(f"not a description of Sue: {line!r}")
    things = {key: int(value) for key, value in zip(tokens[2::2], tokens[3::2])}
    return int(tokens[1]), things


def _matches(thing: str, count: int, ranged: bool) -> bool:
    reading = MFCSAM[thing]
    if ranged and thing in _MORE_THAN_READING:
        return count > reading
    if ranged and thing in _FEWER_THAN_READING:
        return count < reading
    return count == reading


def _is_match(things: Mapping[str, int], ranged: bool) -> bool:
    return all(_matches(thing, count, ranged) for thing, count in things.items())


def find_sue(lines: Iterable[str], ranged: bool) -> int:
    """The number of the first Sue agreeing with the readings, or 0 if none does.

    With ``ranged`` the cats and trees readings are lower bounds and the
    pomeranians and goldfish readings upper bounds.
    """
    for line in lines:
        number, things = parse_sue(line)
        if _is_match(things, ranged):
            return number
    return 0


def part_one(lines: Iterable[str]) -> int:
    return find_sue(lines, ranged=False)


def part_two(lines: Iterable[str]) -> int:
    return find_sue(lines, ranged=True)