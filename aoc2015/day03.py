"""Day 3: houses visited while delivering presents on an infinite grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MOVES = {">": (1, 0), "v": (0, 1), "<": (-1, 0), "^": (0, -1)}


def visited_houses(moves: Iterable[str]) -> set[tuple[int, int]]:
    """All coordinates visited, starting from the origin."""
    x = y = 0
    visited = {(x, y)}
    for move in moves:
        dx, dy = _MOVES.get(move, (0, 0))
        x += dx
        y += dy
        visited.add((x, y))
    return visited


def part_one(lines: Sequence[str]) -> int:
    return len(visited_houses(lines[0]))


def part_two(lines: Sequence[str]) -> int:
    """Houses visited when two deliverers take alternate moves."""
    moves = lines[0]
    return len(visited_houses(moves[0::2]) | visited_houses(moves[1::2]))