"""Day 18: an animated grid of lights following the rules of life."""

from __future__ import annotations

from collections.abc import Sequence

ON = "#"
OFF = "."
STEPS = 100


def _checked(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("every row of the grid must have the same length")
    return rows


def _next_cell(cell: str, lit: int) -> str:
    """``lit`` counts the lights on in the 3x3 block around the cell, itself included."""
    if cell == OFF:
        return ON if lit == 3 else OFF
    if cell == ON:
        return ON if lit in (3, 4) else OFF
    return cell


def _step(rows: list[str]) -> list[str]:
    def lit_around(x: int, y: int) -> int:
        return sum(
            row[max(y - 1, 0) : y + 2].count(ON) for row in rows[max(x - 1, 0) : x + 2]
        )

    return [
        "".join(_next_cell(cell, lit_around(x, y)) for y, cell in enumerate(row))
        for x, row in enumerate(rows)
    ]


def _light_corners(rows: list[str]) -> list[str]:
    cells = [list(row) for row in rows]
    for x in (0, -1):
        for y in (0, -1):
            cells[x][y] = ON
    return ["".join(row) for row in cells]


def _check_steps(steps: int) -> None:
    if steps < 0:
        raise ValueError(f"number of steps must not be negative: {steps}")


def animate_lights(grid: Sequence[str], steps: int) -> list[str]:
    """The grid after ``steps`` steps of animation."""
    _check_steps(steps)
    rows = _checked(grid)
    for _ in range(steps):
        rows = _step(rows)
    return rows


def animate_lights_broken(grid: Sequence[str], steps: int) -> list[str]:
    """Like :func:`animate_lights`, with the four corner lights stuck on."""
    _check_steps(steps)
    rows = _checked(grid)
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    rows = _light_corners(rows)
    for _ in range(steps):
        rows = _light_corners(_step(rows))
    return rows


def count_lights(grid: Sequence[str]) -> int:
    """How many lights are on."""
    return sum(row.count(ON) for row in grid)


def part_one(lines: Sequence[str]) -> int:
    return count_lights(animate_lights(lines, STEPS))


def part_two(lines: Sequence[str]) -> int:
    return count_lights(animate_lights_broken(lines, STEPS))