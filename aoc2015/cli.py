"""Command line runner for the daily puzzle solutions."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from . import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day22,
    day23,
    day24,
    day25,
)
from .tools import format_duration, read_lines

_WITH_INPUT = {
    1: day01, 2: day02, 3: day03, 4: day04, 5: day05, 6: day06, 7: day07,
    8: day08, 9: day09, 10: day10, 11: day11, 12: day12, 13: day13,
    14: day14, 15: day15, 16: day16, 17: day17, 18: day18, 19: day19,
    20: day20, 23: day23, 24: day24,
}

_WITHOUT_INPUT: dict[int, tuple[Callable[[], object], ...]] = {
    21: (day21.part_one, day21.part_two),
    22: (day22.part_one, day22.part_two),
    25: (day25.part_one,),
}


def _timed(label: str, solve: Callable[[], object]) -> None:
    start = time.perf_counter()
    answer = solve()
    elapsed = time.perf_counter() - start
    print(f"{label}: {answer}")
    print(format_duration(elapsed))
    print()


def main(argv: Sequence[str] | None = None) -> int:
    """Solve one day's puzzle and print both answers with their timings."""
    parser = argparse.ArgumentParser(description="Solve a puzzle of the 2015 calendar.")
    parser.add_argument("day", type=int, choices=range(1, 26), metavar="DAY")
    parser.add_argument(
        "input", nargs="?", type=Path, help="puzzle input (default: DAY/data/input.txt)"
    )
    args = parser.parse_args(argv)

    print(f"AOC 2015 - DAY {args.day}")
    if args.day in _WITHOUT_INPUT:
        for number, solve in enumerate(_WITHOUT_INPUT[args.day], start=1):
            _timed(f"Part {number}", solve)
        return 0

    path = args.input or Path(str(args.day)) / "data" / "input.txt"
    try:
        lines = read_lines(path)
    except OSError as error:
        print(f"ERROR: cannot read {path}: {error}", file=sys.stderr)
        return 1

    module = _WITH_INPUT[args.day]
    _timed("Part 1", lambda: module.part_one(lines))
    _timed("Part 2", lambda: module.part_two(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())