# aoc2015

Solutions to the twenty-five puzzles of the 2015 Advent of Code, one module
per day (`aoc2015.day01` to `aoc2015.day25`), plus a small set of parsing
helpers in `aoc2015.tools`. Only the standard library is needed.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `aoc2015` command solves one day's puzzle and prints each part's answer
followed by the time it took:

```
aoc2015 DAY [INPUT]
```

`DAY` is a number from 1 to 25. `INPUT` is the path of your puzzle input; if
it is left out, `DAY/data/input.txt` relative to the current directory is
read. If the file cannot be read, an error is printed and the command exits
with status 1.

```
aoc2015 1 inputs/day01.txt
aoc2015 25
```

Days 21, 22 and 25 have their puzzle values built in and read no input file.
Day 25 has a single part.

## As a library

Most days expose `part_one(lines)` and `part_two(lines)`. Each takes the input
file's lines and returns the answer:

```python
from aoc2015 import day01, day10
from aoc2015.tools import read_lines

lines = read_lines("input.txt")
print(day01.part_one(lines), day01.part_two(lines))

print(day10.look_and_say("1", 5))  # length of the fifth term after "1": 6
```

Days 21, 22 and 25 take no arguments: `day21.part_one()`, `day22.part_two()`,
`day25.part_one()`.

The helpers each day uses are public as well, for example
`day02.surface_area`, `day04.find_suffix`, `day05.is_nice`,
`day11.next_password`, `day14.Reindeer.distance_after`,
`day18.animate_lights`, `day22.least_mana`, `day23.run`,
`day24.best_configuration` and `day25.find_code`.

Malformed input lines raise `ValueError`.

## What it does not do

The package does not download puzzle inputs or submit answers; you supply
the input files yourself.