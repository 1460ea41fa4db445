[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2015"
version = "0.1.0"
description = "Solutions to the 2015 Advent of Code puzzles, one module per day"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "aoc", "2015"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2015 = "aoc2015.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2015"]

[tool.pytest.ini_options]
addopts = "-ra"
