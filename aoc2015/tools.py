"""Small helpers shared by the daily puzzle solutions."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable, Sequence
from os import PathLike

_LEADING_INT = re.compile(r"[+-]?\d+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_ALPHA = frozenset(string.ascii_letters)
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text.lstrip())
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    return int(match.group())


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a text file without their line endings."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def split_string(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on every occurrence of ``delimiter``."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return text.split(delimiter)


def remove_nonalpha(text: str) -> str:
    """Keep only ASCII letters."""
    return "".join(char for char in text if char in _ALPHA)


def remove_nonalphanumeric(text: str) -> str:
    """Keep only ASCII letters and digits."""
    return "".join(char for char in text if char in _ALPHANUMERIC)


def integers_in_text(text: str) -> list[int]:
    """Return the 32-bit integers that start whitespace-separated tokens."""
    numbers = []
    for token in text.split():
        match = _LEADING_INT.match(token)
        if match is None:
            continue
        value = int(match.group())
        if _INT32_MIN <= value <= _INT32_MAX:
            numbers.append(value)
    return numbers


def parse_ints(lines: Iterable[str]) -> list[int]:
    """Parse one integer per line, ignoring spaces and skipping blank lines."""
    numbers = []
    for line in lines:
        compact = line.replace(" ", "")
        if compact:
            numbers.append(_leading_int(compact))
    return numbers


def combine_ints_in_text(text: str) -> int:
    """Concatenate the integers found in ``text`` and read them as one number."""
    combined = "".join(str(number) for number in integers_in_text(text))
    return _leading_int(combined)


def strings_to_chars(strings: Iterable[str]) -> list[list[str]]:
    """Turn each string into a list of its characters."""
    return [list(text) for text in strings]


def _combine_grids(first, second, operation) -> list[list[int]]:
    if len(first) != len(second):
        raise ValueError(
            f"grid sizes do not match: {len(first)} and {len(second)}"
        )
    return [
        [operation(a, b) for a, b in zip(row_a, row_b, strict=True)]
        for row_a, row_b in zip(first, second)
    ]


def subtract_grids(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Element-wise difference of two grids of the same shape."""
    return _combine_grids(first, second, lambda a, b: a - b)


def multiply_grids(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Element-wise product of two grids of the same shape."""
    return _combine_grids(first, second, lambda a, b: a * b)


def is_digits(text: str) -> bool:
    """True when every character is an ASCII digit (an empty string counts)."""
    return all(char in string.digits for char in text)


def to_base(num: int, base: int) -> str:
    """Write a non-negative integer in ``base`` (2 to 36) with upper-case digits.

    Negative numbers give an empty string.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"invalid base: {base}")
    if num == 0:
        return "0"
    symbols = string.digits + string.ascii_uppercase
    digits = []
    while num > 0:
        num, remainder = divmod(num, base)
        digits.append(symbols[remainder])
    return "".join(reversed(digits))


def format_duration(seconds: float) -> str:
    """Describe an elapsed time in the largest whole unit that fits."""
    microseconds = int(seconds * 1_000_000)
    if microseconds < 1_000:
        return f"Time: {microseconds} microseconds"
    if microseconds < 1_000_000:
        return f"Time: {microseconds // 1_000} milliseconds"
    return f"Time: {microseconds // 1_000_000} seconds"