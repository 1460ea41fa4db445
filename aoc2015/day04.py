"""Day 4: mine AdventCoins by finding MD5 hashes with leading zeros."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from itertools import count


def md5_hex(text: str) -> str:
    """The MD5 digest of ``text`` (UTF-8 encoded) as lower-case hex."""
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def find_suffix(key: str, zeros: int) -> int:
    """The lowest non-negative number whose hash with ``key`` starts with ``zeros`` zeros."""
    if zeros < 0:
        raise ValueError(f"number of zeros must not be negative: {zeros}")
    prefix = "0" * zeros
    for number in count():
        if md5_hex(f"{key}{number}").startswith(prefix):
            return number
    raise AssertionError("unreachable")


def part_one(lines: Sequence[str]) -> int:
    return find_suffix(lines[0], 5)


def part_two(lines: Sequence[str]) -> int:
    return find_suffix(lines[0], 6)