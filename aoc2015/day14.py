"""Day 14: the reindeer race."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

RACE_SECONDS = 2503


@dataclass(frozen=True)
class Reindeer:
    """A reindeer that flies at ``speed`` for ``endurance`` seconds, then rests."""

    name: str
    speed: int
    endurance: int
    rest: int

    def distance_after(self, seconds: int) -> int:
        """Kilometres flown after ``seconds`` seconds of the race."""
        flying = max(self.endurance, 1)
        resting = max(self.rest, 0)
        cycles, remainder = divmod(max(seconds, 0), flying + resting)
        return self.speed * (cycles * flying + min(remainder, flying))


def parse_reindeer(line: str) -> Reindeer:
    """Parse ``Comet can fly 14 km/s for 10 seconds, but then must rest for 127 seconds.``"""
    tokens = line.split(" ")
    if len(tokens) < 14:
        raise ValueError(f"not a reindeer description: {line!r}")
    return Reindeer(tokens[0], int(tokens[3]), int(tokens[6]), int(tokens[13]))


def race_points(reindeer: Iterable[Reindeer], seconds: int) -> dict[str, int]:
    """Points per reindeer: every second, each one in the lead scores one."""
    herd: dict[str, Reindeer] = {}
    for deer in reindeer:
        herd.setdefault(deer.name, deer)
    points = dict.fromkeys(herd, 0)
    for second in range(1, seconds + 1):
        distances = {name: deer.distance_after(second) for name, deer in herd.items()}
        lead = max(0, max(distances.values(), default=0))
        for name, distance in distances.items():
            if distance == lead:
                points[name] += 1
    return points


def part_one(lines: Sequence[str]) -> int:
    """The distance covered by the winning reindeer."""
    distances = (parse_reindeer(line).distance_after(RACE_SECONDS) for line in lines)
    return max(0, max(distances, default=0))


def part_two(lines: Sequence[str]) -> int:
    """The points of the winning reindeer under the lead-scoring rules."""
    points = race_points((parse_reindeer(line) for line in lines), RACE_SECONDS)
    return max(0, max(points.values(), default=0))