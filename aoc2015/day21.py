"""Day 21: buying equipment to beat the boss in a turn-based fight."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import product


@dataclass(frozen=True)
class Fighter:
    """Hit points, damage dealt per attack and armor of one combatant."""

    health: int
    damage: int
    armor: int


@dataclass(frozen=True)
class Item:
    cost: int
    damage: int = 0
    armor: int = 0


WEAPONS = (Item(8, 4), Item(10, 5), Item(25, 6), Item(40, 7), Item(74, 8))
ARMOR = (
    Item(13, armor=1),
    Item(31, armor=2),
    Item(53, armor=3),
    Item(75, armor=4),
    Item(102, armor=5),
)
DAMAGE_RINGS = (Item(25, 1), Item(50, 2), Item(100, 3))
DEFENSE_RINGS = (Item(20, armor=1), Item(40, armor=2), Item(80, armor=3))

PLAYER_HEALTH = 100
BOSS = Fighter(health=104, damage=8, armor=1)

_Shape = Sequence[Sequence[Item]]

_WINNING_SHAPES: tuple[_Shape, ...] = (
    (WEAPONS,),
    (WEAPONS, DAMAGE_RINGS),
    (WEAPONS, ARMOR),
    (WEAPONS, DEFENSE_RINGS),
    (WEAPONS, ARMOR, DAMAGE_RINGS),
    (WEAPONS, ARMOR, DEFENSE_RINGS),
)

_LOSING_SHAPES: tuple[_Shape, ...] = (
    (WEAPONS,),
    (WEAPONS, ARMOR),
    (WEAPONS, DEFENSE_RINGS),
    (WEAPONS, ARMOR, DAMAGE_RINGS),
    (WEAPONS, ARMOR, DEFENSE_RINGS),
    (WEAPONS, ARMOR, DEFENSE_RINGS, DAMAGE_RINGS),
    (WEAPONS, DEFENSE_RINGS, DAMAGE_RINGS),
)


def fight(player: Fighter, boss: Fighter) -> bool:
    """Whether the player, attacking first, is still alive when the fight ends."""
    if player.armor >= boss.damage:
        return True
    player_health, boss_health = player.health, boss.health
    while player_health > 0 and boss_health > 0:
        boss_health -= player.damage - boss.armor
        if boss_health <= 0:
            break
        player_health -= boss.damage - player.armor
    return player_health > 0


def _outcomes(shapes: Iterable[_Shape]) -> Iterator[tuple[int, bool]]:
    """Yield (cost, player wins) for every loadout of the given shapes."""
    for shape in shapes:
        for items in product(*shape):
            player = Fighter(
                PLAYER_HEALTH,
                sum(item.damage for item in items),
                sum(item.armor for item in items),
            )
            yield sum(item.cost for item in items), fight(player, BOSS)


def part_one() -> int:
    """The least gold spent on a loadout that wins."""
    return min(cost for cost, wins in _outcomes(_WINNING_SHAPES) if wins)


def part_two() -> int:
    """The most gold spent on a loadout that still loses."""
    return max(cost for cost, wins in _outcomes(_LOSING_SHAPES) if not wins)