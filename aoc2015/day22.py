"""Day 22: the cheapest way to win a wizard duel."""

from __future__ import annotations

from dataclasses import dataclass, replace

PLAYER_HEALTH = 50
PLAYER_MANA = 500
BOSS_HEALTH = 55
BOSS_DAMAGE = 8
MAX_TURNS = 20

_SHIELD_ARMOR = 7
_POISON_DAMAGE = 3
_RECHARGE_MANA = 101


@dataclass(frozen=True)
class _State:
    player_health: int
    player_mana: int
    boss_health: int
    mana_spent: int
    poison: int = 0
    shield: int = 0
    recharge: int = 0

    def cast(self, cost: int, **changes: int) -> _State:
        return replace(
            self,
            player_mana=self.player_mana - cost,
            mana_spent=self.mana_spent + cost,
            **changes,
        )


def _spells(state: _State):
    """Yield the state after each spell the player can cast right now."""
    if state.player_mana >= 53:
        yield state.cast(53, boss_health=state.boss_health - 4)
    if state.player_mana >= 73:
        yield state.cast(
            73,
            player_health=state.player_health + 2,
            boss_health=state.boss_health - 2,
        )
    if state.player_mana >= 113 and state.shield == 0:
        yield state.cast(113, shield=6)
    if state.player_mana >= 173 and state.poison == 0:
        yield state.cast(173, poison=6)
    if state.player_mana >= 229 and state.recharge == 0:
        yield state.cast(229, recharge=5)


def _apply_effects(state: _State) -> _State:
    poison, shield, recharge = state.poison, state.shield, state.recharge
    boss_health, player_mana = state.boss_health, state.player_mana
    if poison > 0:
        poison -= 1
        boss_health -= _POISON_DAMAGE
    if shield > 0:
        shield -= 1
    if recharge > 0:
        recharge -= 1
        player_mana += _RECHARGE_MANA
    return replace(
        state,
        poison=poison,
        shield=shield,
        recharge=recharge,
        boss_health=boss_health,
        player_mana=player_mana,
    )


def least_mana(
    player_health: int, player_mana: int, boss_health: int, hard_mode: bool
) -> int:
    """The least mana the player can spend and still win, within twenty turns.

    In hard mode the player loses one hit point at the start of each of
    their turns. Raises ValueError when no winning sequence of spells exists.
    """
    best: int | None = None

    def play(state: _State, player_turn: bool, turns_left: int) -> None:
        nonlocal best
        if turns_left == 0:
            return
        if best is not None and state.mana_spent >= best:
            return
        if state.boss_health <= 0:
            best = state.mana_spent
            return
        if hard_mode and player_turn:
            state = replace(state, player_health=state.player_health - 1)
        if state.player_health <= 0:
            return
        state = _apply_effects(state)
        if state.boss_health <= 0:
            best = state.mana_spent
            return
        if player_turn:
            for after in _spells(state):
                play(after, False, turns_left - 1)
        else:
            damage = BOSS_DAMAGE - _SHIELD_ARMOR if state.shield > 0 else BOSS_DAMAGE
            play(
                replace(state, player_health=state.player_health - damage),
                True,
                turns_left - 1,
            )

    play(_State(player_health, player_mana, boss_health, 0), True, MAX_TURNS)
    if best is None:
        raise ValueError("the player cannot win")
    return best


def part_one() -> int:
    return least_mana(PLAYER_HEALTH, PLAYER_MANA, BOSS_HEALTH, hard_mode=False)


def part_two() -> int:
    return least_mana(PLAYER_HEALTH, PLAYER_MANA, BOSS_HEALTH, hard_mode=True)