"""Exact win odds for the hex-stat card battle model.

Roll model:
- A stat ``s`` opens a range of 16 roll ceilings ``[16 * s, 16 * (s + 1))``.
- Every (attack ceiling, defense ceiling) pair is enumerated, and every attack roll
  from 0 up to the attack ceiling inclusive is weighted:
    roll < defense ceiling:  wins += roll, losses += defense ceiling - roll + 1
    otherwise:               wins += defense ceiling
- Win probability is ``wins / (wins + losses)``.

Nothing is sampled; identical inputs always give bit-identical results.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from loguru import logger

from .cards import AttackType, Card

ROLL_SPAN = 16
STAT_MIN = 0
STAT_MAX = 15


@dataclass(frozen=True)
class OutcomeTally:
    wins: int
    losses: int

    @property
    def total(self) -> int:
        return self.wins + self.losses

    @property
    def probability(self) -> float:
        return self.wins / self.total


def _check_stat(name: str, value: int) -> None:
    if not STAT_MIN <= value <= STAT_MAX:
        raise ValueError(f"{name} must be in [{STAT_MIN}, {STAT_MAX}], got {value}")


@lru_cache(maxsize=None)
def tally_outcomes(attack_power: int, defense_power: int) -> OutcomeTally:
    """Enumerate every roll combination and return the weighted win/loss counts."""
    _check_stat("attack_power", attack_power)
    _check_stat("defense_power", defense_power)

    wins = 0
    losses = 0

    attack_ceilings = range(ROLL_SPAN * attack_power, ROLL_SPAN * (attack_power + 1))
    defense_ceilings = range(ROLL_SPAN * defense_power, ROLL_SPAN * (defense_power + 1))

    for attack_upper in attack_ceilings:
        for defense_upper in defense_ceilings:
            for attack_roll in range(attack_upper + 1):
                if attack_roll < defense_upper:
                    wins += attack_roll
                    losses += defense_upper - attack_roll + 1
                else:
                    wins += defense_upper

    logger.debug(f"Tallied a={attack_power} d={defense_power}: wins={wins} losses={losses}")
    return OutcomeTally(wins=wins, losses=losses)


def probability_of_win(attack_power: int, defense_power: int) -> float:
    """Compute the exact probability that ``attack_power`` beats ``defense_power``."""
    return tally_outcomes(attack_power, defense_power).probability


def resolve_powers(attacker: Card, defender: Card) -> tuple[int, int]:
    """Pick the (attack_power, defense_power) pair contested by the attacker's type."""
    attack_type = attacker.attack_type

    if attack_type is AttackType.PHYSICAL:
        powers = (attacker.attack_value, defender.physical_defense)
    elif attack_type is AttackType.MAGIC:
        powers = (attacker.attack_value, defender.magical_defense)
    elif attack_type is AttackType.FLEXIBLE:
        powers = (attacker.attack_value, min(defender.physical_defense, defender.magical_defense))
    else:
        # Assault: attacker's best stat against the defender's worst.
        powers = (max(attacker.stats), min(defender.stats))

    logger.debug(f"{attacker.code} vs {defender.code} ({attack_type.name}): powers={powers}")
    return powers


def battle_calc(attacker: Card, defender: Card) -> float:
    """Compute the attacker's win probability against ``defender``."""
    return probability_of_win(*resolve_powers(attacker, defender))
