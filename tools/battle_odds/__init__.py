"""Card battle odds primitives."""

from .cards import AttackType, Card, InvalidCardEncoding
from .odds import (
    OutcomeTally,
    battle_calc,
    probability_of_win,
    resolve_powers,
    tally_outcomes,
)

__all__ = [
    "AttackType",
    "Card",
    "InvalidCardEncoding",
    "OutcomeTally",
    "battle_calc",
    "probability_of_win",
    "resolve_powers",
    "tally_outcomes",
]
