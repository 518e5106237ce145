#!/usr/bin/env python3
"""Dev CLI to print the attacker's odds of winning one card battle."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from loguru import logger

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tools.battle_odds.cards import Card, InvalidCardEncoding
from tools.battle_odds.odds import battle_calc, resolve_powers, tally_outcomes

DEFAULT_PRECISION = 2


def card_argument(role: str) -> Callable[[str], Card]:
    def parse(text: str) -> Card:
        try:
            return Card.from_code(text)
        except InvalidCardEncoding as e:
            raise argparse.ArgumentTypeError(f"invalid {role} card: {e.code!r}") from e

    return parse


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="battle-odds",
        description="Compute the odds that ATTACKER beats DEFENDER (cards are 4-character codes, e.g. 'fp00')",
    )
    parser.add_argument("attacker", type=card_argument("attacker"))
    parser.add_argument("defender", type=card_argument("defender"))

    parser.add_argument("--precision", type=int, default=DEFAULT_PRECISION)
    parser.add_argument("--breakdown", action="store_true", help="also print contested powers and raw tally")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging on stderr")
    args = parser.parse_args(argv)
    if args.precision < 0:
        parser.error("--precision must be non-negative")
    return args


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)

    odds = battle_calc(args.attacker, args.defender)
    if args.breakdown:
        attack_power, defense_power = resolve_powers(args.attacker, args.defender)
        tally = tally_outcomes(attack_power, defense_power)
        print(f"attack_power={attack_power} defense_power={defense_power}")
        print(f"wins={tally.wins} losses={tally.losses}")
    print(f"Odds of win: {odds * 100.0:.{args.precision}f}%")


if __name__ == "__main__":
    main()
