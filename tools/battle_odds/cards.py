"""Card encoding for the hex-stat card battle model.

A card is written as four characters ``<attack><type><physical><magical>``:
- positions 0, 2 and 3 are single hexadecimal digits (``0-9``, ``a-f``, ``A-F``);
- position 1 is the attack-type code ``p``, ``m``, ``x`` or ``a`` (any case).

Only ASCII hex digits are accepted, so every numeric stat fits in 4 bits.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum

CARD_CODE_LENGTH = 4
HEX_DIGITS = frozenset(string.hexdigits)


class InvalidCardEncoding(ValueError):
    """Raised when a card code is not a valid 4-character encoding."""

    def __init__(self, code: str) -> None:
        super().__init__(f"invalid card encoding: {code!r}")
        self.code = code


class AttackType(str, Enum):
    PHYSICAL = "p"
    MAGIC = "m"
    FLEXIBLE = "x"
    ASSAULT = "a"

    @classmethod
    def from_code(cls, code: str) -> AttackType | None:
        """Parse a single attack-type character, ignoring case."""
        if len(code) != 1:
            return None
        try:
            return cls(code.lower())
        except ValueError:
            return None


def parse_hex_digit(char: str) -> int | None:
    if len(char) != 1 or char not in HEX_DIGITS:
        return None
    return int(char, 16)


@dataclass(frozen=True)
class Card:
    attack_value: int
    attack_type: AttackType
    physical_defense: int
    magical_defense: int

    @property
    def stats(self) -> tuple[int, int, int]:
        return (self.attack_value, self.physical_defense, self.magical_defense)

    @property
    def code(self) -> str:
        return (
            f"{self.attack_value:x}{self.attack_type.value}"
            f"{self.physical_defense:x}{self.magical_defense:x}"
        )

    @classmethod
    def parse(cls, text: str) -> Card | None:
        """Build a card from its 4-character code, or ``None`` if any part is invalid."""
        if len(text) != CARD_CODE_LENGTH:
            return None

        attack_value = parse_hex_digit(text[0])
        attack_type = AttackType.from_code(text[1])
        physical_defense = parse_hex_digit(text[2])
        magical_defense = parse_hex_digit(text[3])

        if attack_value is None or attack_type is None or physical_defense is None or magical_defense is None:
            return None

        return cls(
            attack_value=attack_value,
            attack_type=attack_type,
            physical_defense=physical_defense,
            magical_defense=magical_defense,
        )

    @classmethod
    def from_code(cls, text: str) -> Card:
        card = cls.parse(text)
        if card is None:
            raise InvalidCardEncoding(text)
        return card
