"""Shared enums and dataclasses describing cards and demo configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

from errors import ValidationError


class Suit(str, Enum):
    """The four suits, in canonical deck order."""

    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def label(self) -> str:
        return self.name.title()


class Rank(IntEnum):
    """Card ranks, ordinal Ace=1 through King=13."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        return self.name.title()

    @property
    def code(self) -> str:
        return RANK_CODES[self.value - 1]


RANK_CODES = "A23456789TJQK"


@dataclass(frozen=True)
class DemoRules:
    """Sizes and names used by the console demonstration."""

    demo_deal: int = 5
    hand_size: int = 4
    player_names: Tuple[str, ...] = ("Ahmet", "Ayse")

    def __post_init__(self) -> None:
        if self.demo_deal < 0:
            raise ValidationError("demo_deal must be non-negative")
        if self.hand_size < 0:
            raise ValidationError("hand_size must be non-negative")
        if len(self.player_names) < 2:
            raise ValidationError("at least two player names are required")
        if self.demo_deal > 52:
            raise ValidationError("demo_deal cannot exceed a 52-card deck")
        if self.hand_size * len(self.player_names) > 52:
            raise ValidationError("Not enough cards to deal every player a hand")


__all__ = ["DemoRules", "RANK_CODES", "Rank", "Suit"]
