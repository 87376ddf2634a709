"""Cards and the standard 52-card deck used by Pisti."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from errors import GameStateError, OutOfRangeError, ValidationError
from game_types import RANK_CODES, Rank, Suit


logger = logging.getLogger(__name__)

SUITS: Sequence[Suit] = tuple(Suit)
RANKS: Sequence[Rank] = tuple(Rank)
DECK_SIZE = len(SUITS) * len(RANKS)


@dataclass(frozen=True)
class Card:
    """Representation of a single playing card."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValidationError(f"Unknown suit: {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise ValidationError(f"Unknown rank: {self.rank!r}")

    @property
    def points(self) -> int:
        if self.rank in (Rank.ACE, Rank.JACK):
            return 1
        if self.rank == Rank.TWO and self.suit == Suit.CLUBS:
            return 2
        if self.rank == Rank.TEN and self.suit == Suit.DIAMONDS:
            return 3
        return 0

    @property
    def display_name(self) -> str:
        return f"{self.rank.label} of {self.suit.label}"

    @property
    def code(self) -> str:
        return f"{self.rank.code}{self.suit.value}"

    def can_capture(self, other: "Card") -> bool:
        """Return True if playing this card takes ``other`` off the table.

        A Jack takes any card; otherwise the ranks must match.
        """

        if not isinstance(other, Card):
            raise ValidationError("can_capture requires a Card to compare against")
        if self.rank == Rank.JACK:
            return True
        return self.rank == other.rank

    def __str__(self) -> str:
        return self.display_name


def card_from_str(card: str) -> Card:
    """Create a :class:`Card` from a compact code such as ``"AH"`` or ``"TD"``."""

    if not isinstance(card, str) or len(card) != 2:
        raise ValidationError(f"Card string must be length 2, got {card!r}")
    rank_code, suit_code = card[0].upper(), card[1].upper()
    if rank_code not in RANK_CODES:
        raise ValidationError(f"Unknown rank code: {card[0]!r}")
    try:
        suit = Suit(suit_code)
    except ValueError as exc:
        raise ValidationError(f"Unknown suit code: {card[1]!r}") from exc
    return Card(suit, Rank(RANK_CODES.index(rank_code) + 1))


def cards_from_strs(cards: Iterable[str]) -> List[Card]:
    """Parse multiple card codes into a list of :class:`Card` objects."""

    return [card_from_str(token) for token in cards]


def cards_to_strs(cards: Iterable[Card]) -> List[str]:
    return [card.code for card in cards]


def standard_cards() -> List[Card]:
    """All 52 cards, suit-major and rank-minor."""

    return [Card(suit, rank) for suit in SUITS for rank in RANKS]


class Deck:
    """A standard 52-card deck with deterministic shuffling support.

    The top of the deck is the end of the backing list, so dealing is a pop.
    """

    def __init__(self, *, rng=None) -> None:
        self._rng = rng or random.Random()
        self._cards: List[Card] = standard_cards()

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the remaining cards, bottom to top."""

        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def shuffle(self) -> None:
        """Shuffle in place with a Fisher-Yates pass driven by the deck's RNG."""

        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]
        logger.debug("Shuffled deck of %d cards", len(cards))

    def deal(self) -> Card:
        """Remove and return the top card."""

        if not self._cards:
            raise GameStateError("Cannot deal from an empty deck")
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """Deal ``count`` cards from the top, in the order they come off."""

        if count < 0:
            raise OutOfRangeError("count must be non-negative")
        if count > len(self._cards):
            raise OutOfRangeError(
                f"Cannot deal {count} cards, only {len(self._cards)} remaining"
            )
        return [self.deal() for _ in range(count)]

    def reset(self) -> None:
        """Refill with a fresh standard set and shuffle it."""

        self._cards = standard_cards()
        logger.debug("Deck reset to %d cards", len(self._cards))
        self.shuffle()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"


__all__ = [
    "Card",
    "DECK_SIZE",
    "Deck",
    "RANKS",
    "SUITS",
    "card_from_str",
    "cards_from_strs",
    "cards_to_strs",
    "standard_cards",
]
