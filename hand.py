"""Ordered collections of cards held by a player or lying on the table."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from deck import Card
from errors import OutOfRangeError, ValidationError


def _require_card(card: object) -> Card:
    if not isinstance(card, Card):
        raise ValidationError(f"Expected a Card, got {card!r}")
    return card


class Hand:
    """Cards in insertion order; all mutation goes through the methods below."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self._cards: List[Card] = []
        if cards is not None:
            self.add_cards(cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def count(self) -> int:
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def add_card(self, card: Card) -> None:
        self._cards.append(_require_card(card))

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Append ``cards`` in order. Nothing is added if any item is invalid."""

        if cards is None:
            raise ValidationError("cards must not be None")
        batch = [_require_card(card) for card in cards]
        self._cards.extend(batch)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._cards):
            raise OutOfRangeError(
                f"Card index {index} out of range for hand of {len(self._cards)}"
            )

    def get_card(self, index: int) -> Card:
        self._check_index(index)
        return self._cards[index]

    def remove_at(self, index: int) -> Card:
        """Remove and return the card at ``index``."""

        self._check_index(index)
        return self._cards.pop(index)

    def remove_card(self, card: Card) -> bool:
        """Remove the first card equal to ``card``; return whether one was found."""

        _require_card(card)
        try:
            self._cards.remove(card)
        except ValueError:
            return False
        return True

    def contains(self, card: Card) -> bool:
        return card in self._cards

    def clear(self) -> None:
        self._cards.clear()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"

    def __str__(self) -> str:
        if not self._cards:
            return "Empty hand"
        return ", ".join(card.display_name for card in self._cards)


__all__ = ["Hand"]
