"""Players: the cards they hold, the cards they have won, and their score."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, Iterable, Optional

from deck import Card, cards_to_strs
from errors import GameStateError, ValidationError
from hand import Hand


logger = logging.getLogger(__name__)


class Player:
    """A participant identified by ``id``.

    ``hand`` holds the playable cards and ``captured_cards`` the cards won this
    round. ``score`` and ``cards_won`` are derived from ``captured_cards`` on
    every read.
    """

    def __init__(self, name: str, *, player_id: Optional[uuid.UUID] = None) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Player name must be a non-empty string")
        self._id = player_id if player_id is not None else uuid.uuid4()
        self._name = name.strip()
        self._hand = Hand()
        self._captured = Hand()

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def hand(self) -> Hand:
        return self._hand

    @property
    def captured_cards(self) -> Hand:
        return self._captured

    @property
    def score(self) -> int:
        return sum(card.points for card in self._captured)

    @property
    def cards_won(self) -> int:
        return self._captured.count

    def add_captured_cards(self, cards: Iterable[Card]) -> None:
        if cards is None:
            raise ValidationError("cards must not be None")
        self._captured.add_cards(cards)
        logger.debug("%s now holds %d captured cards", self._name, self._captured.count)

    def play_card(self, index: int) -> Card:
        """Remove the card at ``index`` from the hand and return it.

        Raises:
            GameStateError: the hand is empty (checked before the index).
            OutOfRangeError: ``index`` is outside the hand.
        """

        if self._hand.is_empty:
            raise GameStateError(f"Player {self._name} has no cards to play")
        card = self._hand.remove_at(index)
        logger.debug("%s played %s", self._name, card)
        return card

    def can_play(self) -> bool:
        return not self._hand.is_empty

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": str(self._id),
            "name": self._name,
            "hand": cards_to_strs(self._hand),
            "captured": cards_to_strs(self._captured),
            "score": self.score,
            "cards_won": self.cards_won,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, id={self._id})"

    def __str__(self) -> str:
        return (
            f"{self._name} (Cards in hand: {self._hand.count}, "
            f"Score: {self.score}, Cards won: {self.cards_won})"
        )


__all__ = ["Player"]
