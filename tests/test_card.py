"""Unit tests for card points, display and the capture rule."""

from __future__ import annotations

import pytest

from deck import Card, card_from_str, cards_from_strs, cards_to_strs, standard_cards
from errors import ValidationError
from game_types import Rank, Suit


POINT_CASES = [
    ("AH", 1),
    ("AS", 1),
    ("JD", 1),
    ("JC", 1),
    ("2C", 2),
    ("2H", 0),
    ("TD", 3),
    ("TS", 0),
    ("KC", 0),
    ("7D", 0),
]


@pytest.mark.parametrize("code, expected", POINT_CASES)
def test_card_points(code: str, expected: int) -> None:
    assert card_from_str(code).points == expected


def test_point_table_over_full_deck() -> None:
    cards = standard_cards()
    scoring = [card for card in cards if card.points]
    assert len(scoring) == 10
    assert sum(card.points for card in cards) == 4 + 4 + 2 + 3
    assert sum(1 for card in cards if card.points == 0) == 42


def test_display_name_and_str() -> None:
    card = Card(Suit.HEARTS, Rank.ACE)
    assert card.display_name == "Ace of Hearts"
    assert str(card) == "Ace of Hearts"
    assert Card(Suit.DIAMONDS, Rank.TEN).display_name == "Ten of Diamonds"


def test_cards_are_structurally_equal_and_hashable() -> None:
    first = Card(Suit.CLUBS, Rank.QUEEN)
    second = Card(Suit.CLUBS, Rank.QUEEN)
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert first != Card(Suit.SPADES, Rank.QUEEN)


def test_card_is_immutable() -> None:
    card = Card(Suit.CLUBS, Rank.QUEEN)
    with pytest.raises(AttributeError):
        card.rank = Rank.KING  # type: ignore[misc]


def test_card_rejects_unknown_values() -> None:
    with pytest.raises(ValidationError):
        Card("X", Rank.ACE)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        Card(Suit.HEARTS, 14)  # type: ignore[arg-type]


def test_jack_captures_everything() -> None:
    for jack in (card for card in standard_cards() if card.rank == Rank.JACK):
        assert all(jack.can_capture(other) for other in standard_cards())


def test_capture_rule_across_deck() -> None:
    for card in standard_cards():
        for other in standard_cards():
            expected = card.rank == Rank.JACK or card.rank == other.rank
            assert card.can_capture(other) is expected


def test_same_rank_captures_both_ways() -> None:
    seven_hearts = Card(Suit.HEARTS, Rank.SEVEN)
    seven_spades = Card(Suit.SPADES, Rank.SEVEN)
    assert seven_spades.can_capture(seven_hearts)
    assert seven_hearts.can_capture(seven_spades)


def test_different_rank_does_not_capture() -> None:
    assert not Card(Suit.DIAMONDS, Rank.KING).can_capture(Card(Suit.HEARTS, Rank.SEVEN))
    # only the Jack is wild; being captured by a Jack is not symmetric
    assert not Card(Suit.HEARTS, Rank.SEVEN).can_capture(Card(Suit.CLUBS, Rank.JACK))


def test_can_capture_requires_a_card() -> None:
    with pytest.raises(ValidationError):
        Card(Suit.CLUBS, Rank.JACK).can_capture(None)  # type: ignore[arg-type]


def test_compact_codes() -> None:
    cards = cards_from_strs(["AH", "td", "7S"])
    assert cards == [
        Card(Suit.HEARTS, Rank.ACE),
        Card(Suit.DIAMONDS, Rank.TEN),
        Card(Suit.SPADES, Rank.SEVEN),
    ]
    assert cards_to_strs(cards) == ["AH", "TD", "7S"]


@pytest.mark.parametrize("code", ["", "A", "10H", "XH", "AX"])
def test_malformed_codes_rejected(code: str) -> None:
    with pytest.raises(ValidationError):
        card_from_str(code)
