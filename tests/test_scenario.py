"""A short two-player exchange driven end to end through the public API."""

from __future__ import annotations

import random

from deck import Deck
from player import Player


def _deal_two_players(seed: int):
    deck = Deck(rng=random.Random(seed))
    deck.shuffle()
    first, second = Player("A"), Player("B")
    first.hand.add_cards(deck.deal_cards(4))
    second.hand.add_cards(deck.deal_cards(4))
    return deck, first, second


def test_deal_play_and_capture() -> None:
    deck, first, second = _deal_two_players(2024)
    assert deck.cards_remaining == 44
    assert first.hand.count == second.hand.count == 4

    expected = first.hand.get_card(0)
    played = first.play_card(0)
    assert played == expected
    assert first.hand.count == 3

    extra = deck.deal()
    first.add_captured_cards([played, extra])
    assert first.cards_won == 2
    assert first.score == played.points + extra.points
    assert second.score == 0


def test_seeded_deals_are_reproducible() -> None:
    _, first_a, second_a = _deal_two_players(99)
    _, first_b, second_b = _deal_two_players(99)
    assert first_a.hand.cards == first_b.hand.cards
    assert second_a.hand.cards == second_b.hand.cards


def test_no_card_is_dealt_twice() -> None:
    deck, first, second = _deal_two_players(5)
    held = list(first.hand) + list(second.hand) + list(deck.cards)
    assert len(held) == 52
    assert len(set(held)) == 52


def test_capture_moves_table_card_to_winner() -> None:
    deck, first, _ = _deal_two_players(8)
    table = deck.deal()
    capturing = [
        index for index, card in enumerate(first.hand) if card.can_capture(table)
    ]
    if capturing:
        played = first.play_card(capturing[0])
        first.add_captured_cards([table, played])
        assert first.cards_won == 2
    else:
        assert all(not card.can_capture(table) for card in first.hand)
        assert first.cards_won == 0
