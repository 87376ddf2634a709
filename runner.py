"""Command-line demonstration of the Pisti deck, players and capture rule."""

from __future__ import annotations

import argparse
import importlib.util
import json
import logging
import os
import random
import sys
from typing import Any, Dict, List, Optional, Sequence, Union

from deck import Card, Deck
from errors import PistiError, ValidationError
from game_types import DemoRules, Rank, Suit
from logger import GameLogger
from player import Player


LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        if path.endswith((".yaml", ".yml")):
            spec = importlib.util.find_spec("yaml")
            if spec is None:
                raise RuntimeError("PyYAML is required to load YAML configurations")
            module = importlib.util.module_from_spec(spec)
            if spec.loader is None:  # pragma: no cover - defensive
                raise RuntimeError("Unable to import yaml module")
            spec.loader.exec_module(module)  # type: ignore[no-untyped-call]
            return module.safe_load(handle) or {}  # type: ignore[attr-defined]
        return json.load(handle)


def parse_player_names(value: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(value, str):
        parts = [part.strip() for part in value.split(",")]
    else:
        parts = [str(part).strip() for part in value]
    if any(not part for part in parts):
        raise ValidationError("Player names must not be empty")
    return parts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Demonstrate the Pisti card rules")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument(
        "--players",
        type=str,
        default="Ahmet,Ayse",
        help="Comma-separated player names (at least two)",
    )
    parser.add_argument(
        "--deal", type=int, default=5, help="Cards dealt in the deck demonstration"
    )
    parser.add_argument(
        "--hand-size", type=int, default=4, help="Cards dealt to each player"
    )
    parser.add_argument("--log", type=str, default=None, help="Path to write player snapshots")
    parser.add_argument(
        "--log-format", choices=["jsonl", "csv"], default="jsonl", help="Log format"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=LOG_LEVEL,
        help="Diagnostic log level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Optional JSON or YAML configuration file",
    )
    return parser


def _new_deck(seed: Optional[int]) -> Deck:
    rng = random.Random(seed) if seed is not None else None
    return Deck(rng=rng)


def demonstrate_deck(rules: DemoRules, seed: Optional[int]) -> None:
    print("--- Deck ---")
    deck = _new_deck(seed)
    print(f"New deck created. Cards: {deck.cards_remaining}")
    deck.shuffle()
    print("Deck shuffled.")
    dealt = deck.deal_cards(rules.demo_deal)
    print(f"Dealt {len(dealt)} cards:")
    for card in dealt:
        print(f"  - {card} (Points: {card.points})")
    print(f"Cards remaining in deck: {deck.cards_remaining}")


def demonstrate_players(
    rules: DemoRules, seed: Optional[int], game_logger: Optional[GameLogger] = None
) -> List[Player]:
    print("--- Players ---")
    players = [Player(name) for name in rules.player_names]
    deck = _new_deck(None if seed is None else seed + 1)
    deck.shuffle()
    for player in players:
        player.hand.add_cards(deck.deal_cards(rules.hand_size))

    print("Players created:")
    for player in players:
        print(f"  - {player}")
        if game_logger:
            game_logger.log(player)

    first = players[0]
    print(f"\n{first.name}'s cards:")
    for index in range(first.hand.count):
        print(f"  {index + 1}. {first.hand.get_card(index)}")
    return players


def demonstrate_capture() -> None:
    print("--- Capture ---")
    table_card = Card(Suit.HEARTS, Rank.SEVEN)
    candidates = [
        (Card(Suit.SPADES, Rank.SEVEN), "same rank"),
        (Card(Suit.CLUBS, Rank.JACK), "a Jack takes any card"),
        (Card(Suit.DIAMONDS, Rank.KING), "different rank"),
    ]
    print(f"Table card: {table_card}\n")
    print("Testing player cards:")
    for card, reason in candidates:
        answer = "YES" if card.can_capture(table_card) else "NO"
        print(f"  Can {card} capture? {answer} ({reason})")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    defaults = parser.parse_args([])
    args = parser.parse_args(argv)
    if args.config:
        config = _load_config(args.config)
        for key, value in config.items():
            key = key.replace("-", "_")
            if hasattr(args, key) and getattr(args, key) == getattr(defaults, key):
                setattr(args, key, value)

    setup_logging(args.log_level)

    game_logger: Optional[GameLogger] = None
    try:
        rules = DemoRules(
            demo_deal=args.deal,
            hand_size=args.hand_size,
            player_names=tuple(parse_player_names(args.players)),
        )
        if args.log:
            game_logger = GameLogger(args.log, fmt=args.log_format)

        print("=== Pisti - Domain Model Demo ===\n")
        demonstrate_deck(rules, args.seed)
        print()
        demonstrate_players(rules, args.seed, game_logger)
        print()
        demonstrate_capture()
        print("\nDemo complete.")
    except PistiError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        if game_logger:
            game_logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
