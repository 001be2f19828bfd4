"""
DrawPoker Core - Pure Python Five-Card Draw Hand Logic

This module contains card modelling, hand evaluation and the game
snapshot schema, without any engine or network dependencies.
"""

from drawpoker.core.card import Card, Suit, parse_cards
from drawpoker.core.hand import (
    HandCategory, HandMismatchError, evaluate_hand, compare_hands,
    get_hand_category, get_hand_description,
)
from drawpoker.core.rules import GamePhase, BettingConfig, FOLD, CHECK
from drawpoker.core.snapshot import GameSnapshot, PlayerInfoSchema, RoundStateSchema, CardSchema

__all__ = [
    "Card",
    "Suit",
    "parse_cards",
    "HandCategory",
    "HandMismatchError",
    "evaluate_hand",
    "compare_hands",
    "get_hand_category",
    "get_hand_description",
    "GamePhase",
    "BettingConfig",
    "FOLD",
    "CHECK",
    "GameSnapshot",
    "PlayerInfoSchema",
    "RoundStateSchema",
    "CardSchema",
]
