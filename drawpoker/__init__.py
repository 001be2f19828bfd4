"""
DrawPoker - Five-Card Draw Player

A deterministic automated player for a multi-round five-card draw game:
- Pure Python hand evaluation, draw selection and betting policy
- Pydantic validation of the engine's game snapshot
- A session object exposing the engine's start/bet/draw/end hooks

Usage:
    from drawpoker.core import Card, evaluate_hand
    from drawpoker.agents import RuleBasedPlayer
"""

__version__ = "0.1.0"

from drawpoker.core.card import Card, Suit
from drawpoker.core.hand import HandCategory, evaluate_hand
from drawpoker.core.snapshot import GameSnapshot
from drawpoker.agents.rule_based import RuleBasedPlayer

__all__ = [
    "Card",
    "Suit",
    "HandCategory",
    "evaluate_hand",
    "GameSnapshot",
    "RuleBasedPlayer",
    "__version__",
]
