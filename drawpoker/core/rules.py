"""
Five-Card Draw Rules and Constants.

The engine runs each round as a fixed sequence of phases:

1. start: Five cards are dealt to every player.
2. bet-1: First betting round.
3. draw-1: Each player may discard and redraw any of their cards.
4. bet-2 / draw-2 / bet-3: Further betting and drawing rounds.
5. finished: The winner is announced.

A bet decision is an integer: -1 folds, 0 checks or calls, and a
positive number adds that many points on top of the call.
"""

from enum import Enum
from dataclasses import dataclass


class GamePhase(Enum):
    """Phases of a five-card draw round, as tagged by the engine."""
    START = "start"
    BET_1 = "bet-1"
    DRAW_1 = "draw-1"
    BET_2 = "bet-2"
    DRAW_2 = "draw-2"
    BET_3 = "bet-3"
    FINISHED = "finished"


# Bet decision codes
FOLD = -1
CHECK = 0

# Hand evaluation
HAND_SIZE = 5
ACE_HIGH_RANK = 14
KING_RANK = 13
WHEEL_RANKS = [2, 3, 4, 5, ACE_HIGH_RANK]  # A-2-3-4-5 straight

# Draw thresholds (strength bands)
KEEP_ALL_THRESHOLD = 400
THREE_OF_A_KIND_THRESHOLD = 300
TWO_PAIR_THRESHOLD = 200
ONE_PAIR_THRESHOLD = 100


@dataclass
class BettingConfig:
    """
    Tunable thresholds for the betting policy.

    Attributes:
        strong_threshold: Strength at which the player bets or raises
        medium_threshold: Strength at which the player calls moderate bets
        open_pot_fraction: Share of the pot bet when nobody has bet yet
        raise_multiplier: Raise size relative to the current minimum bet
        medium_fold_pot_fraction: Medium hands fold when the minimum bet
            exceeds this share of the pot
        speculative_call_pot_fraction: Weak hands still call when the call
            gap is below this share of the pot
    """
    strong_threshold: int = TWO_PAIR_THRESHOLD
    medium_threshold: int = ONE_PAIR_THRESHOLD
    open_pot_fraction: float = 0.5
    raise_multiplier: int = 2
    medium_fold_pot_fraction: float = 0.5
    speculative_call_pot_fraction: float = 0.1
