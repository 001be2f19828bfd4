"""
Betting policy for the rule-based player.

Returns an integer bet decision:
    -1: fold
     0: check, or call the current bet without raising
    >0: points to add on top of the call
"""

from __future__ import annotations
import math
from typing import Optional

from drawpoker.core.rules import BettingConfig, FOLD, CHECK
from drawpoker.core.snapshot import GameSnapshot, PlayerInfoSchema


def call_gap(snapshot: GameSnapshot, self_state: PlayerInfoSchema) -> int:
    """Points this player still needs to put in to match the minimum bet."""
    return snapshot.min_bet_point - (self_state.round.bet_point or 0)


def decide_bet(
    snapshot: GameSnapshot,
    self_state: Optional[PlayerInfoSchema],
    strength: float,
    config: Optional[BettingConfig] = None,
) -> int:
    """
    Decide how many points to bet.

    Args:
        snapshot: Current game snapshot
        self_state: This player's entry in the snapshot, or None if the
            engine did not include it
        strength: Hand score from ``evaluate_hand``
        config: Thresholds; defaults to ``BettingConfig()``

    Returns:
        Bet decision (-1 fold, 0 check/call, N raise by N)
    """
    if self_state is None:
        return FOLD

    config = config or BettingConfig()
    pot = snapshot.pot
    min_bet = snapshot.min_bet_point

    gap = call_gap(snapshot, self_state)
    stack = self_state.point - gap  # Points left after calling

    # Strong hand (two pair or better)
    if strength >= config.strong_threshold:
        if min_bet == 0:
            return math.floor(pot * config.open_pot_fraction)
        # Never raise past what the stack can cover
        return min(stack, min_bet * config.raise_multiplier)

    # Medium hand (one pair)
    if strength >= config.medium_threshold:
        if min_bet > pot * config.medium_fold_pot_fraction:
            return FOLD
        return CHECK

    # Weak hand
    if min_bet == 0:
        return CHECK
    if gap < pot * config.speculative_call_pot_fraction:
        return CHECK
    return FOLD
