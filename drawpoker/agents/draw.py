"""
Draw selection: which cards to throw back for replacement.

The policy keeps whatever made the hand and redraws the rest:
- Straight or better: stand pat
- Three of a kind: keep the trips, draw 2
- Two pair: keep both pairs, draw 1
- One pair: keep the pair, draw 3
- Nothing: keep the highest card, draw 4
"""

from __future__ import annotations
from typing import List, Sequence
from collections import Counter

from drawpoker.core.card import Card
from drawpoker.core.hand import HandMismatchError
from drawpoker.core.rules import (
    KEEP_ALL_THRESHOLD, THREE_OF_A_KIND_THRESHOLD,
    TWO_PAIR_THRESHOLD, ONE_PAIR_THRESHOLD,
)


def select_draws(cards: Sequence[Card], strength: float) -> List[bool]:
    """
    Decide which cards to discard.

    Args:
        cards: The hand, in dealt order
        strength: The hand's score from ``evaluate_hand``

    Returns:
        One bool per card, aligned with ``cards``. True means discard.

    Raises:
        HandMismatchError: If the hand lacks the rank group its strength
            implies (for example a one-pair score on a hand with no pair).
    """
    if strength >= KEEP_ALL_THRESHOLD:
        return [False] * len(cards)

    if strength >= THREE_OF_A_KIND_THRESHOLD:
        trips = _rank_with_count(cards, 3)
        return [c.rank != trips for c in cards]

    if strength >= TWO_PAIR_THRESHOLD:
        kicker = _rank_with_count(cards, 1)
        return [c.rank == kicker for c in cards]

    if strength >= ONE_PAIR_THRESHOLD:
        pair = _rank_with_count(cards, 2)
        return [c.rank != pair for c in cards]

    return keep_highest_card(cards)


def keep_highest_card(cards: Sequence[Card]) -> List[bool]:
    """Discard everything except the first card of the highest rank."""
    if not cards:
        return []

    max_rank = max(c.rank for c in cards)
    decision = []
    kept = False
    for card in cards:
        if card.rank == max_rank and not kept:
            kept = True
            decision.append(False)
        else:
            decision.append(True)
    return decision


def _rank_with_count(cards: Sequence[Card], count: int) -> int:
    """Get the first rank (in hand order) that appears ``count`` times."""
    rank_counts = Counter(c.rank for c in cards)
    for rank, c in rank_counts.items():
        if c == count:
            return rank
    raise HandMismatchError(f"No rank with count {count} in {list(cards)}")
