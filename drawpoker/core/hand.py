"""
Hand Evaluation for Five-Card Draw.

This module scores exactly 5 cards as a single float so hands can be
compared with ordinary ``<`` and ``>``. Higher is better.

The score has two parts:
- A category band in multiples of 100 (0 = high card ... 900 = royal flush)
- A tie-breaker fraction below 1.0 built from the ranks, highest first

Hand Rankings (best to worst):
1. Royal Flush: A♠ K♠ Q♠ J♠ T♠                      900
2. Straight Flush: 5 consecutive cards of same suit   800
3. Four of a Kind: 4 cards of same rank               700
4. Full House: 3 of a kind + pair                     600
5. Flush: 5 cards of same suit                        500
6. Straight: 5 consecutive cards                      400
7. Three of a Kind: 3 cards of same rank              300
8. Two Pair: 2 different pairs                        200
9. One Pair: 2 cards of same rank                     100
10. High Card: No made hand                             0

Note: Ace can be low in A-2-3-4-5 straight (wheel).
"""

from __future__ import annotations
from typing import List, Optional, Sequence
from enum import IntEnum
from collections import Counter

from drawpoker.core.card import Card
from drawpoker.core.rules import HAND_SIZE, ACE_HIGH_RANK, KING_RANK, WHEEL_RANKS


class HandCategory(IntEnum):
    """Hand categories mapped to their score band."""
    ROYAL_FLUSH = 900
    STRAIGHT_FLUSH = 800
    FOUR_OF_A_KIND = 700
    FULL_HOUSE = 600
    FLUSH = 500
    STRAIGHT = 400
    THREE_OF_A_KIND = 300
    TWO_PAIR = 200
    ONE_PAIR = 100
    HIGH_CARD = 0


# Hand category names for display
HAND_CATEGORY_NAMES = {
    HandCategory.ROYAL_FLUSH: "Royal Flush",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}


class HandMismatchError(ValueError):
    """Raised when a hand does not contain the rank group its strength implies."""


def evaluate_hand(cards: Optional[Sequence[Card]]) -> float:
    """
    Evaluate a five-card hand.

    Args:
        cards: Exactly 5 Card objects. Anything else (None, an empty
            hand during setup, a partial hand) scores 0.

    Returns:
        Category band plus tie-breaker fraction. The result does not
        depend on the order of the cards.
    """
    if not cards or len(cards) != HAND_SIZE:
        return 0

    ranks = sorted(c.rank for c in cards)
    suits = [c.suit for c in cards]

    is_flush = len(set(suits)) == 1
    is_straight = _is_straight(ranks)

    counts = sorted(Counter(ranks).values(), reverse=True)

    if is_straight and is_flush and ACE_HIGH_RANK in ranks and KING_RANK in ranks:
        category = HandCategory.ROYAL_FLUSH
    elif is_straight and is_flush:
        category = HandCategory.STRAIGHT_FLUSH
    elif counts[0] == 4:
        category = HandCategory.FOUR_OF_A_KIND
    elif counts[0] == 3 and counts[1] == 2:
        category = HandCategory.FULL_HOUSE
    elif is_flush:
        category = HandCategory.FLUSH
    elif is_straight:
        category = HandCategory.STRAIGHT
    elif counts[0] == 3:
        category = HandCategory.THREE_OF_A_KIND
    elif counts[0] == 2 and counts[1] == 2:
        category = HandCategory.TWO_PAIR
    elif counts[0] == 2:
        category = HandCategory.ONE_PAIR
    else:
        category = HandCategory.HIGH_CARD

    return int(category) + _tie_breaker(ranks)


def _is_straight(ranks: List[int]) -> bool:
    """Check if ascending ranks form a straight (wheel included)."""
    if ranks == WHEEL_RANKS:
        return True
    return all(rank == ranks[i - 1] + 1 for i, rank in enumerate(ranks) if i > 0)


def _tie_breaker(ranks: List[int]) -> float:
    """
    Encode ascending ranks as a fraction, highest rank first.

    Each rank takes two decimal digits, so [6, 7, 8, 9, 14] becomes
    0.1409080706. Ranks never exceed 14, which keeps the value below 1.0.
    """
    digits = "".join(f"{r:02d}" for r in reversed(ranks))
    return float(f"0.{digits}")


def get_hand_category(strength: float) -> HandCategory:
    """Get the category band of a strength score."""
    band = int(strength // 100) * 100
    try:
        return HandCategory(band)
    except ValueError:
        return HandCategory.HIGH_CARD


def compare_hands(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
    """
    Compare two hands.

    Returns:
        -1 if cards1 wins, 1 if cards2 wins, 0 if tie
    """
    strength1 = evaluate_hand(cards1)
    strength2 = evaluate_hand(cards2)

    if strength1 > strength2:
        return -1  # cards1 wins (higher strength = better)
    elif strength1 < strength2:
        return 1   # cards2 wins
    else:
        return 0   # tie


def get_hand_description(cards: Optional[Sequence[Card]]) -> str:
    """Get a human-readable description of the hand."""
    if not cards or len(cards) != HAND_SIZE:
        return "Incomplete hand"

    category = get_hand_category(evaluate_hand(cards))
    base_name = HAND_CATEGORY_NAMES[category]
    rank_counts = Counter(c.rank for c in cards)

    if category == HandCategory.ROYAL_FLUSH:
        return base_name
    elif category in (HandCategory.STRAIGHT_FLUSH, HandCategory.STRAIGHT):
        ranks = sorted(rank_counts)
        if ranks == WHEEL_RANKS:
            return f"{base_name}, Five high (Wheel)"
        return f"{base_name}, {_rank_name(ranks[-1])} high"
    elif category in (HandCategory.FOUR_OF_A_KIND, HandCategory.THREE_OF_A_KIND):
        return f"{base_name}, {_rank_name(rank_counts.most_common(1)[0][0])}s"
    elif category == HandCategory.FULL_HOUSE:
        trips = max(rank_counts, key=rank_counts.get)
        pair = min(rank_counts, key=rank_counts.get)
        return f"Full House, {_rank_name(trips)}s full of {_rank_name(pair)}s"
    elif category == HandCategory.TWO_PAIR:
        pairs = sorted([r for r, c in rank_counts.items() if c == 2], reverse=True)
        return f"Two Pair, {_rank_name(pairs[0])}s and {_rank_name(pairs[1])}s"
    elif category == HandCategory.ONE_PAIR:
        return f"Pair of {_rank_name(rank_counts.most_common(1)[0][0])}s"
    elif category == HandCategory.FLUSH:
        return f"Flush, {_rank_name(max(rank_counts))} high"
    else:
        return f"{base_name}, {_rank_name(max(rank_counts))}"


def _rank_name(rank: int) -> str:
    """Get the name of an Ace-high rank."""
    names = {
        2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six",
        7: "Seven", 8: "Eight", 9: "Nine", 10: "Ten",
        11: "Jack", 12: "Queen", 13: "King", 14: "Ace",
    }
    return names[rank]
