"""
Tests for hand evaluation.
"""

import itertools
import random

import pytest
from drawpoker.core.card import Card, Suit, parse_cards
from drawpoker.core.hand import (
    evaluate_hand, compare_hands, HandCategory,
    get_hand_category, get_hand_description,
)


def category_of(cards):
    return get_hand_category(evaluate_hand(cards))


class TestHandCategory:
    """Tests for hand category recognition."""

    def test_royal_flush(self, royal_flush):
        """Test royal flush recognition."""
        assert category_of(royal_flush) == HandCategory.ROYAL_FLUSH
        assert evaluate_hand(royal_flush) == pytest.approx(900.1413121110)

    def test_straight_flush(self, straight_flush):
        """Test straight flush recognition."""
        assert category_of(straight_flush) == HandCategory.STRAIGHT_FLUSH

    def test_wheel_straight_flush_is_not_royal(self):
        """A-2-3-4-5 suited holds an Ace but no King."""
        hand = parse_cards("Ah 2h 3h 4h 5h")
        assert category_of(hand) == HandCategory.STRAIGHT_FLUSH

    def test_four_of_a_kind(self):
        """Test four of a kind recognition."""
        hand = parse_cards("As Ah Ad Ac Ks")
        assert category_of(hand) == HandCategory.FOUR_OF_A_KIND

    def test_full_house(self):
        """Test full house recognition."""
        hand = parse_cards("As Ah Ad Kc Ks")
        assert category_of(hand) == HandCategory.FULL_HOUSE

    def test_flush(self):
        """Test flush recognition."""
        hand = parse_cards("As Ks Js 9s 2s")
        assert category_of(hand) == HandCategory.FLUSH

    def test_straight(self):
        """Test straight recognition."""
        hand = parse_cards("As Kh Qd Jc Ts")
        assert category_of(hand) == HandCategory.STRAIGHT

    def test_wheel_straight(self, wheel_straight):
        """Test wheel straight (A-2-3-4-5) recognition."""
        assert category_of(wheel_straight) == HandCategory.STRAIGHT

        desc = get_hand_description(wheel_straight)
        assert "Five high" in desc or "Wheel" in desc

    def test_three_of_a_kind(self, three_of_a_kind):
        """Test three of a kind recognition."""
        assert category_of(three_of_a_kind) == HandCategory.THREE_OF_A_KIND

    def test_two_pair(self, two_pair):
        """Test two pair recognition."""
        assert category_of(two_pair) == HandCategory.TWO_PAIR

    def test_one_pair(self, one_pair):
        """Test one pair recognition."""
        strength = evaluate_hand(one_pair)
        assert 100 <= strength < 200

    def test_high_card(self, ace_high):
        """A-9-8-7-6 has a gap between 9 and Ace, so no straight."""
        strength = evaluate_hand(ace_high)
        assert 0 <= strength < 1
        assert strength == pytest.approx(0.1409080706)


class TestInvalidHands:
    """Tests for hands that are not exactly five cards."""

    def test_none(self):
        assert evaluate_hand(None) == 0

    def test_empty(self):
        assert evaluate_hand([]) == 0

    def test_short_hand(self):
        assert evaluate_hand(parse_cards("As Ah Ad Ac")) == 0

    def test_long_hand(self):
        assert evaluate_hand(parse_cards("As Ah Ad Ac Ks Kh")) == 0

    def test_incomplete_description(self):
        assert get_hand_description([]) == "Incomplete hand"


class TestHandComparison:
    """Tests for comparing hands."""

    def test_category_order(self, royal_flush, straight_flush, three_of_a_kind, two_pair, one_pair, ace_high):
        """Every category outranks the one below it."""
        ladder = [
            royal_flush,
            straight_flush,
            parse_cards("2s 2h 2d 2c 3s"),
            parse_cards("2s 2h 2d 3c 3s"),
            parse_cards("2s 4s 6s 8s 9s"),
            parse_cards("2s 3h 4d 5c 6s"),
            three_of_a_kind,
            two_pair,
            one_pair,
            ace_high,
        ]
        strengths = [evaluate_hand(h) for h in ladder]
        assert strengths == sorted(strengths, reverse=True)
        assert [get_hand_category(s) for s in strengths] == sorted(HandCategory, reverse=True)

    def test_worst_hand_beats_best_lower_category(self):
        """The tie-breaker never lifts a hand into the next band."""
        lowest_pair = parse_cards("2s 2h 3d 4c 5s")
        best_high_card = parse_cards("As Kh Qd Jc 9s")
        assert compare_hands(lowest_pair, best_high_card) == -1

    def test_higher_pair_wins(self):
        """Higher pair beats lower pair with the same kickers."""
        pair_aces = parse_cards("As Ah Kd Qc Js")
        pair_kings = parse_cards("Ks Kh Qd Jc Ts")
        assert compare_hands(pair_aces, pair_kings) == -1

    def test_higher_high_card_wins(self):
        """Same category, higher top card wins."""
        king_high = parse_cards("Ks 9h 7d 4c 2s")
        queen_high = parse_cards("Qs 9h 7d 4c 2s")
        assert compare_hands(king_high, queen_high) == -1
        assert compare_hands(queen_high, king_high) == 1

    def test_tie(self):
        """Identical ranks in different suits tie."""
        hand1 = parse_cards("As Kh Qd Jc 9s")
        hand2 = parse_cards("Ah Kd Qc Js 9h")
        assert compare_hands(hand1, hand2) == 0


class TestOrderIndependence:
    """Card order never changes the score."""

    @pytest.mark.parametrize("hand_str", [
        "As 7d 6s 9s 8c",
        "7c 7d 3s 9s Qh",
        "Ks 4h 9c Kd 4s",
        "Ah 2h 3h 4h 5h",
    ])
    def test_permutations(self, hand_str):
        cards = parse_cards(hand_str)
        expected = evaluate_hand(cards)
        for perm in itertools.permutations(cards):
            assert evaluate_hand(list(perm)) == expected


class TestScoreRange:
    """Scores stay inside their bands."""

    def test_random_hands(self):
        deck = [Card(suit, number) for suit in Suit for number in range(1, 14)]
        rng = random.Random(7)
        for _ in range(500):
            strength = evaluate_hand(rng.sample(deck, 5))
            assert 0 <= strength < 901
            assert 0 <= strength - int(get_hand_category(strength)) < 1


class TestHandDescription:
    """Tests for hand description."""

    def test_royal_flush_description(self, royal_flush):
        assert get_hand_description(royal_flush) == "Royal Flush"

    def test_pair_description(self, one_pair):
        assert get_hand_description(one_pair) == "Pair of Sevens"

    def test_full_house_description(self):
        desc = get_hand_description(parse_cards("As Ah Ad Kc Ks"))
        assert desc == "Full House, Aces full of Kings"

    def test_high_card_description(self, ace_high):
        assert get_hand_description(ace_high) == "High Card, Ace"
