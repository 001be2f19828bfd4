"""
Pytest configuration and shared fixtures for DrawPoker tests.
"""

import copy

import pytest
from drawpoker.core.card import Card, Suit
from drawpoker.agents.rule_based import RuleBasedPlayer


GAME_DATA = {
    "currentRound": 1,
    "phase": "start",
    "order": ["Player1", "Player2", "Player3", "team2"],
    "pot": 0,
    "minBetPoint": 0,
    "players": {
        "Player1": {
            "name": "Player1",
            "status": "active",
            "point": 37600,
            "round": {"betPoint": 0, "first": 0, "second": 0, "action": "bet", "cards": []},
        },
        "Player2": {
            "name": "Player2",
            "status": "active",
            "point": 17600,
            "round": {"betPoint": 0, "first": 0, "second": 0, "action": "bet", "cards": []},
        },
        "Player3": {
            "name": "Player3",
            "status": "active",
            "point": 24800,
            "round": {"betPoint": 0, "first": 0, "second": 0, "action": "bet", "cards": []},
        },
        "team2": {
            "name": "team2",
            "status": "active",
            "point": 20000,
            "round": {"betPoint": 0, "first": 0, "second": 0, "action": None, "cards": []},
        },
    },
    "totalRound": 100,
    "initialPoint": 20000,
    "fee": 200,
}

ACE_HIGH_CARDS = [
    {"suit": "Clubs", "number": 1},
    {"suit": "Diamonds", "number": 7},
    {"suit": "Spades", "number": 6},
    {"suit": "Spades", "number": 9},
    {"suit": "Clubs", "number": 8},
]


def make_game_data(cards=None, **overrides):
    """Build an engine payload with ``team2`` holding ``cards``."""
    data = copy.deepcopy(GAME_DATA)
    if cards is not None:
        data["players"]["team2"]["round"]["cards"] = [
            c.to_dict() if isinstance(c, Card) else c for c in cards
        ]
    data.update(overrides)
    return data


@pytest.fixture
def game_data():
    """Engine payload at round start, with no cards dealt."""
    return make_game_data()


@pytest.fixture
def game_data_factory():
    """Factory for engine payloads: ``game_data_factory(cards, pot=..., ...)``."""
    return make_game_data


@pytest.fixture
def player():
    """A fresh rule-based player named team2."""
    return RuleBasedPlayer("1", "team2")


@pytest.fixture
def ace_high():
    """A-9-8-7-6 offsuit: no pair, no straight, no flush."""
    return [Card.from_dict(c) for c in ACE_HIGH_CARDS]


@pytest.fixture
def one_pair():
    """Pair of sevens with 3, 9, Q kickers."""
    return [
        Card(Suit.CLUBS, 7),
        Card(Suit.DIAMONDS, 7),
        Card(Suit.SPADES, 3),
        Card(Suit.SPADES, 9),
        Card(Suit.HEARTS, 12),
    ]


@pytest.fixture
def two_pair():
    """Kings and fours with a nine kicker."""
    return [
        Card(Suit.SPADES, 13),
        Card(Suit.HEARTS, 4),
        Card(Suit.CLUBS, 9),
        Card(Suit.DIAMONDS, 13),
        Card(Suit.SPADES, 4),
    ]


@pytest.fixture
def three_of_a_kind():
    """Three queens with 2 and 5."""
    return [
        Card(Suit.HEARTS, 2),
        Card(Suit.SPADES, 12),
        Card(Suit.CLUBS, 12),
        Card(Suit.HEARTS, 5),
        Card(Suit.DIAMONDS, 12),
    ]


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Suit.SPADES, 1),
        Card(Suit.SPADES, 13),
        Card(Suit.SPADES, 12),
        Card(Suit.SPADES, 11),
        Card(Suit.SPADES, 10),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Suit.HEARTS, 9),
        Card(Suit.HEARTS, 8),
        Card(Suit.HEARTS, 7),
        Card(Suit.HEARTS, 6),
        Card(Suit.HEARTS, 5),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Suit.SPADES, 1),
        Card(Suit.HEARTS, 2),
        Card(Suit.DIAMONDS, 3),
        Card(Suit.CLUBS, 4),
        Card(Suit.SPADES, 5),
    ]
