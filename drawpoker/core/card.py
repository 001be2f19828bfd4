"""
Card representation for five-card draw.

The game engine describes a card as ``{"suit": "Hearts", "number": 1}``
where ``number`` runs 1-13 and 1 is the Ace. For hand evaluation the Ace
plays high, so every card also exposes a ``rank`` from 2 to 14.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping
from enum import IntEnum

from drawpoker.core.rules import ACE_HIGH_RANK


class Suit(IntEnum):
    """Card suits with integer values for fast comparison."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


# Names used by the game engine
SUIT_NAMES = {
    Suit.CLUBS: "Clubs",
    Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts",
    Suit.SPADES: "Spades",
}

SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

NUMBER_CHARS = {
    1: "A",
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "T",
    11: "J",
    12: "Q",
    13: "K",
}

# Reverse mappings
NAME_TO_SUIT = {v.lower(): k for k, v in SUIT_NAMES.items()}
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
CHAR_TO_NUMBER = {v: k for k, v in NUMBER_CHARS.items()}
CHAR_TO_NUMBER["10"] = 10  # Also accept "10"


def number_to_rank(number: int) -> int:
    """Map an engine card number (1-13) to an Ace-high rank (2-14)."""
    return ACE_HIGH_RANK if number == 1 else number


def parse_suit(value: Any) -> Suit:
    """
    Parse a suit from an engine name, a short char, a symbol or an int.

    Raises:
        ValueError: If the value is not a known suit.
    """
    if isinstance(value, Suit):
        return value
    if isinstance(value, int):
        return Suit(value)
    text = str(value).strip()
    if text.lower() in NAME_TO_SUIT:
        return NAME_TO_SUIT[text.lower()]
    if text.lower() in CHAR_TO_SUIT:
        return CHAR_TO_SUIT[text.lower()]
    if text in SYMBOL_TO_SUIT:
        return SYMBOL_TO_SUIT[text]
    raise ValueError(f"Invalid suit: {value}")


class Card:
    """
    A playing card as dealt by the engine.

    Cards can be created from:
    - Suit and number: Card(Suit.SPADES, 1)
    - Engine dict: Card.from_dict({"suit": "Spades", "number": 1})
    - String notation: Card.from_string("As") or Card.from_string("A♠")

    ``number`` keeps the engine's 1-13 numbering; ``rank`` is the
    Ace-high value used for evaluation.
    """

    __slots__ = ("suit", "number", "rank")

    def __init__(self, suit: Suit, number: int):
        if not 1 <= int(number) <= 13:
            raise ValueError(f"Card number must be 1-13, got {number}")
        self.suit = parse_suit(suit)
        self.number = int(number)
        self.rank = number_to_rank(self.number)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Card:
        """Create a card from the engine's ``{"suit", "number"}`` dict."""
        try:
            return cls(parse_suit(data["suit"]), data["number"])
        except KeyError as e:
            raise ValueError(f"Card dict missing key: {e}") from e

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "Td", "2c" (number + suit char)
        - "10h" (ten written out)
        - "A♠", "K♥", "T♦", "2♣" (number + suit symbol)
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        number_part, suit_part = s[:-1].upper(), s[-1]

        if number_part not in CHAR_TO_NUMBER:
            raise ValueError(f"Invalid number: {number_part}")

        return cls(parse_suit(suit_part), CHAR_TO_NUMBER[number_part])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self.suit == other.suit and self.number == other.number
        return False

    def __hash__(self) -> int:
        return self.number * 4 + int(self.suit)

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self.rank < other.rank

    def __repr__(self) -> str:
        return f"Card({NUMBER_CHARS[self.number]}{SUIT_CHARS[self.suit]})"

    def __str__(self) -> str:
        return f"{NUMBER_CHARS[self.number]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{NUMBER_CHARS[self.number]}{SUIT_CHARS[self.suit]}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the engine's dict shape."""
        return {"suit": SUIT_NAMES[self.suit], "number": self.number}


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple space-separated cards from a string.

    Example:
        parse_cards("As 7d 6s 9s 8c")
    """
    return [Card.from_string(s) for s in cards_str.split()]
