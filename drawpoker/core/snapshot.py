"""
Pydantic models for the game snapshot the engine passes to every hook.

The engine speaks camelCase (``minBetPoint``, ``currentRound``); the
models accept those keys as aliases as well as the snake_case field names.
Keys the player does not use are ignored.

Only the table-level fields are validated up front. Entries of the player
map are validated one at a time by ``get_player``, so a malformed or
masked opponent entry never affects this player's decisions.
"""

from typing import List, Optional, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

from drawpoker.core.card import Card, parse_suit
from drawpoker.core.rules import GamePhase


class CardSchema(BaseModel):
    """Card as dealt by the engine."""
    suit: str
    number: int = Field(ge=1, le=13, description="1 = Ace, 13 = King")

    @field_validator("suit")
    @classmethod
    def _known_suit(cls, value: str) -> str:
        parse_suit(value)
        return value

    def to_card(self) -> Card:
        return Card(parse_suit(self.suit), self.number)


class RoundStateSchema(BaseModel):
    """A player's state within the current round."""
    model_config = ConfigDict(populate_by_name=True)

    bet_point: Optional[int] = Field(default=None, alias="betPoint")
    first: Optional[int] = None
    second: Optional[int] = None
    action: Optional[str] = None
    cards: List[CardSchema] = []

    @field_validator("cards", mode="before")
    @classmethod
    def _missing_cards(cls, value: Any) -> Any:
        return [] if value is None else value

    def hand(self) -> List[Card]:
        """Cards as core Card objects, in dealt order."""
        return [c.to_card() for c in self.cards]


class PlayerInfoSchema(BaseModel):
    """Per-player entry of the snapshot's player map."""
    name: Optional[str] = None
    status: Optional[str] = None
    point: int = 0
    round: RoundStateSchema = Field(default_factory=RoundStateSchema)

    @field_validator("round", mode="before")
    @classmethod
    def _missing_round(cls, value: Any) -> Any:
        return {} if value is None else value


class GameSnapshot(BaseModel):
    """Read-only view of the game handed to each lifecycle hook."""
    model_config = ConfigDict(populate_by_name=True)

    phase: Optional[Union[GamePhase, str]] = None
    current_round: int = Field(default=0, alias="currentRound")
    order: List[str] = []
    pot: int = 0
    min_bet_point: int = Field(default=0, alias="minBetPoint")
    players: Dict[str, Any] = {}
    winner: Optional[str] = None
    total_round: Optional[int] = Field(default=None, alias="totalRound")
    initial_point: Optional[int] = Field(default=None, alias="initialPoint")
    fee: Optional[int] = None

    @field_validator("phase", mode="before")
    @classmethod
    def _known_phase(cls, value: Any) -> Any:
        # Unknown tags are kept as the raw string
        try:
            return GamePhase(value)
        except ValueError:
            return value

    @classmethod
    def coerce(cls, data: Union["GameSnapshot", Dict[str, Any]]) -> "GameSnapshot":
        """
        Return ``data`` as a GameSnapshot, validating plain dicts.

        Raises:
            pydantic.ValidationError: If a dict does not match the schema.
        """
        if isinstance(data, cls):
            return data
        return cls.model_validate(data)

    @property
    def phase_tag(self) -> Optional[str]:
        """The phase as the engine's tag string."""
        if isinstance(self.phase, GamePhase):
            return self.phase.value
        return self.phase

    def get_player(self, name: str) -> Optional[PlayerInfoSchema]:
        """
        Look up and validate a player's entry by name.

        Raises:
            pydantic.ValidationError: If the entry does not match the schema.
        """
        entry = self.players.get(name)
        if entry is None:
            return None
        return PlayerInfoSchema.model_validate(entry)

    def player_summaries(self) -> List[Dict[str, Any]]:
        """Name, status and point of every entry, without validating them."""
        summaries = []
        for key, entry in self.players.items():
            if isinstance(entry, BaseModel):
                entry = entry.model_dump()
            elif not isinstance(entry, dict):
                entry = {}
            summaries.append({
                "name": entry.get("name", key),
                "status": entry.get("status"),
                "point": entry.get("point"),
            })
        return summaries
