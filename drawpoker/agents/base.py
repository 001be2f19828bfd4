"""
Base Agent Interface for DrawPoker.

This module defines the abstract base class for all five-card draw players.
The engine drives a player through four hooks per round:

    start(snapshot)          round begins, cards dealt
    bet(snapshot) -> int     betting phase, -1 fold / 0 call / N raise
    draw(snapshot) -> list   draw phase, one bool per card (True = discard)
    end(snapshot)            round over, winner announced

Usage:
    class MyAgent(BaseAgent):
        def on_bet_request(self, snapshot):
            return 0

        def on_draw_request(self, snapshot):
            return [False] * 5
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Union

from pydantic import ValidationError

from drawpoker.agents.log import get_player_logger
from drawpoker.core.rules import FOLD
from drawpoker.core.snapshot import GameSnapshot

SnapshotLike = Union[GameSnapshot, Dict[str, Any]]


class BaseAgent(ABC):
    """
    Abstract base class for five-card draw players.

    The public hooks accept either a GameSnapshot or the engine's raw
    dict. A dict that fails validation, or an own player entry that
    fails validation when the subclass reads it, is logged and the hook
    degrades to folding, discarding nothing, or leaving the counters
    alone. Opponent entries are never validated.

    Attributes:
        id: Game identifier supplied by the engine
        name: Player name, used as the key in the snapshot's player map
        round: Current round number, updated at round start
        win: Rounds won so far in this game
        logger: Logger adapter keyed by (game ID, player name)
    """

    def __init__(
        self,
        game_id: str,
        name: str,
        logger: Optional[logging.LoggerAdapter] = None,
    ):
        """
        Initialize the agent.

        Args:
            game_id: Identifier of the game this agent plays in
            name: Player name as known to the engine
            logger: Optional logger; defaults to the per-player logger
        """
        self.id = game_id
        self.name = name
        self.round = 0
        self.win = 0
        self.logger = logger or get_player_logger(game_id, name)

        self.logger.info(f"Start game. ID: {self.id}")

    def formatted_log(self, text: str) -> str:
        """Prefix a log line with the current round."""
        return f"<Round: {self.round}>: {text}"

    def on_round_start(self, snapshot: GameSnapshot) -> None:
        """Record the new round number."""
        self.round = snapshot.current_round

    @abstractmethod
    def on_bet_request(self, snapshot: GameSnapshot) -> int:
        """
        Choose a bet.

        Returns:
            -1 to fold, 0 to check/call, N > 0 to add N points
        """
        pass

    @abstractmethod
    def on_draw_request(self, snapshot: GameSnapshot) -> List[bool]:
        """
        Choose cards to discard.

        Returns:
            One bool per card in hand, True meaning discard and redraw
        """
        pass

    def on_round_end(self, snapshot: GameSnapshot) -> None:
        """Count the round if this agent won it."""
        if snapshot.winner == self.name:
            self.win += 1

    # Engine entry points

    def start(self, data: SnapshotLike) -> None:
        snapshot = self._coerce(data, "start")
        if snapshot is not None:
            self.on_round_start(snapshot)

    def bet(self, data: SnapshotLike) -> int:
        snapshot = self._coerce(data, "bet")
        if snapshot is None:
            return FOLD
        try:
            return self.on_bet_request(snapshot)
        except ValidationError as e:
            self._log_invalid("bet", e)
            return FOLD

    def draw(self, data: SnapshotLike) -> List[bool]:
        snapshot = self._coerce(data, "draw")
        if snapshot is None:
            return []
        try:
            return self.on_draw_request(snapshot)
        except ValidationError as e:
            self._log_invalid("draw", e)
            return []

    def end(self, data: SnapshotLike) -> None:
        snapshot = self._coerce(data, "end")
        if snapshot is not None:
            self.on_round_end(snapshot)

    def _coerce(self, data: SnapshotLike, hook: str) -> Optional[GameSnapshot]:
        try:
            return GameSnapshot.coerce(data)
        except ValidationError as e:
            self._log_invalid(hook, e)
            return None

    def _log_invalid(self, hook: str, error: ValidationError) -> None:
        self.logger.warning(
            self.formatted_log(f"Invalid snapshot in {hook}: {error.error_count()} error(s)")
        )
        self.logger.debug(self.formatted_log(str(error)))

    def test(self) -> Dict[str, Any]:
        """Snapshot of the agent's identity and counters, for inspection."""
        return {
            "id": self.id,
            "name": self.name,
            "round": self.round,
            "win": self.win,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.id}, {self.name})"
