"""
Per-player logging.

Each player logs through a ``logging.LoggerAdapter`` keyed by game ID and
player name, so an engine running many games can route or filter player
output with ordinary logging handlers and filters.
"""

import logging
from typing import Any, MutableMapping, Tuple


PLAYER_LOGGER_NAME = "drawpoker.player"


class PlayerLogAdapter(logging.LoggerAdapter):
    """
    Logger adapter that stamps every record with the player's key.

    The key is exposed on each record as ``group``, ``game_id`` and
    ``player_name`` attributes.
    """

    def __init__(self, logger: logging.Logger, game_id: str, player_name: str, group: str = "player"):
        super().__init__(logger, {"group": group, "game_id": game_id, "player_name": player_name})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return f"[{self.extra['game_id']}:{self.extra['player_name']}] {msg}", kwargs


def get_player_logger(game_id: str, player_name: str) -> PlayerLogAdapter:
    """Get the logger for one player in one game."""
    return PlayerLogAdapter(logging.getLogger(PLAYER_LOGGER_NAME), game_id, player_name)
