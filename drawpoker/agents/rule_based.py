"""
Rule-Based Player Implementation.

A deterministic player that scores its hand, draws toward whatever it
already holds and sizes its bets from the hand's strength band.
"""

import json
import logging
from typing import List, Optional

from drawpoker.agents.base import BaseAgent
from drawpoker.agents.betting import decide_bet, call_gap
from drawpoker.agents.draw import select_draws, keep_highest_card
from drawpoker.core.hand import HandMismatchError, evaluate_hand
from drawpoker.core.rules import BettingConfig, FOLD
from drawpoker.core.snapshot import GameSnapshot


class RuleBasedPlayer(BaseAgent):
    """
    Player driven by fixed strength thresholds.

    - Two pair or better: open for half the pot, or raise to twice the
      minimum bet (capped by the stack)
    - One pair: call unless the bet is more than half the pot
    - Nothing: check, or call only when the call is cheap

    The only state kept between hooks is the round and win counters.
    """

    def __init__(
        self,
        game_id: str,
        name: str,
        logger: Optional[logging.LoggerAdapter] = None,
        config: Optional[BettingConfig] = None,
    ):
        """
        Initialize the player.

        Args:
            game_id: Identifier of the game
            name: Player name
            logger: Optional logger adapter
            config: Betting thresholds; defaults to ``BettingConfig()``
        """
        super().__init__(game_id, name, logger)
        self.config = config or BettingConfig()

    def on_round_start(self, snapshot: GameSnapshot) -> None:
        super().on_round_start(snapshot)
        self.logger.info(self.formatted_log("Round start."))

        for player in snapshot.player_summaries():
            self.logger.debug(
                self.formatted_log(
                    f"StartRound. {player['name']} info. status: {player['status']}, point: {player['point']}"
                )
            )

    def on_bet_request(self, snapshot: GameSnapshot) -> int:
        me = snapshot.get_player(self.name)
        if me is None:
            self.logger.warning(self.formatted_log("Own state missing from snapshot, folding."))
            return FOLD

        cards = me.round.hand()
        strength = evaluate_hand(cards)
        self.logger.info(
            self.formatted_log(f"My hand: {_cards_json(cards)}, Strength: {strength:.2f}")
        )

        decision = decide_bet(snapshot, me, strength, self.config)
        if strength >= self.config.strong_threshold and snapshot.min_bet_point > 0:
            stack = me.point - call_gap(snapshot, me)
            if stack < snapshot.min_bet_point * self.config.raise_multiplier:
                self.logger.debug(self.formatted_log(f"Raise capped by stack to {decision}."))
        return decision

    def on_draw_request(self, snapshot: GameSnapshot) -> List[bool]:
        me = snapshot.get_player(self.name)
        cards = me.round.hand() if me is not None else []
        strength = evaluate_hand(cards)

        try:
            decision = select_draws(cards, strength)
        except HandMismatchError as e:
            self.logger.warning(self.formatted_log(f"{e}. Keeping the highest card."))
            decision = keep_highest_card(cards)

        self.logger.info(
            self.formatted_log(
                f"Phase: {snapshot.phase_tag}. My hand strength: {strength:.2f}. "
                f"Draw decision: {json.dumps(decision)}"
            )
        )
        return decision

    def on_round_end(self, snapshot: GameSnapshot) -> None:
        self.logger.info(self.formatted_log(f"Round end. winner: {snapshot.winner}"))
        super().on_round_end(snapshot)
        if snapshot.winner == self.name:
            self.logger.info(self.formatted_log(f"I won! Total wins: {self.win}"))


def _cards_json(cards) -> str:
    return json.dumps([c.to_dict() for c in cards])
