"""
DrawPoker - Snapshot Replay Script

Feeds one engine snapshot through a rule-based player's four hooks and
prints what the player decided.

Usage:
    python -m drawpoker SNAPSHOT.json [--name NAME] [--game-id ID] [--log-level LEVEL]
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from drawpoker.agents.rule_based import RuleBasedPlayer
from drawpoker.core.hand import evaluate_hand, get_hand_description
from drawpoker.core.snapshot import GameSnapshot

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Replay a game snapshot through the DrawPoker player")
    parser.add_argument("snapshot", help="Path to a JSON game snapshot")
    parser.add_argument("--name", help="Player name (defaults to the last player in the snapshot's order)")
    parser.add_argument("--game-id", default="cli", help="Game ID used for logging")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        with open(args.snapshot, encoding="utf-8") as f:
            snapshot = GameSnapshot.coerce(json.load(f))
    except (OSError, ValueError) as e:
        # ValidationError and JSONDecodeError are both ValueErrors
        kind = "Invalid snapshot" if isinstance(e, ValidationError) else "Cannot read snapshot"
        logger.error(f"{kind}: {args.snapshot}: {e}")
        print(f"{kind}: {args.snapshot}", file=sys.stderr)
        return 2

    name = args.name or (snapshot.order[-1] if snapshot.order else None)
    if name is None:
        print("No player name given and snapshot has no order", file=sys.stderr)
        return 2

    player = RuleBasedPlayer(args.game_id, name)
    try:
        me = snapshot.get_player(name)
    except ValidationError as e:
        logger.warning(f"Invalid entry for {name}: {e.error_count()} error(s)")
        me = None
    cards = me.round.hand() if me is not None else []

    player.start(snapshot)
    bet = player.bet(snapshot)
    draw = player.draw(snapshot)
    player.end(snapshot)

    summary = {
        "strength": evaluate_hand(cards),
        "description": get_hand_description(cards),
        "bet": bet,
        "draw": draw,
        "session": player.test(),
    }
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
