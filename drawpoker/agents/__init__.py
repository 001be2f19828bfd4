"""
DrawPoker Agents - Player Decision Logic

This module provides the base agent interface, the pure draw and
betting policies, and the rule-based player that combines them.
"""

from drawpoker.agents.base import BaseAgent
from drawpoker.agents.betting import decide_bet
from drawpoker.agents.draw import select_draws
from drawpoker.agents.rule_based import RuleBasedPlayer

__all__ = ["BaseAgent", "RuleBasedPlayer", "decide_bet", "select_draws"]
