"""
Agent module - player identity and move-selection capabilities.
"""

from king_melee.agent.agent import (
    State,
    Player,
    Agent,
    NamedPlayer,
    is_agent,
    same_player,
)
from king_melee.agent.human import HumanAgent, parse_move

__all__ = [
    "State",
    "Player",
    "Agent",
    "NamedPlayer",
    "HumanAgent",
    "is_agent",
    "same_player",
    "parse_move",
]
