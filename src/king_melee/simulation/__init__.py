"""
Simulation module - driving games between agents.
"""

from king_melee.simulation.runner import take_turn, play_game, run_series

__all__ = [
    "take_turn",
    "play_game",
    "run_series",
]
