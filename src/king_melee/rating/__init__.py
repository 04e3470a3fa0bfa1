"""
Rating module - multiplayer Elo over finished games.
"""

from king_melee.rating.elo import expected_score, points_to_transfer
from king_melee.rating.history import GameHistory

__all__ = [
    "GameHistory",
    "expected_score",
    "points_to_transfer",
]
