"""
Elo rating math.

Pure functions; GameHistory applies them to its rating table.
"""

from king_melee.core.types import ELO_SCALE, K_VALUE


def expected_score(current_rating: float, opponent_rating: float) -> float:
    """
    Expected score of a player rated `current_rating` against one rated
    `opponent_rating`, in [0, 1].
    """
    exponent = (opponent_rating - current_rating) / ELO_SCALE
    return 1.0 / (1.0 + 10.0 ** exponent)


def points_to_transfer(score: float, expected: float, k_value: float = K_VALUE) -> float:
    """Rating points the scorer gains (negative: loses) for one result."""
    return k_value * (score - expected)
