"""
Core module - geometry value types, constants, and hashing.

This module provides the building blocks used throughout the engine.
"""

from king_melee.core.types import (
    Standing,
    BOARD_WIDTH,
    BOARD_HEIGHT,
    TURNS_UNTIL_DRAW_DEFAULT,
    K_VALUE,
    INITIAL_RATING,
    ELO_SCALE,
    WIN_SCORE,
    DRAW_SCORE,
)
from king_melee.core.geometry import Delta, Position, Move
from king_melee.core.hashing import hash_board

__all__ = [
    # Types
    "Standing",
    "Delta",
    "Position",
    "Move",
    # Constants
    "BOARD_WIDTH",
    "BOARD_HEIGHT",
    "TURNS_UNTIL_DRAW_DEFAULT",
    "K_VALUE",
    "INITIAL_RATING",
    "ELO_SCALE",
    "WIN_SCORE",
    "DRAW_SCORE",
    # Functions
    "hash_board",
]
