"""
Core types, constants, and data structures.

This module contains the fundamental constants used throughout the engine:
- Board dimensions
- Draw countdown
- Rating constants (K factor, initial rating)
- Standing: one row of a rating table
"""

from __future__ import annotations

from typing import NamedTuple


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                            BOARD GEOMETRY                                   ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

BOARD_WIDTH = 8
BOARD_HEIGHT = 8

# Transitions without an elimination before the game is drawn
TURNS_UNTIL_DRAW_DEFAULT = 50

# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                          MULTIPLAYER ELO                                    ║
# ║                                                                             ║
# ║  K_VALUE:        maximum points moved by a single pairwise result           ║
# ║  INITIAL_RATING: rating of a player that has never been rated               ║
# ║  ELO_SCALE:      rating gap giving 10:1 expected odds                       ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

K_VALUE = 16.0
INITIAL_RATING = 500.0
ELO_SCALE = 400.0

# Pairwise scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5


class Standing(NamedTuple):
    """One player's row in a rating table."""

    name: str
    rating: float = INITIAL_RATING
    wins: float = 0.0

    @property
    def rating_delta(self) -> float:
        """Rating gained (or lost) relative to the initial rating."""
        return self.rating - INITIAL_RATING
