"""
Configuration defaults.
"""

from typing import Optional

from king_melee.core.types import INITIAL_RATING, K_VALUE, TURNS_UNTIL_DRAW_DEFAULT


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_MAX_TURNS = 1000
DEFAULT_MAX_ILLEGAL_ATTEMPTS = 3
DEFAULT_GAMES = 1


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


class Config:
    """Engine and series configuration with sensible defaults."""

    def __init__(
        self,
        turns_until_draw: int = TURNS_UNTIL_DRAW_DEFAULT,
        k_value: float = K_VALUE,
        initial_rating: float = INITIAL_RATING,
        max_turns: int = DEFAULT_MAX_TURNS,
        max_illegal_attempts: int = DEFAULT_MAX_ILLEGAL_ATTEMPTS,
        games: int = DEFAULT_GAMES,
        seed: Optional[int] = None,
    ):
        _require_positive("turns_until_draw", turns_until_draw)
        _require_positive("k_value", k_value)
        _require_positive("max_turns", max_turns)
        _require_positive("max_illegal_attempts", max_illegal_attempts)
        _require_positive("games", games)

        self.turns_until_draw = turns_until_draw
        self.k_value = k_value
        self.initial_rating = initial_rating
        self.max_turns = max_turns
        self.max_illegal_attempts = max_illegal_attempts
        self.games = games
        self.seed = seed

    def __repr__(self) -> str:
        return (
            f"Config(turns_until_draw={self.turns_until_draw}, k_value={self.k_value}, "
            f"initial_rating={self.initial_rating}, max_turns={self.max_turns}, "
            f"max_illegal_attempts={self.max_illegal_attempts}, games={self.games}, "
            f"seed={self.seed})"
        )


# Default configuration
DEFAULT_CONFIG = Config()
