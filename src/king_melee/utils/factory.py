"""
Factory functions for creating games and rating histories.
"""

import random
from typing import List, Optional, Sequence, Set

from king_melee.agent.agent import Player
from king_melee.core.geometry import Position
from king_melee.core.types import BOARD_HEIGHT, BOARD_WIDTH
from king_melee.games.board import Board
from king_melee.games.game_state import GameState
from king_melee.games.pieces import Piece, PieceType
from king_melee.rating.history import GameHistory
from king_melee.utils.config import DEFAULT_CONFIG, Config


def create_game(
    players: Sequence[Player],
    rng: Optional[random.Random] = None,
    config: Optional[Config] = None,
) -> GameState:
    """
    Create a game with one king per player on distinct random squares.

    Args:
        players: Players in move order (first moves first)
        rng: Random source for placement (seed it for reproducible setups)
        config: Supplies the draw countdown

    Returns:
        Initial GameState
    """
    config = config or DEFAULT_CONFIG
    rng = rng or random.Random(config.seed)

    names = [p.name for p in players]
    if len(set(names)) != len(names):
        raise ValueError(f"Player names must be unique: {names}")
    if len(players) < 2:
        raise ValueError(f"A game needs at least 2 players, got {len(players)}")
    if len(players) > BOARD_WIDTH * BOARD_HEIGHT:
        raise ValueError(f"Too many players for the board: {len(players)}")

    board = Board.empty()
    taken: Set[Position] = set()
    for player in players:
        position = Position.random(rng)
        while position in taken:
            position = Position.random(rng)
        taken.add(position)
        board = board.place_at(position, Piece(PieceType.KING, player))

    return GameState(
        board,
        tuple(players),
        (),
        config.turns_until_draw,
        config.turns_until_draw,
    )


def create_history(
    config: Optional[Config] = None,
    rng: Optional[random.Random] = None,
) -> GameHistory:
    """Create an empty GameHistory using the configured Elo constants."""
    config = config or DEFAULT_CONFIG
    return GameHistory(
        k_value=config.k_value,
        initial_rating=config.initial_rating,
        rng=rng or random.Random(config.seed),
    )


def parse_player_names(players_str: str) -> List[str]:
    """Parse a comma-separated list of unique player names."""
    names = [n.strip() for n in players_str.split(",") if n.strip()]
    if len(names) < 2:
        raise ValueError(
            f"Invalid --players value: '{players_str}'. "
            "Expected at least 2 comma-separated names (e.g., 'alice,bob')."
        )
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"Duplicate player name(s): {duplicates}")
    return names
