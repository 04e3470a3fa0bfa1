"""
Games module - board, pieces, game state and the per-player view.
"""

from king_melee.games.pieces import PieceType, Piece
from king_melee.games.board import Board, IllegalMove
from king_melee.games.game_state import GameState
from king_melee.games.agent_view import AgentView
from king_melee.games.game_rules import in_bounds, board_to_array, cell_strings

__all__ = [
    "PieceType",
    "Piece",
    "Board",
    "IllegalMove",
    "GameState",
    "AgentView",
    "in_bounds",
    "board_to_array",
    "cell_strings",
]
