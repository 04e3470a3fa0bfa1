"""
AgentView - what one player may look at when choosing a move.
"""

from __future__ import annotations

import math
from typing import Iterator, List, Optional, TYPE_CHECKING

from king_melee.agent.agent import same_player
from king_melee.core.geometry import Move, Position
from king_melee.games.pieces import PieceType

if TYPE_CHECKING:
    from king_melee.agent.agent import Player
    from king_melee.games.game_state import GameState


class AgentView:
    """Read-only projection of a GameState for a single player."""

    __slots__ = ('_game_state', '_player')

    def __init__(self, game_state: "GameState", player: "Player"):
        self._game_state = game_state
        self._player = player

    @property
    def player(self) -> "Player":
        return self._player

    def get_positions(self, piece_type: PieceType) -> List[Position]:
        """Positions of the viewer's own pieces of `piece_type`."""
        return [
            position
            for position, piece in self._game_state.board.pieces()
            if same_player(piece.owner, self._player) and piece.type is piece_type
        ]

    def closest_opponent(self, position: Position, piece_type: PieceType) -> Optional[Position]:
        """
        Nearest opposing piece of `piece_type` to `position`.

        Ties go to the first piece in board order.
        """
        best_position: Optional[Position] = None
        best_distance = math.inf
        for current, piece in self._game_state.board.pieces():
            if same_player(piece.owner, self._player) or piece.type is not piece_type:
                continue
            distance = position.delta_to(current).magnitude
            if distance < best_distance:
                best_distance = distance
                best_position = current
        return best_position

    @property
    def legal_moves(self) -> Iterator[Move]:
        return self._game_state.board.get_legal_moves(self._player)
