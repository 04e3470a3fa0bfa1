"""
Board - immutable snapshot of piece placement.

Every mutation returns a new Board; the original mapping is never touched.
`is_legal_move` and `move` share one validation routine so they always
agree.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator, Mapping, Optional, Tuple, TYPE_CHECKING

from king_melee.agent.agent import same_player
from king_melee.core.geometry import Move, Position
from king_melee.core.types import BOARD_HEIGHT, BOARD_WIDTH
from king_melee.games.game_rules import in_bounds
from king_melee.games.pieces import Piece, PieceType

if TYPE_CHECKING:
    from king_melee.agent.agent import Player


class IllegalMove(ValueError):
    """A move that the board refuses to apply."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class Board:
    """Immutable mapping from Position to Piece."""

    __slots__ = ('_pieces',)

    WIDTH = BOARD_WIDTH
    HEIGHT = BOARD_HEIGHT

    def __init__(self, pieces: Optional[Mapping[Position, Piece]] = None):
        self._pieces: Dict[Position, Piece] = dict(pieces or {})

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @staticmethod
    def in_bounds(position: Position) -> bool:
        return in_bounds(position, Board.WIDTH, Board.HEIGHT)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __hash__(self) -> int:
        # Owners hash by name so any player object with a name works.
        return hash(frozenset(
            (position, piece.type, piece.owner.name)
            for position, piece in self._pieces.items()
        ))

    def __repr__(self) -> str:
        return f"Board({len(self._pieces)} pieces)"

    def get_at(self, position: Position) -> Optional[Piece]:
        return self._pieces.get(position)

    def pieces(self) -> Iterator[Tuple[Position, Piece]]:
        """(position, piece) pairs in insertion order."""
        return iter(list(self._pieces.items()))

    def for_each_piece(self, callback: Callable[[Position, Piece], None]) -> None:
        """Call `callback(position, piece)` for every piece on the board."""
        for position, piece in self.pieces():
            callback(position, piece)

    def has_piece_of_type(self, player: "Player", piece_type: PieceType) -> bool:
        return any(
            same_player(piece.owner, player) and piece.type is piece_type
            for piece in self._pieces.values()
        )

    def is_alive(self, player: "Player") -> bool:
        return self.has_piece_of_type(player, PieceType.KING)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def _can_move_piece_to(self, piece: Piece, position: Position) -> bool:
        if not self.in_bounds(position):
            return False
        target = self.get_at(position)
        return target is None or not same_player(piece.owner, target.owner)

    def _rejection(self, player: "Player", move: Move) -> Optional[str]:
        """Reason `move` is illegal for `player`, or None if it is legal."""
        piece = self.get_at(move.initial_position)
        if piece is None:
            return f"No piece at {move.initial_position}."
        if not same_player(piece.owner, player):
            return f"Piece at {move.initial_position} not owned by {player}."
        if not self.in_bounds(move.final_position):
            return f"Final position {move.final_position} is out-of-bounds."
        if not self._can_move_piece_to(piece, move.final_position):
            return (
                f"Pieces at {move.initial_position} and {move.final_position} "
                f"have the same owner."
            )
        return None

    def is_legal_move(self, player: "Player", move: Move) -> bool:
        return self._rejection(player, move) is None

    def move(self, player: "Player", move: Move) -> "Board":
        """
        Apply `move` for `player` and return the resulting board.

        Any opposing piece at the destination is captured.

        Raises:
            IllegalMove: if the move is not legal for `player`.
        """
        reason = self._rejection(player, move)
        if reason is not None:
            raise IllegalMove(reason)

        new_pieces = dict(self._pieces)
        piece = new_pieces.pop(move.initial_position)
        new_pieces[move.final_position] = piece
        return Board(new_pieces)

    def place_at(self, position: Position, piece: Piece) -> "Board":
        """New board with `piece` at `position`, replacing whatever was there."""
        new_pieces = dict(self._pieces)
        new_pieces[position] = piece
        return Board(new_pieces)

    def get_legal_moves(self, player: "Player") -> Iterator[Move]:
        """Lazily yield every legal move for `player`."""
        for position, piece in self.pieces():
            if not same_player(piece.owner, player):
                continue
            for delta in piece.deltas:
                move = position.move(delta)
                if self._can_move_piece_to(piece, move.final_position):
                    yield move
