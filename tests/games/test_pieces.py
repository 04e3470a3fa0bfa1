"""
Tests for king_melee.games.pieces
"""

import pytest

from helpers import king
from king_melee.core.geometry import Delta
from king_melee.games.pieces import Piece, PieceType


class TestKingDeltas:
    """King movement offsets."""

    def test_eight_unit_offsets(self):
        deltas = list(PieceType.KING.deltas())
        assert len(deltas) == 8
        assert len(set(deltas)) == 8
        assert Delta(0, 0) not in deltas
        assert all(abs(d.dx) <= 1 and abs(d.dy) <= 1 for d in deltas)

    def test_stable_order(self):
        assert list(PieceType.KING.deltas()) == list(PieceType.KING.deltas())

    def test_piece_deltas_follow_type(self, alice):
        assert list(king(alice).deltas) == list(PieceType.KING.deltas())


class TestPiece:
    """Piece value semantics."""

    def test_equality(self, alice):
        assert Piece(PieceType.KING, alice) == king(alice)

    def test_immutable(self, alice, bob):
        piece = king(alice)
        with pytest.raises(AttributeError):
            piece.owner = bob
