"""
Tests for king_melee.games.board

Tests Board queries, move validation, capture, and copy-on-write.
"""

import itertools

import pytest

from helpers import board_with, king, mv
from king_melee.agent.agent import NamedPlayer
from king_melee.core.geometry import Move, Position
from king_melee.games.board import Board, IllegalMove
from king_melee.games.pieces import PieceType


class TestEmptyBoard:
    """Empty board tests."""

    def test_no_pieces(self):
        board = Board.empty()
        assert len(board) == 0
        assert board.get_at(Position(0, 0)) is None

    def test_nobody_alive(self, alice):
        assert not Board.empty().is_alive(alice)

    def test_no_legal_moves(self, alice):
        assert list(Board.empty().get_legal_moves(alice)) == []


class TestInBounds:
    """Board.in_bounds tests."""

    def test_corners(self):
        for x, y in [(0, 0), (7, 0), (0, 7), (7, 7)]:
            assert Board.in_bounds(Position(x, y))

    def test_outside(self):
        for x, y in [(-1, 0), (0, -1), (8, 0), (0, 8)]:
            assert not Board.in_bounds(Position(x, y))


class TestPlaceAt:
    """place_at tests."""

    def test_returns_new_board(self, alice):
        """Original board is unchanged."""
        board = Board.empty()
        placed = board.place_at(Position(2, 2), king(alice))
        assert board.get_at(Position(2, 2)) is None
        assert placed.get_at(Position(2, 2)) == king(alice)

    def test_overrides_existing(self, alice, bob):
        """A second placement on the same square replaces the first."""
        board = board_with((alice, 2, 2)).place_at(Position(2, 2), king(bob))
        assert board.get_at(Position(2, 2)).owner == bob
        assert len(board) == 1

    def test_other_entries_unchanged(self, alice, bob):
        board = board_with((alice, 0, 0)).place_at(Position(5, 5), king(bob))
        assert board.get_at(Position(0, 0)) == king(alice)


class TestPieceQueries:
    """has_piece_of_type / is_alive / for_each_piece tests."""

    def test_is_alive(self, alice, bob):
        board = board_with((alice, 0, 0))
        assert board.is_alive(alice)
        assert not board.is_alive(bob)
        assert board.has_piece_of_type(alice, PieceType.KING)

    def test_ownership_by_name(self, alice):
        """A different object with the same name owns the same pieces."""
        board = board_with((alice, 0, 0))
        assert board.is_alive(NamedPlayer("alice", color="purple"))

    def test_for_each_piece_visits_all(self, alice, bob):
        board = board_with((alice, 0, 0), (bob, 3, 4))
        seen = []
        board.for_each_piece(lambda pos, piece: seen.append((pos, piece.owner.name)))
        assert seen == [(Position(0, 0), "alice"), (Position(3, 4), "bob")]


class TestHashing:
    """Boards hash consistently with equality."""

    def test_equal_boards_hash_equal(self, alice, bob):
        a = board_with((alice, 0, 0), (bob, 3, 4))
        b = board_with((bob, 3, 4), (alice, 0, 0))
        assert a == b
        assert hash(a) == hash(b)

    def test_usable_as_set_member(self, alice, bob):
        boards = {board_with((alice, 0, 0)), board_with((alice, 0, 0)), board_with((bob, 0, 0))}
        assert len(boards) == 2


class TestMove:
    """Board.move tests."""

    def test_simple_move(self, alice):
        board = board_with((alice, 3, 3))
        moved = board.move(alice, mv(3, 3, 4, 4))
        assert moved.get_at(Position(3, 3)) is None
        assert moved.get_at(Position(4, 4)) == king(alice)

    def test_copy_on_write(self, alice):
        """The source board is never altered."""
        board = board_with((alice, 3, 3))
        board.move(alice, mv(3, 3, 4, 4))
        assert board.get_at(Position(3, 3)) == king(alice)
        assert board.get_at(Position(4, 4)) is None

    def test_capture(self, alice, bob):
        """Moving onto an opponent removes their piece."""
        board = board_with((alice, 0, 0), (bob, 1, 1))
        moved = board.move(alice, mv(0, 0, 1, 1))
        assert len(moved) == 1
        assert moved.get_at(Position(1, 1)).owner == alice
        assert not moved.is_alive(bob)

    def test_no_piece(self, alice):
        with pytest.raises(IllegalMove, match="No piece"):
            Board.empty().move(alice, mv(0, 0, 1, 1))

    def test_wrong_owner(self, alice, bob):
        board = board_with((bob, 0, 0))
        with pytest.raises(IllegalMove, match="not owned"):
            board.move(alice, mv(0, 0, 1, 1))

    def test_out_of_bounds(self, alice):
        board = board_with((alice, 0, 0))
        with pytest.raises(IllegalMove, match="out-of-bounds"):
            board.move(alice, mv(0, 0, -1, 0))

    def test_friendly_fire(self, alice):
        board = board_with((alice, 0, 0), (alice, 1, 0))
        with pytest.raises(IllegalMove, match="same owner"):
            board.move(alice, mv(0, 0, 1, 0))

    def test_reason_attribute(self, alice):
        """IllegalMove carries a readable reason and is a ValueError."""
        with pytest.raises(ValueError) as info:
            Board.empty().move(alice, mv(2, 2, 2, 3))
        assert isinstance(info.value, IllegalMove)
        assert "(2, 2)" in info.value.reason


class TestLegalMoves:
    """get_legal_moves / is_legal_move tests."""

    def test_corner_king_has_three_moves(self, alice):
        board = board_with((alice, 0, 0))
        moves = set(board.get_legal_moves(alice))
        assert moves == {mv(0, 0, 1, 0), mv(0, 0, 0, 1), mv(0, 0, 1, 1)}

    def test_center_king_has_eight_moves(self, alice):
        board = board_with((alice, 4, 4))
        assert len(list(board.get_legal_moves(alice))) == 8

    def test_includes_capture(self, alice, bob):
        board = board_with((alice, 0, 0), (bob, 1, 1))
        assert mv(0, 0, 1, 1) in set(board.get_legal_moves(alice))

    def test_excludes_friendly_square(self, alice):
        board = board_with((alice, 0, 0), (alice, 1, 1))
        assert mv(0, 0, 1, 1) not in set(board.get_legal_moves(alice))

    def test_only_own_pieces(self, alice, bob):
        board = board_with((alice, 0, 0), (bob, 7, 7))
        assert all(m.initial_position == Position(0, 0) for m in board.get_legal_moves(alice))

    def test_deterministic_and_restartable(self, alice, bob):
        """Two enumerations give the same sequence and leave the board alone."""
        board = board_with((alice, 3, 3), (alice, 5, 5), (bob, 4, 4))
        first = list(board.get_legal_moves(alice))
        second = list(board.get_legal_moves(alice))
        assert first == second
        assert len(board) == 3

    def test_lazy(self, alice):
        """Enumeration is a lazy iterator."""
        moves = board_with((alice, 4, 4)).get_legal_moves(alice)
        assert next(moves).initial_position == Position(4, 4)

    def test_every_listed_move_is_legal(self, alice, bob):
        board = board_with((alice, 0, 0), (alice, 0, 1), (bob, 1, 1))
        for move in board.get_legal_moves(alice):
            assert board.is_legal_move(alice, move)


class TestLegalityAgreement:
    """is_legal_move is true exactly when move succeeds."""

    @pytest.fixture
    def crowded(self, alice, bob, carol) -> Board:
        return board_with(
            (alice, 0, 0), (alice, 1, 0), (bob, 1, 1),
            (carol, 7, 7), (bob, 6, 7), (alice, 3, 3),
        )

    def test_agreement_over_all_moves(self, crowded, alice, bob, carol):
        coords = range(-1, 9)
        for player in (alice, bob, carol):
            for x1, y1 in [(0, 0), (1, 0), (1, 1), (7, 7), (6, 7), (3, 3), (4, 4)]:
                for x2, y2 in itertools.product(coords, coords):
                    move = mv(x1, y1, x2, y2)
                    legal = crowded.is_legal_move(player, move)
                    try:
                        crowded.move(player, move)
                        succeeded = True
                    except IllegalMove:
                        succeeded = False
                    assert legal == succeeded, (player, move)

    def test_piece_count_preserved_or_captured(self, crowded, alice, bob, carol):
        """A move keeps the piece count, or drops it by one on capture."""
        for player in (alice, bob, carol):
            for move in crowded.get_legal_moves(player):
                target = crowded.get_at(move.final_position)
                after = crowded.move(player, move)
                expected = len(crowded) - (1 if target is not None else 0)
                assert len(after) == expected
