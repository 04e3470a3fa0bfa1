"""
Board builders and test-double agents shared across the king_melee tests.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List

from king_melee.agent.agent import NamedPlayer
from king_melee.core.geometry import Move, Position
from king_melee.games.agent_view import AgentView
from king_melee.games.board import Board
from king_melee.games.pieces import Piece, PieceType


# =============================================================================
# Builders
# =============================================================================

def king(owner: NamedPlayer) -> Piece:
    return Piece(PieceType.KING, owner)


def board_with(*placements) -> Board:
    """Board from (player, x, y) triples, in the given insertion order."""
    board = Board.empty()
    for owner, x, y in placements:
        board = board.place_at(Position(x, y), king(owner))
    return board


def mv(x1: int, y1: int, x2: int, y2: int) -> Move:
    return Move(Position(x1, y1), Position(x2, y2))


def names(players: Iterable) -> List[str]:
    return [p.name for p in players]


# =============================================================================
# Agents
# =============================================================================

@dataclass
class ScriptedAgent:
    """Test double: plays the given moves in order."""

    name: str
    moves: List[Move] = field(default_factory=list)
    color: str = ""

    def pick_move(self, view: AgentView) -> Move:
        return self.moves.pop(0)


@dataclass
class PolicyAgent:
    """Test double: delegates to a function of the view."""

    name: str
    policy: Callable[[AgentView], Move]
    color: str = ""

    def pick_move(self, view: AgentView) -> Move:
        return self.policy(view)


def first_legal(view: AgentView) -> Move:
    return next(iter(view.legal_moves))


def chase(view: AgentView) -> Move:
    """Step toward the nearest opposing king."""
    me = view.get_positions(PieceType.KING)[0]
    target = view.closest_opponent(me, PieceType.KING)
    return min(
        view.legal_moves,
        key=lambda m: m.final_position.delta_to(target).magnitude,
    )


def timid(view: AgentView) -> Move:
    """Any legal move that does not capture."""
    me = view.get_positions(PieceType.KING)[0]
    opponent = view.closest_opponent(me, PieceType.KING)
    return next(m for m in view.legal_moves if m.final_position != opponent)
