"""
Piece types and pieces.

Each PieceType owns its movement rule, so new types can be added here
without touching the Board.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from king_melee.core.geometry import Delta

if TYPE_CHECKING:
    from king_melee.agent.agent import Player


def _king_deltas() -> Iterator[Delta]:
    # One step in any direction
    for dx in range(-1, 2):
        for dy in range(-1, 2):
            if dx == 0 and dy == 0:
                continue
            yield Delta(dx, dy)


class PieceType(Enum):
    KING = "king"

    def deltas(self) -> Iterator[Delta]:
        """Movement offsets for this piece type."""
        if self is PieceType.KING:
            return _king_deltas()
        raise ValueError(f"No movement rule for {self}")


@dataclass(frozen=True)
class Piece:
    """A typed, owned unit occupying a position."""

    type: PieceType
    owner: "Player"

    @property
    def deltas(self) -> Iterator[Delta]:
        return self.type.deltas()
