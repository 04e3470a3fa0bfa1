"""
Geometry value types: Delta, Position and Move.

All three are frozen dataclasses, so equality and hashing are by field values
and two different types never compare equal even with the same numbers.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from king_melee.core.types import BOARD_HEIGHT, BOARD_WIDTH


@dataclass(frozen=True)
class Delta:
    """Integer displacement between two positions."""

    dx: int
    dy: int

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.dx * self.dx + self.dy * self.dy)

    def __str__(self) -> str:
        return f"<Δ{self.dx}, Δ{self.dy}>"


@dataclass(frozen=True)
class Position:
    """Integer grid coordinate."""

    x: int
    y: int

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Position":
        """Uniformly random in-bounds position."""
        rng = rng or random
        return cls(rng.randrange(BOARD_WIDTH), rng.randrange(BOARD_HEIGHT))

    def apply(self, delta: Delta) -> "Position":
        return Position(self.x + delta.dx, self.y + delta.dy)

    def move(self, delta: Delta) -> "Move":
        """Move from this position to this position shifted by `delta`."""
        return Move(self, self.apply(delta))

    def delta_to(self, other: "Position") -> Delta:
        return Delta(other.x - self.x, other.y - self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Move:
    """A requested or applied transition between two positions."""

    initial_position: Position
    final_position: Position

    @property
    def delta(self) -> Delta:
        return self.initial_position.delta_to(self.final_position)

    def __str__(self) -> str:
        return f"[{self.initial_position} -> {self.final_position}]"
