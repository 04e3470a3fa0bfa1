"""
HumanAgent - an agent whose moves are typed in at a prompt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, TYPE_CHECKING

from king_melee.core.geometry import Move, Position

if TYPE_CHECKING:
    from king_melee.games.agent_view import AgentView


def parse_move(raw: str) -> Move:
    """
    Parse 'x1,y1,x2,y2' into a Move.

    Raises:
        ValueError: if the text is not four comma-separated integers.
    """
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    if len(parts) != 4:
        raise ValueError(f"Expected 4 comma-separated values, got {len(parts)}: '{raw}'")
    try:
        x1, y1, x2, y2 = (int(p) for p in parts)
    except ValueError as e:
        raise ValueError(f"Move values must be integers: '{raw}'") from e
    return Move(Position(x1, y1), Position(x2, y2))


@dataclass(frozen=True)
class HumanAgent:
    """Hot-seat player that reads moves from `input_fn`."""

    name: str
    color: str = field(default="", compare=False)
    input_fn: Optional[Callable[[str], str]] = field(default=None, compare=False, repr=False)
    output_fn: Optional[Callable[[str], None]] = field(default=None, compare=False, repr=False)

    def _read(self, prompt: str) -> str:
        return (self.input_fn or input)(prompt)

    def _write(self, text: str) -> None:
        (self.output_fn or print)(text)

    def pick_move(self, view: "AgentView") -> Move:
        legal = list(view.legal_moves)
        if not legal:
            raise RuntimeError(f"{self.name} has no legal moves.")

        example = legal[0]
        self._write(f"\nYour turn ({self.name})")
        self._write(
            "Format: x1,y1,x2,y2 (e.g., "
            f"{example.initial_position.x},{example.initial_position.y},"
            f"{example.final_position.x},{example.final_position.y})"
        )

        while True:
            try:
                move = parse_move(self._read("Move: "))
            except ValueError as e:
                self._write(f"Invalid input: {e}")
                continue
            if move in legal:
                return move
            self._write(f"Illegal move: {move}")

    def __str__(self) -> str:
        return f"Player[{self.name}]"
