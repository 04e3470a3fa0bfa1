"""
Board utilities shared by the engine and its presentation helpers.

`board_to_array` gives a NumPy int8 view of a board for rendering and
fingerprinting; the Board itself stays a position -> piece mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from king_melee.core.geometry import Position
from king_melee.core.types import BOARD_HEIGHT, BOARD_WIDTH

if TYPE_CHECKING:
    from king_melee.agent.agent import Player
    from king_melee.games.board import Board


def in_bounds(position: Position, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> bool:
    """Return True if `position` is inside the board."""
    return 0 <= position.x < width and 0 <= position.y < height


def board_to_array(board: "Board", players: Sequence["Player"]) -> np.ndarray:
    """
    Encode a board as a (height, width) int8 grid indexed [y, x]:
        0 = empty
        k = piece owned by players[k - 1]
       -1 = piece owned by someone not in `players`

    Out-of-bounds pieces are skipped.
    """
    index = {player.name: i + 1 for i, player in enumerate(players)}
    grid = np.zeros((BOARD_HEIGHT, BOARD_WIDTH), dtype=np.int8)

    def _mark(position: Position, piece) -> None:
        if in_bounds(position):
            grid[position.y, position.x] = index.get(piece.owner.name, -1)

    board.for_each_piece(_mark)
    return grid


def cell_strings(players: Sequence["Player"]) -> dict[int, str]:
    """Display string for each cell value of `board_to_array` (e.g. {0: ' .', 1: 'K1'})."""
    strings = {0: " .", -1: "K?"}
    for i, _ in enumerate(players):
        strings[i + 1] = f"K{i + 1}"
    return strings
