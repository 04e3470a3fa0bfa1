"""
GameState - immutable game state container.

Holds the board, the alive players in move order, the dead players in
death order, and the draw countdown. `move` derives the next state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from king_melee.agent.agent import State, same_player
from king_melee.core.geometry import Move
from king_melee.core.hashing import hash_board
from king_melee.core.types import BOARD_WIDTH, TURNS_UNTIL_DRAW_DEFAULT
from king_melee.games.board import Board
from king_melee.games.game_rules import board_to_array, cell_strings

if TYPE_CHECKING:
    from king_melee.agent.agent import Player


@dataclass(frozen=True)
class GameState:
    """
    Board plus turn order, death order and draw countdown.

    `players` and `dead_players` partition everyone who took part; the first
    alive player is the one to move.
    """

    board: Board
    players: Tuple["Player", ...]  # In move order.
    dead_players: Tuple["Player", ...] = ()  # In death order.
    turns_until_draw: int = TURNS_UNTIL_DRAW_DEFAULT
    turns_until_draw_default: int = field(default=TURNS_UNTIL_DRAW_DEFAULT, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "dead_players", tuple(self.dead_players))

    @classmethod
    def empty(cls) -> "GameState":
        return cls(Board.empty(), (), ())

    @property
    def active_player(self) -> "Player":
        if not self.players:
            raise RuntimeError("No players left to move.")
        return self.players[0]

    @property
    def all_players(self) -> Tuple["Player", ...]:
        return self.players + self.dead_players

    # ------------------------------------------------------------------
    # Transition
    # ------------------------------------------------------------------

    def move(self, move: Move) -> "GameState":
        """
        Apply the active player's `move` and return the next state.

        The mover rotates to the back of the turn order. Every other player
        left without a king joins the dead list in scan order. The mover
        itself is not checked for elimination.

        Raises:
            IllegalMove: if the board rejects the move.
        """
        mover = self.active_player
        new_board = self.board.move(mover, move)

        new_players: List["Player"] = []
        new_dead_players = list(self.dead_players)
        for player in self.players[1:]:
            if new_board.is_alive(player):
                new_players.append(player)
            else:
                new_dead_players.append(player)
        new_players.append(mover)

        player_died = len(new_players) != len(self.players)
        if player_died:
            new_turns_until_draw = self.turns_until_draw_default
        else:
            new_turns_until_draw = self.turns_until_draw - 1

        return GameState(
            new_board,
            tuple(new_players),
            tuple(new_dead_players),
            new_turns_until_draw,
            self.turns_until_draw_default,
        )

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------

    @property
    def is_draw(self) -> bool:
        return self.turns_until_draw <= 0

    @property
    def winner(self) -> Optional["Player"]:
        if len(self.players) != 1:
            return None
        return self.players[0]

    @property
    def is_done(self) -> bool:
        return self.is_draw or self.winner is not None

    def get_result(self, player: "Player") -> State:
        """
        Return the outcome for `player`:
            WIN / TIE / NEUTRAL / LOSS
        """
        if any(same_player(player, dead) for dead in self.dead_players):
            return State.LOSS
        winner = self.winner
        if winner is not None:
            return State.WIN if same_player(winner, player) else State.LOSS
        if self.is_draw:
            return State.TIE
        return State.NEUTRAL

    # ------------------------------------------------------------------
    # Presentation helpers
    # ------------------------------------------------------------------

    def _label_order(self) -> List["Player"]:
        return sorted(self.all_players, key=lambda p: p.name)

    def fingerprint(self) -> str:
        """Short hash of the piece placement."""
        return hash_board(board_to_array(self.board, self._label_order()))

    def state_string(self) -> str:
        """Pretty-print the board, legend and turn info."""
        order = self._label_order()
        grid = board_to_array(self.board, order)
        strings = cell_strings(order)

        border = "─" * (BOARD_WIDTH * 3 + 1)
        lines = [f"╭{border}╮"]
        for row in grid:
            lines.append("│ " + " ".join(f"{strings[int(v)]:>2}" for v in row) + " │")
        lines.append(f"╰{border}╯")

        for i, player in enumerate(order):
            dead = any(same_player(player, d) for d in self.dead_players)
            status = "dead" if dead else "alive"
            lines.append(f"K{i + 1} = {player.name} ({status})")
        if self.players:
            lines.append(
                f"\nTo move: {self.active_player.name}  "
                f"Turns until draw: {self.turns_until_draw}"
            )
        return "\n".join(lines)
