"""
Player and Agent capabilities.

A Player is anything with a `name` (its identity for ownership and rating)
and a display `color`. An Agent is a separate capability: a player that can
also pick a move from an AgentView. Players are never required to be agents;
use `is_agent` to check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from king_melee.core.geometry import Move
    from king_melee.games.agent_view import AgentView


class State(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


@runtime_checkable
class Player(Protocol):
    """Identity of a participant. Compared by name."""

    @property
    def name(self) -> str: ...

    @property
    def color(self) -> str: ...


@runtime_checkable
class Agent(Protocol):
    """Move-selection policy bound to a player identity."""

    @property
    def name(self) -> str: ...

    def pick_move(self, view: "AgentView") -> "Move": ...


def is_agent(player: object) -> bool:
    """Return True if `player` can also pick its own moves."""
    return isinstance(player, Agent)


def same_player(a: Player | None, b: Player | None) -> bool:
    """Name-based identity check; None only matches None."""
    if a is None or b is None:
        return a is b
    return a.name == b.name


@dataclass(frozen=True)
class NamedPlayer:
    """Plain player: a name and a display color."""

    name: str
    color: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"Player[{self.name}]"
