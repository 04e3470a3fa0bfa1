"""
King Melee - a multiplayer king-capture rules engine with Elo ratings.

Any number of players each start with a king on an 8x8 board. Kings move one
square in any direction; moving onto an opposing king captures it and
eliminates its owner. The last player standing wins; 50 transitions without
an elimination is a draw. Finished games feed a multiplayer Elo table.

Quick Start:
    from king_melee import GameState, GameHistory, NamedPlayer, create_game

    players = [NamedPlayer("alice"), NamedPlayer("bob"), NamedPlayer("carol")]
    state = create_game(players)
    move = next(state.board.get_legal_moves(state.active_player))
    state = state.move(move)

    history = GameHistory()
    if state.is_done:
        history.record_game(state)

Modules:
    core       - Geometry value types, constants, board hashing
    games      - Pieces, Board, GameState, AgentView
    agent      - Player identity, Agent capability, HumanAgent
    rating     - Elo math and GameHistory
    simulation - Driving loop that consults agents
    utils      - Config and factories
"""

from king_melee.core import Delta, Position, Move, Standing
from king_melee.agent import Agent, NamedPlayer, Player, State, is_agent
from king_melee.games import (
    AgentView,
    Board,
    GameState,
    IllegalMove,
    Piece,
    PieceType,
)
from king_melee.rating import GameHistory
from king_melee.simulation import play_game, run_series
from king_melee.utils.config import Config, DEFAULT_CONFIG
from king_melee.utils.factory import create_game, create_history

__version__ = "1.0.0"

__all__ = [
    # Geometry
    "Delta",
    "Position",
    "Move",
    # Engine
    "PieceType",
    "Piece",
    "Board",
    "IllegalMove",
    "GameState",
    "AgentView",
    # Players
    "Player",
    "Agent",
    "NamedPlayer",
    "State",
    "is_agent",
    # Rating
    "GameHistory",
    "Standing",
    # Driving
    "play_game",
    "run_series",
    "create_game",
    "create_history",
    "Config",
    "DEFAULT_CONFIG",
]
