"""
Game driving loop.

Asks each active player's agent for a move through an AgentView, applies it,
and folds finished games into a GameHistory.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

from king_melee.games.agent_view import AgentView
from king_melee.games.board import IllegalMove
from king_melee.utils.config import DEFAULT_CONFIG, Config
from king_melee.utils.factory import create_game

if TYPE_CHECKING:
    from king_melee.agent.agent import Agent
    from king_melee.games.game_state import GameState
    from king_melee.rating.history import GameHistory

logger = logging.getLogger(__name__)


def _agents_by_name(agents: Sequence["Agent"]) -> Dict[str, "Agent"]:
    return {agent.name: agent for agent in agents}


def take_turn(state: "GameState", agent: "Agent", max_illegal_attempts: int) -> "GameState":
    """
    Let `agent` move for the active player and return the next state.

    Illegal proposals are logged and the agent is asked again.

    Raises:
        IllegalMove: if the agent proposes `max_illegal_attempts` illegal moves.
    """
    view = AgentView(state, state.active_player)
    attempts = 0
    while True:
        move = agent.pick_move(view)
        try:
            return state.move(move)
        except IllegalMove as e:
            attempts += 1
            logger.warning(
                "%s proposed illegal move %s (%d/%d): %s",
                agent.name, move, attempts, max_illegal_attempts, e.reason,
            )
            if attempts >= max_illegal_attempts:
                raise


def play_game(
    state: "GameState",
    agents: Sequence["Agent"],
    config: Optional[Config] = None,
    on_turn: Optional[Callable[["GameState"], None]] = None,
) -> "GameState":
    """
    Play `state` forward until it is done or `config.max_turns` is reached.

    `on_turn` is called with the state before every move.

    Returns the last state reached.

    Raises:
        RuntimeError: if an alive player has no agent.
        IllegalMove: if an agent keeps proposing illegal moves.
    """
    config = config or DEFAULT_CONFIG
    by_name = _agents_by_name(agents)

    for turn in range(config.max_turns):
        if state.is_done:
            break
        name = state.active_player.name
        agent = by_name.get(name)
        if agent is None:
            raise RuntimeError(f"No agent for player '{name}'")
        if on_turn is not None:
            on_turn(state)
        state = take_turn(state, agent, config.max_illegal_attempts)
        logger.debug("Turn %d: %s moved", turn + 1, name)

    if not state.is_done:
        logger.warning("Stopped after %d turns without a result", config.max_turns)
        return state

    winner = state.winner
    if winner is not None:
        logger.info("Winner: %s", winner.name)
    else:
        logger.info("Draw between %s", ", ".join(p.name for p in state.players))
    return state


def run_series(
    agents: Sequence["Agent"],
    history: "GameHistory",
    config: Optional[Config] = None,
    rng: Optional[random.Random] = None,
    on_game_start: Optional[Callable[[int, "GameState"], None]] = None,
    on_turn: Optional[Callable[["GameState"], None]] = None,
    on_game_end: Optional[Callable[[int, "GameState"], None]] = None,
) -> List["GameState"]:
    """
    Play `config.games` games between `agents` and record each finished one.

    The starting player rotates from game to game. `on_game_start` and
    `on_game_end` receive the 0-based game index and the first or last state;
    `on_turn` is passed through to `play_game`.

    Raises:
        ValueError: if fewer than 2 agents are given.

    Returns:
        The final state of every game, in order.
    """
    if len(agents) < 2:
        raise ValueError(f"A series needs at least 2 agents, got {len(agents)}")
    config = config or DEFAULT_CONFIG
    rng = rng or random.Random(config.seed)
    results: List["GameState"] = []

    for game_index in range(config.games):
        shift = game_index % len(agents)
        order = list(agents[shift:]) + list(agents[:shift])
        state = create_game(order, rng=rng, config=config)
        if on_game_start is not None:
            on_game_start(game_index, state)

        final = play_game(state, agents, config, on_turn)
        if final.is_done:
            history.record_game(final)
        else:
            logger.warning("Game %d unfinished; not recorded", game_index + 1)
        if on_game_end is not None:
            on_game_end(game_index, final)
        results.append(final)

    return results
