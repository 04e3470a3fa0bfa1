"""
Command-line interface for hot-seat games with rating tracking.
"""

import argparse
import logging
import random
from typing import List, Optional, Sequence

from king_melee.agent.human import HumanAgent
from king_melee.games.game_state import GameState
from king_melee.rating.history import GameHistory
from king_melee.simulation.runner import run_series
from king_melee.utils.config import Config, DEFAULT_GAMES, DEFAULT_MAX_TURNS
from king_melee.utils.factory import create_history, parse_player_names

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play multiplayer king melee and track Elo ratings"
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        required=True,
        help="Comma-separated player names in move order (e.g., 'alice,bob,carol')",
    )
    parser.add_argument(
        "--games", "-g",
        type=int,
        default=DEFAULT_GAMES,
        help=f"Number of games to play (default: {DEFAULT_GAMES})",
    )
    parser.add_argument(
        "--max-turns", "-t",
        type=int,
        default=DEFAULT_MAX_TURNS,
        help=f"Max turns per game (default: {DEFAULT_MAX_TURNS})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for setups and rating tie-breaks",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every rating update",
    )
    return parser.parse_args(argv)


def format_standings(history: GameHistory) -> str:
    lines = [f"{'Player':<16}{'Rating':>10}{'Wins':>8}"]
    for row in history.standings():
        lines.append(f"{row.name:<16}{row.rating:>10.1f}{row.wins:>8.2f}")
    return "\n".join(lines)


def play_hot_seat(
    agents: List[HumanAgent],
    history: GameHistory,
    config: Config,
    rng: random.Random,
) -> List[GameState]:
    """Play `config.games` games, printing the board before every turn."""

    def announce(game_index: int, state: GameState) -> None:
        print(f"\n=== Game {game_index + 1} of {config.games} ===")

    def show(state: GameState) -> None:
        print(state.state_string())

    def report(game_index: int, state: GameState) -> None:
        print(state.state_string())
        if state.winner is not None:
            print(f"\n{state.winner.name} wins!")
        elif state.is_draw:
            print("\nDraw.")
        else:
            print("\nTurn limit reached; game not rated.")

    return run_series(
        agents, history, config, rng,
        on_game_start=announce, on_turn=show, on_game_end=report,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    names = parse_player_names(args.players)
    config = Config(games=args.games, max_turns=args.max_turns, seed=args.seed)
    rng = random.Random(config.seed)
    history = create_history(config, rng=rng)
    agents = [HumanAgent(name) for name in names]

    try:
        play_hot_seat(agents, history, config, rng)
    except KeyboardInterrupt:
        print("\nInterrupted - partial results below.")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    print("\n" + "=" * 34)
    print("STANDINGS")
    print("=" * 34)
    print(format_standings(history))


if __name__ == "__main__":
    main()
