"""
GameHistory - accumulates finished games into multiplayer Elo ratings.

A multiplayer game is decomposed into pairwise results
(http://www.tckerrigan.com/Misc/Multiplayer_Elo/):
    - each dead player loses to the player who died right after them
    - the last player to die loses to a random survivor
    - survivors all draw with each other

Not thread-safe: every update is a read-modify-write on plain dicts.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, TYPE_CHECKING

from king_melee.core.types import DRAW_SCORE, INITIAL_RATING, K_VALUE, WIN_SCORE, Standing
from king_melee.rating import elo

if TYPE_CHECKING:
    from king_melee.agent.agent import Player
    from king_melee.games.game_state import GameState

logger = logging.getLogger(__name__)


class GameHistory:
    """Win tally and rating table, keyed by player name."""

    def __init__(
        self,
        k_value: float = K_VALUE,
        initial_rating: float = INITIAL_RATING,
        rng: Optional[random.Random] = None,
    ):
        self.k_value = k_value
        self.initial_rating = initial_rating
        self.wins: Dict[str, float] = {}
        self.rating: Dict[str, float] = {}
        self.game_count = 0
        self._rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Ratings
    # ------------------------------------------------------------------

    def expected_score(self, current_rating: float, opponent_rating: float) -> float:
        return elo.expected_score(current_rating, opponent_rating)

    def points_to_transfer(self, score: float, expected_score: float) -> float:
        return elo.points_to_transfer(score, expected_score, self.k_value)

    def current_rating_for_name(self, name: str) -> float:
        return self.rating.get(name, self.initial_rating)

    def current_rating(self, player: "Player") -> float:
        return self.current_rating_for_name(player.name)

    def adjust_rating(self, player: "Player", delta: float) -> None:
        self.rating[player.name] = self.current_rating(player) + delta

    def update_rating(self, winner: "Player", loser: "Player", score: float) -> None:
        """
        Move rating points from `loser` to `winner` for one pairwise result.

        `score` is the winner slot's result: 1.0 for a win, 0.5 for a draw.
        """
        winner_rating = self.current_rating(winner)
        loser_rating = self.current_rating(loser)
        stake = self.points_to_transfer(
            score, self.expected_score(winner_rating, loser_rating)
        )
        self.adjust_rating(winner, stake)
        self.adjust_rating(loser, -stake)
        logger.debug(
            "%s vs %s (score %.1f): %+.2f", winner.name, loser.name, score, stake
        )

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    def record_game(self, game_state: "GameState") -> None:
        """Fold a finished game's terminal state into the tally and ratings."""
        participants = game_state.all_players
        if not participants:
            return

        points_per_player = 1.0 / len(participants)
        for player in participants:
            name = player.name
            self.wins[name] = self.wins.get(name, 0.0) + points_per_player
            self.game_count += 1

        # Dead players lose to whoever died next.
        dead_players = game_state.dead_players
        for earlier, later in zip(dead_players, dead_players[1:]):
            self.update_rating(later, earlier, WIN_SCORE)

        alive_players = list(game_state.players)
        self._rng.shuffle(alive_players)

        # Last to die loses to a random survivor.
        if dead_players and alive_players:
            self.update_rating(alive_players[0], dead_players[-1], WIN_SCORE)

        # Survivors draw with each other.
        for i, first in enumerate(alive_players):
            for second in alive_players[i + 1:]:
                self.update_rating(first, second, DRAW_SCORE)

        logger.info(
            "Recorded game: %d survivor(s), %d eliminated",
            len(alive_players), len(dead_players),
        )

    def standings(self) -> List[Standing]:
        """Every known player, highest rating first."""
        names = set(self.rating) | set(self.wins)
        rows = [
            Standing(name, self.current_rating_for_name(name), self.wins.get(name, 0.0))
            for name in names
        ]
        return sorted(rows, key=lambda s: (-s.rating, s.name))
