"""
Shared test fixtures for king_melee tests.

Design principles:
- Named players compared by name only
- Boards built explicitly with place_at (see helpers.py)
- Randomness always seeded
"""

import random

import pytest

from helpers import board_with
from king_melee.agent.agent import NamedPlayer
from king_melee.games.game_state import GameState


# =============================================================================
# Player Fixtures
# =============================================================================

@pytest.fixture
def alice() -> NamedPlayer:
    return NamedPlayer("alice", color="red")


@pytest.fixture
def bob() -> NamedPlayer:
    return NamedPlayer("bob", color="blue")


@pytest.fixture
def carol() -> NamedPlayer:
    return NamedPlayer("carol", color="green")


@pytest.fixture
def dave() -> NamedPlayer:
    return NamedPlayer("dave", color="yellow")


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def duel(alice, bob) -> GameState:
    """alice at (0,0) and bob at (1,1); alice to move and can capture."""
    return GameState(board_with((alice, 0, 0), (bob, 1, 1)), [alice, bob], [])


@pytest.fixture
def far_duel(alice, bob) -> GameState:
    """alice and bob in opposite corners."""
    return GameState(board_with((alice, 0, 0), (bob, 7, 7)), [alice, bob], [])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
