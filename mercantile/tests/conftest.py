"""
Pytest fixtures for Mercantile tests.
"""

import pytest

from ..engine_core.board import GameData
from ..engine_core.setup import GameSetup, create_game
from ..engine_core.state import GameState
from ..games.britain import britain_board
from .helpers import corridor_board, branch_board, ring_board


@pytest.fixture
def corridor() -> GameData:
    """Straight six-cell corridor in area 'A'."""
    return corridor_board()


@pytest.fixture
def fork() -> GameData:
    """Corridor with a two-way branch three steps from the start."""
    return branch_board()


@pytest.fixture
def ring() -> GameData:
    return ring_board()


@pytest.fixture
def britain() -> GameData:
    return britain_board()


@pytest.fixture
def alice_state(corridor) -> GameState:
    """Seed 1, Alice alone at A(0,0)."""
    return create_game(corridor, GameSetup(1, ("Alice",), "A", 0, 0))


@pytest.fixture
def fork_state(fork) -> GameState:
    return create_game(fork, GameSetup(7, ("Alice",), "A", 0, 0))


@pytest.fixture
def two_player_state(ring) -> GameState:
    """Alice and Bob on a ring board."""
    return create_game(ring, GameSetup(3, ("Alice", "Bob"), "R", 0, 0))
