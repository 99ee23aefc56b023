"""
Game Setup - Creates the initial game state.

Consumes a setup descriptor exactly once:
- Seed for every later derived RNG
- Ordered player names (seat order)
- Starting area and cell shared by all players
"""

from __future__ import annotations
from dataclasses import dataclass

from .board import GameData, tile_at
from .state import (
    Era,
    GameState,
    PlayerLocation,
    PlayerState,
)


@dataclass(frozen=True)
class GameSetup:
    """Setup descriptor for a new game."""
    seed: int
    player_names: tuple[str, ...]
    start_area_id: str
    start_row: int
    start_col: int


def create_game(data: GameData, setup: GameSetup) -> GameState:
    """
    Build the starting state.

    Args:
        data: Static board data
        setup: Seed, player names and starting cell

    Returns:
        GameState on turn 1 with the first player active and no pending move
    """
    if not setup.player_names:
        raise ValueError("At least one player is required")

    # Raises ConfigurationError for unknown areas or empty cells
    tile_id = tile_at(data, setup.start_area_id, (setup.start_row, setup.start_col))

    players = [
        PlayerState(
            player_id=f"P{idx + 1}",
            name=name,
            location=PlayerLocation(
                area_id=setup.start_area_id,
                row=setup.start_row,
                col=setup.start_col,
                tile_id=tile_id,
            ),
        )
        for idx, name in enumerate(setup.player_names)
    ]

    return GameState(
        seed=setup.seed,
        players=players,
        turn=1,
        active_player_index=0,
        current_era=Era.VICTORIAN,
        cycle_index=1,
        inflation_stage=0,
    )
