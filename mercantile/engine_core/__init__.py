"""
Engine Core - Deterministic state-transition engine.

The engine is the runtime that:
1. Creates the initial GameState from a setup descriptor
2. Generates legal actions for the active player
3. Applies actions via the reducer, producing a new state and events
4. Drives multi-step movement and pauses at branches
5. Resolves tile effects through a declarative registry
"""

from .state import (
    GameState,
    PlayerState,
    PlayerLocation,
    PendingMove,
    CurrencyStock,
    RawStock,
    ProductStock,
    GoldCoin,
    Grade,
    Era,
)
from .board import Coord, Edge, AreaData, GameData, get_area, tile_at, outgoing_edges
from .action import Action, ActionType, ActionResult
from .events import DomainEvent, EventType
from .errors import (
    EngineError,
    ConfigurationError,
    ProtocolError,
    InsufficientResourcesError,
    BoardValidationError,
)
from .recipes import Recipe, RecipeId, RECIPES, craftable_recipes, apply_recipe
from .rng import RNG, SeededRNG, derive_seed, derive_rng
from .tile_effects import (
    GameRef,
    TileEffect,
    TileTrigger,
    TileEffectRegistry,
    TILE_EFFECT_MAP,
    default_registry,
)
from .reducer import Reducer, apply_action
from .action_generator import ActionGenerator, legal_actions
from .setup import GameSetup, create_game

__all__ = [
    "GameState",
    "PlayerState",
    "PlayerLocation",
    "PendingMove",
    "CurrencyStock",
    "RawStock",
    "ProductStock",
    "GoldCoin",
    "Grade",
    "Era",
    "Coord",
    "Edge",
    "AreaData",
    "GameData",
    "get_area",
    "tile_at",
    "outgoing_edges",
    "Action",
    "ActionType",
    "ActionResult",
    "DomainEvent",
    "EventType",
    "EngineError",
    "ConfigurationError",
    "ProtocolError",
    "InsufficientResourcesError",
    "BoardValidationError",
    "Recipe",
    "RecipeId",
    "RECIPES",
    "craftable_recipes",
    "apply_recipe",
    "RNG",
    "SeededRNG",
    "derive_seed",
    "derive_rng",
    "GameRef",
    "TileEffect",
    "TileTrigger",
    "TileEffectRegistry",
    "TILE_EFFECT_MAP",
    "default_registry",
    "Reducer",
    "apply_action",
    "ActionGenerator",
    "legal_actions",
    "GameSetup",
    "create_game",
]
