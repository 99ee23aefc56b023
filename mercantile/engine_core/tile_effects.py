"""
Tile Effects - Declarative tile -> effect -> implementation dispatch.

Two lookups:
1. tile_map: tile id -> effect id (missing tile means no effect)
2. effects: effect id -> TileEffect (missing effect is a configuration error)

The reducer only calls resolve_on_land(); adding or editing an effect
never touches the transition code.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TYPE_CHECKING

from .errors import ConfigurationError
from .events import EventType

if TYPE_CHECKING:
    from .board import GameData
    from .rng import RNG
    from .state import GameState, PlayerState


class TileTrigger(Enum):
    """When an effect fires. Only landing is used today."""
    LAND = "land"


@dataclass
class GameRef:
    """
    Everything an effect may touch.

    state is the reducer's working copy and may be mutated freely.
    """
    data: GameData
    state: GameState
    active_player_index: int
    rng: RNG
    emit: Callable[[EventType, dict[str, Any]], None]

    @property
    def player(self) -> PlayerState:
        return self.state.players[self.active_player_index]


@dataclass(frozen=True)
class TileEffect:
    effect_id: str
    trigger: TileTrigger
    apply: Callable[[GameRef], None]


def _tax_one_copper(ref: GameRef) -> None:
    p = ref.player
    p.currency.copper_coin = max(0, p.currency.copper_coin - 1)
    ref.emit(EventType.TILE_TAX, {"player_id": p.player_id, "delta_copper": -1})


def _mint_gain_silver(ref: GameRef) -> None:
    p = ref.player
    p.currency.silver_coin += 1
    ref.emit(EventType.TILE_MINT, {"player_id": p.player_id, "delta_silver": 1})


def _event_gain_random_small(ref: GameRef) -> None:
    p = ref.player
    if ref.rng.next_int(0, 2) == 0:
        p.currency.copper_coin += 2
        gain = {"copper_coin": 2}
    else:
        p.currency.silver_coin += 1
        gain = {"silver_coin": 1}
    ref.emit(EventType.TILE_EVENT_GAIN, {"player_id": p.player_id, "gain": gain})


BUILTIN_EFFECTS: tuple[TileEffect, ...] = (
    TileEffect("TAX_1_COPPER", TileTrigger.LAND, _tax_one_copper),
    TileEffect("MINT_GAIN_SILVER_1", TileTrigger.LAND, _mint_gain_silver),
    TileEffect("EVENT_GAIN_RANDOM_SMALL", TileTrigger.LAND, _event_gain_random_small),
)

TILE_EFFECT_MAP: dict[str, str] = {
    "TAX": "TAX_1_COPPER",
    "MINT": "MINT_GAIN_SILVER_1",
    "EVT": "EVENT_GAIN_RANDOM_SMALL",
}


@dataclass
class TileEffectRegistry:
    """Maps tiles to effects and runs them."""
    tile_map: dict[str, str] = field(default_factory=dict)
    effects: dict[str, TileEffect] = field(default_factory=dict)

    def register(self, effect: TileEffect, tiles: tuple[str, ...] = ()) -> None:
        """Add an effect and optionally bind tiles to it."""
        self.effects[effect.effect_id] = effect
        for tile_id in tiles:
            self.tile_map[tile_id] = effect.effect_id

    def effect_for_tile(self, tile_id: str) -> TileEffect | None:
        effect_id = self.tile_map.get(tile_id)
        if effect_id is None:
            return None
        effect = self.effects.get(effect_id)
        if effect is None:
            raise ConfigurationError(f"Effect not registered: {effect_id}")
        return effect

    def validate(self) -> None:
        """Fail fast if any tile points at a missing effect."""
        unknown = sorted(
            f"{tile_id} -> {effect_id}"
            for tile_id, effect_id in self.tile_map.items()
            if effect_id not in self.effects
        )
        if unknown:
            raise ConfigurationError(f"Effects not registered: {', '.join(unknown)}")

    def resolve_on_land(self, tile_id: str, ref: GameRef) -> bool:
        """Run the landing effect for tile_id. Returns whether one fired."""
        effect = self.effect_for_tile(tile_id)
        if effect is None or effect.trigger != TileTrigger.LAND:
            return False
        effect.apply(ref)
        return True


def default_registry() -> TileEffectRegistry:
    """Fresh registry with the built-in effects and tile bindings."""
    registry = TileEffectRegistry(tile_map=dict(TILE_EFFECT_MAP))
    for effect in BUILTIN_EFFECTS:
        registry.register(effect)
    return registry
