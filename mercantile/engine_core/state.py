"""
Game State - Snapshot of everything the rules engine tracks.

Design principles:
- Copy-on-write: the reducer deep-copies a state before changing it
- Snapshots are independent: callers may keep old ones for undo/replay
- Plain dataclasses: easy to inspect, compare and deep-copy
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from copy import deepcopy
from enum import Enum

from .board import Coord


class Era(Enum):
    """Campaign era. Progression rules live outside the core."""
    VICTORIAN = "Victorian"
    MODERN = "Modern"


class Grade(Enum):
    """Quality grade of a minted gold coin."""
    A = "A"
    B = "B"
    FAKE = "FAKE"


def _check_non_negative(ledger) -> None:
    for f in fields(ledger):
        if getattr(ledger, f.name) < 0:
            raise ValueError(f"{type(ledger).__name__}.{f.name} cannot be negative")


@dataclass
class CurrencyStock:
    """Coins held, counted by denomination."""
    copper_coin: int = 0
    silver_coin: int = 0

    def __post_init__(self):
        _check_non_negative(self)


@dataclass
class RawStock:
    """Bullion and raw materials."""
    gold_bullion: int = 0
    wool: int = 0
    cotton: int = 0
    silk: int = 0
    tea_leaf: int = 0
    coal: int = 0
    metal_ore: int = 0

    def __post_init__(self):
        _check_non_negative(self)


@dataclass
class ProductStock:
    """Finished goods."""
    wool_textile: int = 0
    cotton_textile: int = 0
    silk_goods: int = 0
    tea: int = 0
    arms: int = 0
    machinery: int = 0

    def __post_init__(self):
        _check_non_negative(self)


@dataclass
class GoldCoin:
    """
    A single, individually tracked gold coin.

    The grade is private to the owner; see GameState.view_for().
    """
    coin_id: str
    mint: str
    grade: Grade | None


@dataclass
class PlayerLocation:
    """Where a player's token stands. tile_id mirrors the board cell."""
    area_id: str
    row: int
    col: int
    tile_id: str

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


@dataclass
class PlayerState:
    """State for a single player."""
    player_id: str
    name: str
    location: PlayerLocation
    currency: CurrencyStock = field(default_factory=CurrencyStock)
    raw: RawStock = field(default_factory=RawStock)
    product: ProductStock = field(default_factory=ProductStock)
    title_rank: int = 0
    gold_coins: list[GoldCoin] = field(default_factory=list)


@dataclass
class PendingMove:
    """A dice-driven movement that has not finished yet."""
    player_id: str
    remaining: int
    awaiting_choice: bool = False


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    current_era, cycle_index and inflation_stage are carried but never
    advanced by the reducer; a campaign hook may change them.
    """
    seed: int
    players: list[PlayerState] = field(default_factory=list)
    turn: int = 1
    active_player_index: int = 0
    pending_move: PendingMove | None = None

    current_era: Era = Era.VICTORIAN
    cycle_index: int = 1
    inflation_stage: int = 0

    @property
    def active_player(self) -> PlayerState:
        """Get the player whose turn it is."""
        return self.players[self.active_player_index]

    @property
    def num_players(self) -> int:
        return len(self.players)

    def get_player(self, player_id: str) -> PlayerState | None:
        """Get player by ID."""
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)

    def view_for(self, viewer_id: str) -> GameState:
        """
        Copy of the state as seen by one player.

        Gold coin grades of every other player are masked with None.
        """
        view = self.clone()
        for player in view.players:
            if player.player_id == viewer_id:
                continue
            for coin in player.gold_coins:
                coin.grade = None
        return view
