"""
Pydantic Schemas - Validated models for static input and logged output.

These models sit at the edge of the engine:
- Board data and setup descriptors arrive as JSON and are parsed here
- Actions and events are dumped here for logs and replays

The engine itself works on the plain dataclasses in engine_core.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from ..engine_core.action import Action, ActionType
from ..engine_core.board import AreaData, Edge, GameData
from ..engine_core.events import DomainEvent
from ..engine_core.recipes import RecipeId
from ..engine_core.setup import GameSetup


# =============================================================================
# Board Models
# =============================================================================

class EdgeModel(BaseModel):
    """A directed edge between two cells of one area."""
    from_: tuple[int, int] = Field(alias="from")
    to: tuple[int, int]

    model_config = {"populate_by_name": True}


class AreaModel(BaseModel):
    """One area: a tile grid plus its edges."""
    id: str
    name: str = ""
    grid: list[list[Optional[str]]]
    edges: list[EdgeModel] = Field(default_factory=list)

    def to_area(self) -> AreaData:
        return AreaData(
            area_id=self.id,
            name=self.name or self.id,
            grid=tuple(tuple(row) for row in self.grid),
            edges=tuple(Edge(source=e.from_, target=e.to) for e in self.edges),
        )


class BoardModel(BaseModel):
    """Full board: area id -> area."""
    areas: dict[str, AreaModel]

    def to_game_data(self) -> GameData:
        return GameData(areas={key: area.to_area() for key, area in self.areas.items()})


class GameSetupModel(BaseModel):
    """Setup descriptor for a new game."""
    seed: int
    player_names: list[str] = Field(min_length=1)
    start_area_id: str
    start_row: int = Field(0, ge=0)
    start_col: int = Field(0, ge=0)

    def to_setup(self) -> GameSetup:
        return GameSetup(
            seed=self.seed,
            player_names=tuple(self.player_names),
            start_area_id=self.start_area_id,
            start_row=self.start_row,
            start_col=self.start_col,
        )


# =============================================================================
# Log Models
# =============================================================================

class ActionModel(BaseModel):
    """Serializable form of an Action."""
    type: ActionType
    player_id: Optional[str] = None
    to: Optional[tuple[int, int]] = None
    recipe: Optional[RecipeId] = None

    @classmethod
    def from_action(cls, action: Action) -> ActionModel:
        return cls(
            type=action.action_type,
            player_id=action.player_id,
            to=action.to,
            recipe=action.recipe,
        )

    def to_action(self) -> Action:
        return Action(
            action_type=self.type,
            player_id=self.player_id,
            to=self.to,
            recipe=self.recipe,
        )


class EventModel(BaseModel):
    """Serializable form of a DomainEvent."""
    type: str
    turn: int
    payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_event(cls, event: DomainEvent) -> EventModel:
        return cls(**event.to_dict())


# =============================================================================
# Loaders
# =============================================================================

def load_board(raw: dict[str, Any]) -> GameData:
    """Parse board data from a dict (raises pydantic.ValidationError)."""
    return BoardModel.model_validate(raw).to_game_data()


def load_board_file(path: str | Path) -> GameData:
    """Parse board data from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return load_board(json.load(f))


def parse_setup(raw: dict[str, Any]) -> GameSetup:
    return GameSetupModel.model_validate(raw).to_setup()


def load_action_log(path: str | Path) -> list[Action]:
    """Read a JSON list of actions."""
    with open(path, "r", encoding="utf-8") as f:
        entries = json.load(f)
    return [ActionModel.model_validate(entry).to_action() for entry in entries]
