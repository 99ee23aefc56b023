"""
Action System - Actions and results.

Actions are the only way to change a game state:
1. Movement (roll the dice, choose a branch)
2. Production (process raw materials at a factory)
3. Turn control (end turn, no-op)

The action set is closed; the reducer has a handler for every type.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .board import Coord
from .events import DomainEvent
from .recipes import RecipeId
from .state import GameState


class ActionType(Enum):
    """Types of actions in the system."""
    ROLL_MOVE = "roll_move"  # Roll 2d6 and start moving
    CHOOSE_EDGE = "choose_edge"  # Pick a branch while a move is paused
    PROCESS_FACTORY = "process_factory"
    END_TURN = "end_turn"
    NOOP = "noop"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    player_id is optional; when set, the reducer checks it against the
    active player.
    """
    action_type: ActionType
    player_id: str | None = None
    to: Coord | None = None  # CHOOSE_EDGE destination
    recipe: RecipeId | None = None  # PROCESS_FACTORY recipe

    @classmethod
    def roll_move(cls, player_id: str | None = None) -> Action:
        """Factory for roll-and-move."""
        return cls(action_type=ActionType.ROLL_MOVE, player_id=player_id)

    @classmethod
    def choose_edge(cls, to: Coord, player_id: str | None = None) -> Action:
        """Factory for a branch choice."""
        return cls(
            action_type=ActionType.CHOOSE_EDGE,
            player_id=player_id,
            to=(to[0], to[1]),
        )

    @classmethod
    def process_factory(cls, recipe: RecipeId, player_id: str | None = None) -> Action:
        """Factory for a factory-processing action."""
        return cls(
            action_type=ActionType.PROCESS_FACTORY,
            player_id=player_id,
            recipe=recipe,
        )

    @classmethod
    def end_turn(cls, player_id: str | None = None) -> Action:
        return cls(action_type=ActionType.END_TURN, player_id=player_id)

    @classmethod
    def noop(cls, player_id: str | None = None) -> Action:
        return cls(action_type=ActionType.NOOP, player_id=player_id)

    def describe(self) -> str:
        """Short human-readable label."""
        if self.action_type == ActionType.CHOOSE_EDGE and self.to is not None:
            return f"choose_edge -> [{self.to[0]},{self.to[1]}]"
        if self.action_type == ActionType.PROCESS_FACTORY and self.recipe is not None:
            return f"process_factory: {self.recipe.value}"
        return self.action_type.value


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains the new, independent state snapshot and the ordered
    events emitted while producing it.
    """
    state: GameState
    events: list[DomainEvent] = field(default_factory=list)
