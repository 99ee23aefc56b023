"""
Domain Events - Append-only record of what a transition changed.

Every observable change emits one event. The event list returned with
a new state is enough to animate or audit the transition; it is not a
full copy of the state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    """Event types emitted by the engine."""
    DICE_ROLLED = "DICE_ROLLED"
    MOVED = "MOVED"
    MOVE_BLOCKED = "MOVE_BLOCKED"
    FACTORY_PROCESSED = "FACTORY_PROCESSED"
    TURN_ENDED = "TURN_ENDED"
    TILE_TAX = "TILE_TAX"
    TILE_MINT = "TILE_MINT"
    TILE_EVENT_GAIN = "TILE_EVENT_GAIN"
    NOOP = "NOOP"


@dataclass(frozen=True)
class DomainEvent:
    """One observable change, stamped with the turn it happened in."""
    type: EventType
    turn: int
    payload: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "turn": self.turn, "payload": dict(self.payload)}
