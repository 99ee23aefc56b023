"""
Engine Errors - Failure taxonomy for the rules engine.

Three families, all fatal to the call that raised them:
- ConfigurationError: static data (board, registry) references something missing
- ProtocolError: an action violates a precondition (caller bug)
- InsufficientResourcesError: a recipe was attempted without materials

The reducer works on a deep copy, so a raised error never leaves
partial changes in the caller's state.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for all engine failures."""


class ConfigurationError(EngineError, LookupError):
    """Raised when board or registry data references an unknown area, cell or effect."""


class ProtocolError(EngineError, ValueError):
    """Raised when an action is illegal in the current state."""


class InsufficientResourcesError(EngineError, ValueError):
    """Raised when a player lacks the materials a recipe requires."""

    def __init__(self, recipe_id: str, missing: dict[str, int]):
        self.recipe_id = recipe_id
        self.missing = missing
        shortfall = ", ".join(f"{name} x{qty}" for name, qty in missing.items())
        super().__init__(f"Insufficient materials for {recipe_id}: missing {shortfall}")


class BoardValidationError(ConfigurationError):
    """Raised when board validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Board validation failed with {len(errors)} error(s)")
