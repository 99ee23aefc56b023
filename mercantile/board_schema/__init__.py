"""Board schema - parsing and validation of static board input."""

from .models import (
    EdgeModel,
    AreaModel,
    BoardModel,
    GameSetupModel,
    ActionModel,
    EventModel,
    load_board,
    load_board_file,
    parse_setup,
    load_action_log,
)
from .validation import validate_board, ValidationResult
from ..engine_core.errors import BoardValidationError

__all__ = [
    "EdgeModel",
    "AreaModel",
    "BoardModel",
    "GameSetupModel",
    "ActionModel",
    "EventModel",
    "load_board",
    "load_board_file",
    "parse_setup",
    "load_action_log",
    "validate_board",
    "ValidationResult",
    "BoardValidationError",
]
