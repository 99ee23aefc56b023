"""
Session Module - Manages in-memory game sessions.

A session represents one play-through of a game:
- Created from board data and a setup descriptor
- Holds every state snapshot and event batch
- Supports undo and replay from the action log
- Can be driven by bots through the GameLoop

Sessions are EPHEMERAL: nothing is written to disk.
"""

from .manager import SessionManager, GameSession, SessionState, replay
from .game_loop import GameLoop, LoopState, LoopResult

__all__ = [
    "SessionManager",
    "GameSession",
    "SessionState",
    "replay",
    "GameLoop",
    "LoopState",
    "LoopResult",
]
