"""
Session Manager - Creates and manages in-memory game sessions.

LIFECYCLE:
1. Caller supplies board data and a setup descriptor
2. Session creates the initial state (once)
3. During the game:
   - Caller asks for legal actions
   - Caller applies one action at a time
   - Session keeps every snapshot and every event batch
4. Undo drops the latest snapshot; replay rebuilds a game from
   its action log alone

PERSISTENCE RULES:
- Sessions live in memory only
- Snapshots are independent copies, so keeping them is safe
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import time
import uuid

from ..engine_core.action import Action, ActionResult
from ..engine_core.action_generator import ActionGenerator
from ..engine_core.board import GameData
from ..engine_core.events import DomainEvent
from ..engine_core.reducer import Reducer
from ..engine_core.setup import GameSetup, create_game
from ..engine_core.state import GameState

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"
    GAME_OVER = "game_over"
    ABANDONED = "abandoned"


@dataclass
class GameSession:
    """
    One play-through of a game.

    history[0] is the initial state; history[i] is the state after
    actions[i - 1]. event_batches[i] holds the events of actions[i].
    """
    session_id: str
    data: GameData
    reducer: Reducer
    created_at: float
    history: list[GameState] = field(default_factory=list)
    actions: list[Action] = field(default_factory=list)
    event_batches: list[list[DomainEvent]] = field(default_factory=list)
    status: SessionState = SessionState.ACTIVE

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self.history[-1]

    @property
    def initial_state(self) -> GameState:
        return self.history[0]

    @property
    def event_log(self) -> list[DomainEvent]:
        """Every event so far, in order."""
        return [event for batch in self.event_batches for event in batch]

    def is_active(self) -> bool:
        return self.status == SessionState.ACTIVE

    def legal_actions(self) -> list[Action]:
        return ActionGenerator(data=self.data).generate(self.state)

    def apply(self, action: Action) -> ActionResult:
        """
        Apply an action to the current state and record it.

        Rejected actions raise and leave the session unchanged.
        """
        if not self.is_active():
            raise RuntimeError(f"Session {self.session_id} is {self.status.value}")

        result = self.reducer.apply(self.state, action)
        self.history.append(result.state)
        self.actions.append(action)
        self.event_batches.append(result.events)
        return result

    def undo(self) -> GameState:
        """Drop the latest action and return the restored state."""
        if not self.actions:
            raise IndexError("Nothing to undo")
        self.history.pop()
        self.actions.pop()
        self.event_batches.pop()
        return self.state


def replay(
    data: GameData,
    initial_state: GameState,
    actions: list[Action],
    reducer: Reducer | None = None,
) -> tuple[GameState, list[DomainEvent]]:
    """
    Rebuild a game from its initial state and action log.

    Uses only seed-derived RNGs, so the result matches the original
    play-through exactly when it was played the same way.
    """
    reducer = reducer or Reducer(data=data)
    state = initial_state
    events: list[DomainEvent] = []
    for action in actions:
        result = reducer.apply(state, action)
        state = result.state
        events.extend(result.events)
    return state, events


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions from board data and setup
    - Track active sessions
    - Clean up finished sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, GameSession] = {}

    def create_session(
        self,
        data: GameData,
        setup: GameSetup,
        reducer: Reducer | None = None,
    ) -> GameSession:
        """
        Create a new game session.

        Args:
            data: Static board data
            setup: Setup descriptor (seed, players, start cell)
            reducer: Optional reducer with custom tile effects or hooks

        Returns:
            New active GameSession
        """
        session = GameSession(
            session_id=str(uuid.uuid4()),
            data=data,
            reducer=reducer or Reducer(data=data),
            created_at=time.time(),
            history=[create_game(data, setup)],
        )
        self._sessions[session.session_id] = session
        logger.info(
            "session %s created for %d player(s), seed %d",
            session.session_id, len(setup.player_names), setup.seed,
        )
        return session

    def get_session(self, session_id: str) -> GameSession:
        """Get a session by ID."""
        try:
            return self._sessions[session_id]
        except KeyError:
            raise KeyError(f"Session not found: {session_id}") from None

    def end_session(self, session_id: str, reason: str = "completed") -> GameSession:
        """
        End a session and remove it from memory.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise KeyError(f"Session not found: {session_id}")

        if reason == "completed":
            session.status = SessionState.GAME_OVER
        else:
            session.status = SessionState.ABANDONED
        logger.info("session %s ended (%s)", session_id, reason)
        return session

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[str]:
        """
        Abandon sessions older than max_age.

        Returns the IDs removed.
        """
        current_time = time.time()
        stale = [
            session_id
            for session_id, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return stale
