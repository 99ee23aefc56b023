"""
Game Loop - Drives bots through a session.

The loop:
1. Ask the session for legal actions
2. Ask the active player's policy to pick one
3. Apply it
4. Repeat until the action budget runs out

Engine errors propagate; a bot only ever picks from legal actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING
import logging

from ..engine_core.events import DomainEvent

if TYPE_CHECKING:
    from .manager import GameSession
    from ..bots.policy import BotDecision, BotPolicy

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    READY = "ready"
    RUNNING = "running"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass
class LoopResult:
    """Outcome of one run() call."""
    loop_state: LoopState
    actions_taken: int = 0
    events: list[DomainEvent] = field(default_factory=list)
    explanations: list[str] = field(default_factory=list)


class GameLoop:
    """
    Runs bot policies against a session.

    Usage:
        loop = GameLoop(session, {"P1": RandomPolicy(1), "P2": RandomPolicy(2)})
        result = loop.run(max_actions=50)
    """

    def __init__(self, session: GameSession, policies: dict[str, BotPolicy]):
        missing = [p.player_id for p in session.state.players if p.player_id not in policies]
        if missing:
            raise ValueError(f"No policy for player(s): {', '.join(missing)}")
        self.session = session
        self.policies = policies
        self.state = LoopState.READY

    def step(self) -> tuple[BotDecision, list[DomainEvent]]:
        """Let the active player's policy take one action."""
        game_state = self.session.state
        player = game_state.active_player
        policy = self.policies[player.player_id]

        decision = policy.select_action(game_state, self.session.legal_actions())
        logger.debug(
            "%s (%s): %s - %s",
            player.player_id, policy.get_name(), decision.action.describe(), decision.explanation,
        )
        return decision, self.session.apply(decision.action).events

    def run(self, max_actions: int) -> LoopResult:
        """Take up to max_actions actions."""
        self.state = LoopState.RUNNING
        result = LoopResult(loop_state=self.state)

        while result.actions_taken < max_actions:
            decision, events = self.step()
            result.events.extend(events)
            result.explanations.append(decision.explanation)
            result.actions_taken += 1

        self.state = LoopState.BUDGET_EXHAUSTED
        result.loop_state = self.state
        return result
