"""
Bot Policies - Automated players for demos and soak tests.

A policy receives the current state plus the action generator's output
and picks one entry. Policies never construct actions of their own,
so a bot cannot submit anything the reducer would reject.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..engine_core.action import ActionType
from ..engine_core.rng import SeededRNG

if TYPE_CHECKING:
    from ..engine_core.action import Action
    from ..engine_core.state import GameState


@dataclass
class BotDecision:
    """The picked action, why it was picked, and how many options were weighed."""
    action: Action
    explanation: str = ""
    evaluated_actions: int = 0


def _require_options(options: list[Action]) -> None:
    if not options:
        raise ValueError("Policy was offered no legal actions")


class BotPolicy(ABC):
    """Base class for every bot."""

    @abstractmethod
    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        """
        Pick one of legal_actions for the active player.

        Raises ValueError when legal_actions is empty.
        """

    def get_name(self) -> str:
        return type(self).__name__


class RandomPolicy(BotPolicy):
    """Uniform pick driven by its own SeededRNG, so games are reproducible."""

    def __init__(self, seed: int = 0):
        self.rng = SeededRNG(seed)

    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        _require_options(legal_actions)
        return BotDecision(
            action=self.rng.choice(legal_actions),
            explanation="uniform pick",
            evaluated_actions=len(legal_actions),
        )


class FirstLegalPolicy(BotPolicy):
    """
    Takes whatever the generator lists first.

    Outside a branch that is always a roll, so this bot keeps rolling
    and never passes the turn. Handy for scripted tests.
    """

    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        _require_options(legal_actions)
        return BotDecision(legal_actions[0], "first offered", 1)


class FactoryFirstPolicy(BotPolicy):
    """
    Crafts whenever it can, rolls once per turn, then ends the turn.

    Branch choices take the first offered edge.
    """

    def __init__(self):
        self._rolled_on: tuple[int, int] | None = None

    def select_action(self, state: GameState, legal_actions: list[Action]) -> BotDecision:
        _require_options(legal_actions)

        by_type: dict[ActionType, list[Action]] = {}
        for action in legal_actions:
            by_type.setdefault(action.action_type, []).append(action)
        weighed = len(legal_actions)

        if ActionType.CHOOSE_EDGE in by_type:
            return BotDecision(by_type[ActionType.CHOOSE_EDGE][0], "took first branch", weighed)

        if ActionType.PROCESS_FACTORY in by_type:
            return BotDecision(by_type[ActionType.PROCESS_FACTORY][0], "processed materials", weighed)

        turn_key = (state.turn, state.active_player_index)
        if self._rolled_on != turn_key and ActionType.ROLL_MOVE in by_type:
            self._rolled_on = turn_key
            return BotDecision(by_type[ActionType.ROLL_MOVE][0], "rolled", weighed)

        return BotDecision(by_type[ActionType.END_TURN][0], "ended turn", weighed)
