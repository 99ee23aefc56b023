"""
Action Generator - What the active player may do next.

Two situations:
- A move is paused at a fork: the only legal actions are the branch
  choices, one per distinct next cell
- Otherwise: roll, process any recipe the player can afford, or end
  the turn

Bots pick from this list, so anything listed here must be accepted
by the reducer.
"""

from __future__ import annotations
from dataclasses import dataclass

from .action import Action
from .board import GameData, outgoing_edges
from .recipes import craftable_recipes
from .state import GameState


@dataclass
class ActionGenerator:
    """Generates legal actions for the active player."""
    data: GameData

    def generate(self, state: GameState) -> list[Action]:
        """
        Generate all legal actions for the active player.

        While a move waits for a branch choice, only the branch choices
        are legal. Otherwise: roll, any craftable recipe, end turn.
        """
        player = state.active_player
        pending = state.pending_move

        if pending and pending.awaiting_choice and pending.player_id == player.player_id:
            return self._generate_choice_actions(state)

        actions = [Action.roll_move(player.player_id)]
        actions.extend(
            Action.process_factory(recipe_id, player.player_id)
            for recipe_id in craftable_recipes(player)
        )
        actions.append(Action.end_turn(player.player_id))
        return actions

    def _generate_choice_actions(self, state: GameState) -> list[Action]:
        """One CHOOSE_EDGE per distinct next cell."""
        player = state.active_player
        location = player.location
        return [
            Action.choose_edge(edge.target, player.player_id)
            for edge in outgoing_edges(self.data, location.area_id, location.coord)
        ]


def legal_actions(data: GameData, state: GameState) -> list[Action]:
    """Convenience function to list legal actions."""
    return ActionGenerator(data=data).generate(state)
