"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (data, state, action) -> (new_state, events)
- Works on a deep copy; the caller's state is never touched
- Illegal actions raise immediately, nothing is partially applied
- Tile effects are delegated to the TileEffectRegistry
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable
import logging

from .action import Action, ActionResult, ActionType
from .board import Coord, GameData, outgoing_edges, tile_at
from .errors import ProtocolError
from .events import DomainEvent, EventType
from .recipes import apply_recipe
from .rng import RNG, derive_rng
from .state import GameState, PendingMove, PlayerState
from .tile_effects import GameRef, TileEffectRegistry, default_registry

logger = logging.getLogger(__name__)

CampaignHook = Callable[[GameState], None]


@dataclass
class _Transition:
    """Working set for one apply() call."""
    state: GameState
    rng: RNG
    events: list[DomainEvent] = field(default_factory=list)

    def emit(self, event_type: EventType, payload: dict[str, Any], turn: int | None = None) -> None:
        self.events.append(
            DomainEvent(
                type=event_type,
                turn=self.state.turn if turn is None else turn,
                payload=payload,
            )
        )


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    Board data and the tile effect registry provide the rules; without
    a registry the built-in TAX, MINT and EVT effects apply.

    campaign_hook, if set, is called with the working copy whenever a
    full round completes. Era, cycle and inflation progression belong
    to it; the reducer never changes them itself.
    """
    data: GameData
    tile_effects: TileEffectRegistry | None = None
    campaign_hook: CampaignHook | None = None

    def __post_init__(self):
        if self.tile_effects is None:
            self.tile_effects = default_registry()
        self.tile_effects.validate()

    def apply(self, state: GameState, action: Action, rng: RNG | None = None) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the new state and its events.
        Raises ProtocolError, ConfigurationError or InsufficientResourcesError.
        """
        handler = self._get_handler(action.action_type)
        if handler is None:
            raise ProtocolError(f"No handler for action type: {action.action_type}")

        work = _Transition(
            state=state.clone(),
            rng=rng if rng is not None else derive_rng(state),
        )
        self._validate_action(work.state, action)
        handler(work, action)

        logger.debug(
            "turn %d: %s applied, %d event(s)",
            state.turn, action.describe(), len(work.events),
        )
        return ActionResult(state=work.state, events=work.events)

    def _validate_action(self, state: GameState, action: Action) -> None:
        """Checks shared by every action type."""
        if not state.players:
            raise ProtocolError("No active player.")
        if not 0 <= state.active_player_index < state.num_players:
            raise ProtocolError(f"Active player index out of range: {state.active_player_index}")

        active = state.active_player
        pending = state.pending_move
        if pending and pending.player_id != active.player_id:
            raise ProtocolError("Pending move belongs to a non-active player.")

        if action.action_type == ActionType.NOOP:
            return
        if action.player_id is not None and action.player_id != active.player_id:
            raise ProtocolError(f"Not {action.player_id}'s turn")

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.ROLL_MOVE: self._handle_roll_move,
            ActionType.CHOOSE_EDGE: self._handle_choose_edge,
            ActionType.PROCESS_FACTORY: self._handle_process_factory,
            ActionType.END_TURN: self._handle_end_turn,
            ActionType.NOOP: self._handle_noop,
        }
        return handlers.get(action_type)

    def _handle_roll_move(self, work: _Transition, action: Action) -> None:
        """Roll 2d6 and walk as far as the board allows without a decision."""
        state = work.state
        if state.pending_move:
            raise ProtocolError("Cannot roll while a move is pending.")

        player = state.active_player
        d1 = work.rng.next_int(1, 7)
        d2 = work.rng.next_int(1, 7)
        steps = d1 + d2
        work.emit(
            EventType.DICE_ROLLED,
            {"player_id": player.player_id, "d1": d1, "d2": d2, "steps": steps},
        )

        state.pending_move = PendingMove(player_id=player.player_id, remaining=steps)
        self._auto_advance(work, player)

    def _handle_choose_edge(self, work: _Transition, action: Action) -> None:
        """Take the chosen branch, then keep walking."""
        state = work.state
        pending = state.pending_move
        if not pending or not pending.awaiting_choice:
            raise ProtocolError("No choice is awaited.")

        player = state.active_player
        if pending.player_id != player.player_id:
            raise ProtocolError("Choice action by non-owner.")
        if action.to is None:
            raise ProtocolError("CHOOSE_EDGE requires a destination.")

        location = player.location
        targets = [edge.target for edge in outgoing_edges(self.data, location.area_id, location.coord)]
        destination = (action.to[0], action.to[1])
        if destination not in targets:
            raise ProtocolError(f"Illegal edge choice: [{destination[0]},{destination[1]}]")

        self._move_to(work, player, destination)
        pending.remaining -= 1
        pending.awaiting_choice = False
        self._auto_advance(work, player)

    def _handle_process_factory(self, work: _Transition, action: Action) -> None:
        state = work.state
        if state.pending_move:
            raise ProtocolError("Cannot process while a move is pending.")
        if action.recipe is None:
            raise ProtocolError("PROCESS_FACTORY requires a recipe.")

        player = state.active_player
        recipe = apply_recipe(player, action.recipe)
        work.emit(
            EventType.FACTORY_PROCESSED,
            {"player_id": player.player_id, "recipe": recipe.recipe_id.value},
        )

    def _handle_end_turn(self, work: _Transition, action: Action) -> None:
        """Pass to the next seat; a full round bumps the turn counter."""
        state = work.state
        if state.pending_move:
            raise ProtocolError("Cannot end turn while a move is pending.")

        finished_turn = state.turn
        finished_player = state.active_player
        state.active_player_index = (state.active_player_index + 1) % state.num_players

        if state.active_player_index == 0:
            state.turn += 1
            if self.campaign_hook is not None:
                self.campaign_hook(state)

        work.emit(
            EventType.TURN_ENDED,
            {"player_id": finished_player.player_id},
            turn=finished_turn,
        )

    def _handle_noop(self, work: _Transition, action: Action) -> None:
        work.emit(EventType.NOOP, {"player_id": work.state.active_player.player_id})

    def _auto_advance(self, work: _Transition, player: PlayerState) -> None:
        """
        Walk single-successor cells until steps run out or a branch appears.

        The landing effect resolves once, at the end of the walk; a branch
        suspends the move with awaiting_choice set.
        """
        state = work.state
        pending = state.pending_move
        if pending is None:
            return

        while pending.remaining > 0:
            location = player.location
            edges = outgoing_edges(self.data, location.area_id, location.coord)

            if not edges:
                work.emit(EventType.MOVE_BLOCKED, {"player_id": player.player_id})
                state.pending_move = None
                self._resolve_landing(work)
                return

            if len(edges) >= 2:
                pending.awaiting_choice = True
                return

            self._move_to(work, player, edges[0].target)
            pending.remaining -= 1

        state.pending_move = None
        self._resolve_landing(work)

    def _move_to(self, work: _Transition, player: PlayerState, destination: Coord) -> None:
        """Step onto destination and re-sync the cached tile id."""
        location = player.location
        tile_id = tile_at(self.data, location.area_id, destination)

        location.row, location.col = destination
        location.tile_id = tile_id
        work.emit(
            EventType.MOVED,
            {"player_id": player.player_id, "to": destination, "tile_id": tile_id},
        )

    def _resolve_landing(self, work: _Transition) -> None:
        """Run the tile effect under the active player."""
        state = work.state
        player = state.active_player
        location = player.location
        location.tile_id = tile_at(self.data, location.area_id, location.coord)

        ref = GameRef(
            data=self.data,
            state=state,
            active_player_index=state.active_player_index,
            rng=work.rng,
            emit=work.emit,
        )
        self.tile_effects.resolve_on_land(location.tile_id, ref)


def apply_action(
    data: GameData,
    state: GameState,
    action: Action,
    rng: RNG | None = None,
) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer with the default tile effects and applies the action.
    """
    reducer = Reducer(data=data)
    return reducer.apply(state, action, rng=rng)
