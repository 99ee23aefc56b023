"""
Mercantile CLI - Command-line interface for the engine.

Usage:
    mercantile demo [--seed N] [--players A B] [--actions N] [--bot random|factory]
    mercantile validate <board_file>
    mercantile replay <actions_file> [--seed N] [--players A B]

The board defaults to the bundled Britain board; set
MERCANTILE_BOARD_FILE to use another one.
"""

import argparse
import json
import sys

from pydantic import ValidationError

from .config import EngineConfig
from .engine_core.errors import EngineError


def main(argv=None):
    """Main CLI entry point."""
    config = EngineConfig.from_env()
    config.configure_logging()

    parser = argparse.ArgumentParser(
        description="Mercantile - board game rules engine",
        prog="mercantile",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Play a bot game and print events")
    demo_parser.add_argument("--seed", type=int, default=config.seed, help="Game seed")
    demo_parser.add_argument("--players", nargs="+", default=["Alice", "Bob"], help="Player names")
    demo_parser.add_argument("--actions", type=int, default=20, help="Number of actions to play")
    demo_parser.add_argument(
        "--bot", choices=["random", "factory"], default="random", help="Bot policy"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a board file")
    validate_parser.add_argument("board_file", help="Path to board JSON")

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Replay a JSON action log")
    replay_parser.add_argument("actions_file", help="Path to action log JSON")
    replay_parser.add_argument("--seed", type=int, default=config.seed, help="Game seed")
    replay_parser.add_argument("--players", nargs="+", default=["Alice", "Bob"], help="Player names")

    args = parser.parse_args(argv)

    commands = {
        "demo": lambda: cmd_demo(args, config),
        "validate": lambda: cmd_validate(args),
        "replay": lambda: cmd_replay(args, config),
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    try:
        command()
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}")
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: Invalid input: {e}")
        sys.exit(1)
    except EngineError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _load_board(config: EngineConfig):
    from .board_schema import load_board_file
    from .games.britain import britain_board

    if config.board_file:
        return load_board_file(config.board_file)
    return britain_board()


def _setup(args, data, config: EngineConfig):
    from .games.britain import BRITAIN_SETUP
    from .engine_core import GameSetup

    if config.board_file:
        # External boards start at the first cell of their first area
        area_id = next(iter(data.areas))
        return GameSetup(args.seed, tuple(args.players), area_id, 0, 0)

    return GameSetup(
        seed=args.seed,
        player_names=tuple(args.players),
        start_area_id=BRITAIN_SETUP["start_area_id"],
        start_row=BRITAIN_SETUP["start_row"],
        start_col=BRITAIN_SETUP["start_col"],
    )


def _print_events(events):
    from .board_schema import EventModel

    for event in events:
        print(EventModel.from_event(event).model_dump_json())


def cmd_demo(args, config: EngineConfig):
    """Play a game between bots."""
    from .bots import RandomPolicy, FactoryFirstPolicy
    from .session import SessionManager, GameLoop

    data = _load_board(config)
    manager = SessionManager()
    session = manager.create_session(data, _setup(args, data, config))

    policies = {}
    for idx, player in enumerate(session.state.players):
        if args.bot == "factory":
            policies[player.player_id] = FactoryFirstPolicy()
        else:
            policies[player.player_id] = RandomPolicy(seed=args.seed + idx)

    result = GameLoop(session, policies).run(max_actions=args.actions)
    _print_events(result.events)
    _print_summary(session.state)
    manager.end_session(session.session_id)


def cmd_validate(args):
    """Validate a board file."""
    from .board_schema import load_board_file, validate_board

    try:
        data = load_board_file(args.board_file)
    except ValidationError as e:
        print(f"Invalid board file: {e}")
        sys.exit(1)

    result = validate_board(data)
    for warning in result.warnings:
        print(f"warning: {warning}")
    for error in result.errors:
        print(f"error: {error}")

    if result.valid:
        print(f"Board is valid ({len(data.areas)} area(s))")
    else:
        sys.exit(1)


def cmd_replay(args, config: EngineConfig):
    """Replay an action log from a fresh game."""
    from .board_schema import load_action_log
    from .engine_core import create_game
    from .session import replay

    data = _load_board(config)
    try:
        actions = load_action_log(args.actions_file)
    except ValidationError as e:
        print(f"Invalid action log: {e}")
        sys.exit(1)

    state, events = replay(data, create_game(data, _setup(args, data, config)), actions)
    _print_events(events)
    _print_summary(state)


def _print_summary(state):
    print(f"\nTurn {state.turn}, active player {state.active_player.player_id}")
    for player in state.players:
        loc = player.location
        print(
            f"  {player.player_id} {player.name}: "
            f"[{loc.row},{loc.col}] {loc.tile_id}  "
            f"copper={player.currency.copper_coin} silver={player.currency.silver_coin}"
        )


if __name__ == "__main__":
    main()
