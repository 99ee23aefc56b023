"""
Britain Board - Raw data for the demo area.

Layout (row, col):

    ST    TEX  MKT  COAL  TAX
    EVT   .    WOOL .     MINT
    ORE   .    EVT  .     TEX
    PORT-A ARM BR   TAX   COP

The ring runs clockwise from ST. At MKT (0,2) a branch cuts south
through the Midlands and rejoins the ring at BR (3,2).
"""

from __future__ import annotations
from typing import Any

from ...board_schema.models import load_board, parse_setup
from ...engine_core.board import GameData
from ...engine_core.setup import GameSetup

_RING = [
    (0, 0), (0, 1), (0, 2), (0, 3), (0, 4),
    (1, 4), (2, 4), (3, 4),
    (3, 3), (3, 2), (3, 1), (3, 0),
    (2, 0), (1, 0),
]

_MIDLANDS = [(0, 2), (1, 2), (2, 2), (3, 2)]


def _path_edges(path: list[tuple[int, int]], closed: bool) -> list[dict[str, Any]]:
    stops = path + [path[0]] if closed else path
    return [
        {"from": list(a), "to": list(b)}
        for a, b in zip(stops, stops[1:])
    ]


BRITAIN_BOARD: dict[str, Any] = {
    "areas": {
        "UK": {
            "id": "UK",
            "name": "United Kingdom",
            "grid": [
                ["ST", "TEX", "MKT", "COAL", "TAX"],
                ["EVT", None, "WOOL", None, "MINT"],
                ["ORE", None, "EVT", None, "TEX"],
                ["PORT-A", "ARM", "BR", "TAX", "COP"],
            ],
            "edges": _path_edges(_RING, closed=True) + _path_edges(_MIDLANDS, closed=False),
        },
    },
}

BRITAIN_SETUP: dict[str, Any] = {
    "seed": 1,
    "player_names": ["Alice", "Bob"],
    "start_area_id": "UK",
    "start_row": 0,
    "start_col": 0,
}


def britain_board() -> GameData:
    return load_board(BRITAIN_BOARD)


def britain_setup(seed: int | None = None, player_names: list[str] | None = None) -> GameSetup:
    """Default setup, optionally with another seed or other players."""
    raw = dict(BRITAIN_SETUP)
    if seed is not None:
        raw["seed"] = seed
    if player_names:
        raw["player_names"] = player_names
    return parse_setup(raw)
