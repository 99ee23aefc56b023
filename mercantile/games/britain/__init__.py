"""
Britain - Small demo board.

One area laid out as a ring around the Midlands with a single
branch at the market, enough to exercise every movement path:
- Automatic steps along the ring
- A two-way branch choice
- Tax, mint and event tiles
"""

from .board import BRITAIN_BOARD, BRITAIN_SETUP, britain_board, britain_setup

__all__ = [
    "BRITAIN_BOARD",
    "BRITAIN_SETUP",
    "britain_board",
    "britain_setup",
]
