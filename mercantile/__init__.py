"""
Mercantile - Rules engine for a turn-based trading board game.

A deterministic engine: players roll and move tokens across a graph-shaped
board, trigger tile effects, and turn raw materials into products.
The engine provides:
- Immutable-by-copy state snapshots
- Legal action generation
- A reducer producing (new state, domain events)
- Seeded randomness for reproducible replays
"""

__version__ = "0.1.0"
