"""
Seeded RNG - Deterministic integer source for dice and random tile effects.

Two SeededRNG instances built from the same seed and asked the same
sequence of questions return the same answers. Replays depend on it.
"""

from __future__ import annotations
from typing import Protocol, Sequence, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .state import GameState

T = TypeVar("T")

_MODULUS = 2 ** 32
_MULTIPLIER = 1664525
_INCREMENT = 1013904223


class RNG(Protocol):
    """Anything that can hand out bounded integers."""

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        ...


class SeededRNG:
    """32-bit linear congruential generator."""

    def __init__(self, seed: int) -> None:
        self._state = seed % _MODULUS

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        """Return an integer N such that min_inclusive <= N < max_exclusive."""
        if max_exclusive <= min_inclusive:
            raise ValueError(
                f"Empty range: [{min_inclusive}, {max_exclusive})"
            )
        self._state = (_MULTIPLIER * self._state + _INCREMENT) % _MODULUS
        span = max_exclusive - min_inclusive
        return min_inclusive + (self._state * span) // _MODULUS

    def roll_die(self, sides: int = 6) -> int:
        """Roll a single die with faces 1..sides."""
        return self.next_int(1, sides + 1)

    def choice(self, seq: Sequence[T]) -> T:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return seq[self.next_int(0, len(seq))]


def derive_seed(seed: int, turn: int, active_player_index: int) -> int:
    """
    Seed used when a transition is applied without an explicit RNG.

    Tests rebuild expected dice from this, so keep it stable.
    """
    return seed + turn * 100 + active_player_index


def derive_rng(state: GameState) -> SeededRNG:
    """Build the fallback RNG for a state from (seed, turn, active index)."""
    return SeededRNG(derive_seed(state.seed, state.turn, state.active_player_index))
