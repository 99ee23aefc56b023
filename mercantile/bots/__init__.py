"""
Bots module - Automated players.

Provides:
- BotPolicy: Interface for bot decision-making
- RandomPolicy: Seeded uniform choice
- FirstLegalPolicy: Deterministic baseline
- FactoryFirstPolicy: Crafts, rolls once, ends turn
"""

from .policy import (
    BotPolicy,
    BotDecision,
    RandomPolicy,
    FirstLegalPolicy,
    FactoryFirstPolicy,
)

__all__ = [
    "BotPolicy",
    "BotDecision",
    "RandomPolicy",
    "FirstLegalPolicy",
    "FactoryFirstPolicy",
]
