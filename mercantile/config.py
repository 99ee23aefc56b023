"""
Configuration - Environment-driven settings for the CLI and sessions.

Environment variables:
    MERCANTILE_LOG_LEVEL   logging level name (default WARNING)
    MERCANTILE_SEED        default game seed (default 1)
    MERCANTILE_BOARD_FILE  JSON board file to use instead of the bundled board
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os


@dataclass(frozen=True)
class EngineConfig:
    log_level: str = "WARNING"
    seed: int = 1
    board_file: str | None = None

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Read settings from MERCANTILE_* variables."""
        seed = os.getenv("MERCANTILE_SEED", "1")
        try:
            seed_value = int(seed)
        except ValueError:
            raise ValueError(f"MERCANTILE_SEED must be an integer, got {seed!r}") from None

        return cls(
            log_level=os.getenv("MERCANTILE_LOG_LEVEL", "WARNING").upper(),
            seed=seed_value,
            board_file=os.getenv("MERCANTILE_BOARD_FILE") or None,
        )

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.WARNING),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
