"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from reversal_snake.board import MIN_BOARD_SIZE
from reversal_snake.food import DEFAULT_REVERSAL_PROBABILITY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings for a single game session.

    Supports JSON serialization for reproducibility.
    """

    board_size: int = 10
    tick_rate_ms: int = 150
    reversal_probability: float = DEFAULT_REVERSAL_PROBABILITY
    food_offset: int = 5
    auto_reset: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.board_size < MIN_BOARD_SIZE:
            raise ValueError(
                f"board_size must be at least {MIN_BOARD_SIZE}."
            )
        if self.tick_rate_ms <= 0:
            raise ValueError("tick_rate_ms must be positive.")
        if not 0.0 <= self.reversal_probability <= 1.0:
            raise ValueError("reversal_probability must be within [0, 1].")
        if self.food_offset < 1:
            raise ValueError("food_offset must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
