"""Headless simulation of random-input games."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace

import numpy as np

from reversal_snake.board import Direction
from reversal_snake.config import GameConfig
from reversal_snake.session import GameSession

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Aggregate statistics from a batch of simulated games."""

    total_games: int
    total_ticks: int
    best_score: int
    total_reversals: int
    wall_deaths: int
    self_deaths: int
    wall_time_seconds: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Simulation: {self.total_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | best score {self.best_score}, "
            f"{self.total_reversals} reversals, "
            f"{self.wall_deaths} wall / {self.self_deaths} self deaths | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def simulate_games(
    *,
    num_games: int = 100,
    max_ticks: int = 500,
    turn_probability: float = 0.2,
    config: GameConfig | None = None,
    seed: int = 42,
) -> SimulationResult:
    """Play *num_games* with random turns and report what happened.

    Each tick the driver requests a random direction with probability
    *turn_probability*; illegal turns are rejected by the session as usual.
    Games stop at game over or after *max_ticks* ticks.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    base = config if config is not None else GameConfig()
    rng = np.random.default_rng(seed)

    total_ticks = 0
    best_score = 0
    reversals = 0
    deaths = {"wall": 0, "self": 0}
    start = time.perf_counter()

    for _ in range(num_games):
        session = GameSession(
            replace(base, seed=int(rng.integers(2**31)), auto_reset=False),
        )
        for _ in range(max_ticks):
            if rng.random() < turn_probability:
                session.set_direction(_DIRECTIONS[int(rng.integers(4))])
            result = session.tick()
            if result.game_over is not None:
                deaths[result.game_over.value] += 1
                break
            total_ticks += 1
            reversals += int(result.reversed)
            best_score = max(best_score, result.score)

    elapsed = time.perf_counter() - start
    result = SimulationResult(
        total_games=num_games,
        total_ticks=total_ticks,
        best_score=best_score,
        total_reversals=reversals,
        wall_deaths=deaths["wall"],
        self_deaths=deaths["self"],
        wall_time_seconds=elapsed,
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
