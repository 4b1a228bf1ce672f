"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from reversal_snake.board import Board

logger = logging.getLogger(__name__)

DEFAULT_REVERSAL_PROBABILITY = 0.3

# Rejected draws tolerated before sampling from the free cells directly.
_MAX_REJECTIONS = 64


@dataclass(frozen=True)
class Food:
    """The active food cell together with its reversal flag."""

    cell: int
    reversed: bool = False

    def to_dict(self) -> dict:
        return {"cell": self.cell, "reversed": self.reversed}


class FoodPlacer:
    """Chooses food cells on a board.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
        reversal_probability: float = DEFAULT_REVERSAL_PROBABILITY,
    ) -> None:
        if not 0.0 <= reversal_probability <= 1.0:
            raise ValueError("reversal_probability must be within [0, 1].")
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.reversal_probability = reversal_probability

    def initial(
        self, start_cell: int, occupied: Collection[int], offset: int = 5,
    ) -> Food | None:
        """Place the opening food *offset* cells after the start cell.

        Falls back to a random placement when that cell is off the board or
        occupied. The opening food never reverses the snake.
        """
        cell = start_cell + offset
        if cell <= self.board.cell_count and cell not in occupied:
            return Food(cell)
        food = self.place(occupied)
        if food is None:
            return None
        return Food(food.cell)

    def place(
        self, occupied: Collection[int], previous: int | None = None,
    ) -> Food | None:
        """Pick a uniformly random valid cell and decide its reversal flag.

        A cell is valid if it is unoccupied and differs from *previous*.
        Returns ``None`` when no valid cell is left.
        """
        cell = self._draw(occupied, previous)
        if cell is None:
            logger.warning("No free cell available for food placement.")
            return None
        reversed_ = bool(self.rng.random() < self.reversal_probability)
        return Food(cell, reversed_)

    def _draw(
        self, occupied: Collection[int], previous: int | None,
    ) -> int | None:
        high = self.board.cell_count
        for _ in range(_MAX_REJECTIONS):
            cell = int(self.rng.integers(1, high, endpoint=True))
            if cell not in occupied and cell != previous:
                return cell

        # Board nearly full: choose among what is left.
        free = [
            c for c in range(1, high + 1)
            if c not in occupied and c != previous
        ]
        if not free:
            return None
        return free[int(self.rng.integers(len(free)))]
