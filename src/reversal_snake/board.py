"""Board model: fixed square grid with row-major cell ids."""

from __future__ import annotations

import enum
from typing import NamedTuple

import numpy as np

MIN_BOARD_SIZE = 3


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value: object) -> Direction | None:
        """Return the direction named by *value*, or ``None`` if malformed."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return _BY_NAME.get(value.strip().lower())
        return None


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_BY_NAME: dict[str, Direction] = {d.name.lower(): d for d in Direction}


class Coordinate(NamedTuple):
    """A (row, col) position; may lie off the board."""

    row: int
    col: int


class Board:
    """Immutable ``size x size`` grid.

    Cell ids are assigned row-major starting at 1 and stored in a read-only
    NumPy array, so ``cells[row, col]`` is the id of that cell.
    """

    def __init__(self, size: int = 10) -> None:
        if size < MIN_BOARD_SIZE:
            raise ValueError(
                f"Board size must be at least {MIN_BOARD_SIZE}."
            )
        self.size = size
        self.cells = np.arange(1, size * size + 1, dtype=np.int64).reshape(
            size, size,
        )
        self.cells.flags.writeable = False

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def is_out_of_bounds(self, coord: Coordinate) -> bool:
        """Check whether either axis falls outside ``[0, size)``."""
        row, col = coord
        return not (0 <= row < self.size and 0 <= col < self.size)

    def cell_id(self, coord: Coordinate) -> int:
        """Return the id of an on-board coordinate."""
        if self.is_out_of_bounds(coord):
            raise ValueError(f"Coordinate {tuple(coord)} is off the board.")
        return int(self.cells[coord[0], coord[1]])

    def coordinate(self, cell_id: int) -> Coordinate:
        """Inverse of :meth:`cell_id`."""
        if not 1 <= cell_id <= self.cell_count:
            raise ValueError(f"Cell id {cell_id} is off the board.")
        row, col = divmod(cell_id - 1, self.size)
        return Coordinate(row, col)

    @staticmethod
    def coordinate_in_direction(
        coord: Coordinate, direction: Direction,
    ) -> Coordinate:
        """Return the coordinate one step from *coord* in *direction*."""
        dr, dc = direction.value
        return Coordinate(coord[0] + dr, coord[1] + dc)

    @staticmethod
    def direction_between(start: Coordinate, end: Coordinate) -> Direction:
        """Return the direction stepping from *start* to the adjacent *end*."""
        delta = (end[0] - start[0], end[1] - start[1])
        for direction in Direction:
            if direction.value == delta:
                return direction
        raise ValueError(
            f"Coordinates {tuple(start)} and {tuple(end)} are not adjacent."
        )
