"""Per-tick movement: look-ahead collision detection and the sliding move."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from reversal_snake.board import Board, Direction
from reversal_snake.snake import SnakeBody, SnakeSegment


class CollisionCause(str, enum.Enum):
    """Why a tick ended the game."""

    WALL = "wall"
    SELF = "self"


@dataclass(frozen=True)
class Collision:
    """A fatal move; nothing was mutated."""

    cause: CollisionCause


def plan_move(
    board: Board, body: SnakeBody, direction: Direction,
) -> SnakeSegment | Collision:
    """Compute the next head segment without moving.

    Returns a :class:`Collision` if the step leaves the board or lands on any
    occupied cell. The current tail counts as occupied: the check runs before
    the tail is released.
    """
    next_coord = board.coordinate_in_direction(body.head.coord, direction)
    if board.is_out_of_bounds(next_coord):
        return Collision(CollisionCause.WALL)

    next_cell = board.cell_id(next_coord)
    if body.occupies(next_cell):
        return Collision(CollisionCause.SELF)

    return SnakeSegment(next_coord, next_cell)


def commit_move(body: SnakeBody, new_head: SnakeSegment) -> SnakeSegment:
    """Advance onto *new_head* keeping the length constant.

    Returns the vacated tail segment. A single-segment body vacates its old
    head.
    """
    body.advance_head(new_head)
    return body.remove_tail()
