"""Growth on food consumption and the direction-reversal mechanic."""

from __future__ import annotations

import logging

from reversal_snake.board import Board, Direction
from reversal_snake.snake import SnakeBody, SnakeSegment

logger = logging.getLogger(__name__)


def tail_direction(body: SnakeBody, heading: Direction) -> Direction:
    """Direction from the tail to the segment in front of it.

    A single-segment body has no neighbour, so the current heading is used.
    """
    neighbor = body.tail_neighbor
    if neighbor is None:
        return heading
    return Board.direction_between(body.tail.coord, neighbor.coord)


def grow(board: Board, body: SnakeBody, heading: Direction) -> bool:
    """Extend the tail straight back along its trajectory.

    Returns False when the growth cell is off the board or occupied; the snake
    simply does not lengthen this tick.
    """
    growth_direction = tail_direction(body, heading).opposite
    coord = board.coordinate_in_direction(body.tail.coord, growth_direction)
    if board.is_out_of_bounds(coord):
        logger.debug("Growth skipped: %s is off the board.", tuple(coord))
        return False

    cell = board.cell_id(coord)
    if body.occupies(cell):
        logger.debug("Growth skipped: cell %d is occupied.", cell)
        return False

    body.grow_at_tail(SnakeSegment(coord, cell))
    return True


def reverse(body: SnakeBody, heading: Direction) -> Direction:
    """Flip the body end-for-end and return the new heading.

    The old tail becomes the head and moves away from its neighbour.
    """
    new_heading = tail_direction(body, heading).opposite
    body.reverse()
    return new_heading
