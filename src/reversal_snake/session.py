"""Game session: owns all mutable game state and runs one tick at a time."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from reversal_snake import growth
from reversal_snake.board import Board, Coordinate, Direction
from reversal_snake.config import GameConfig
from reversal_snake.food import Food, FoodPlacer
from reversal_snake.movement import Collision, CollisionCause, commit_move, plan_move
from reversal_snake.snake import SnakeBody, SnakeSegment

logger = logging.getLogger(__name__)

INITIAL_DIRECTION = Direction.RIGHT


class GameState(str, enum.Enum):
    """Lifecycle states of a session."""

    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TickResult:
    """Outcome of one tick.

    Either ``game_over`` is set and nothing else is meaningful, or it is
    ``None`` and the remaining fields describe the committed state.
    """

    cells: tuple[int, ...] = ()
    food: Food | None = None
    score: int = 0
    tick: int = 0
    ate: bool = False
    grew: bool = False
    reversed: bool = False
    game_over: CollisionCause | None = None

    def to_dict(self) -> dict:
        if self.game_over is not None:
            return {"game_over": self.game_over.value, "tick": self.tick}
        return {
            "cells": list(self.cells),
            "food": self.food.to_dict() if self.food is not None else None,
            "score": self.score,
            "tick": self.tick,
            "ate": self.ate,
            "grew": self.grew,
            "reversed": self.reversed,
        }


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session for rendering."""

    occupied_cells: tuple[int, ...]
    food_cell: int | None
    food_reversed: bool
    score: int
    state: GameState
    direction: Direction
    head: Coordinate
    length: int
    tick: int
    board_size: int
    game_over_cause: CollisionCause | None = None
    segments: tuple[SnakeSegment, ...] = ()

    def to_dict(self) -> dict:
        return {
            "occupied_cells": list(self.occupied_cells),
            "food_cell": self.food_cell,
            "food_reversed": self.food_reversed,
            "score": self.score,
            "state": self.state.value,
            "direction": self.direction.name.lower(),
            "head": list(self.head),
            "segments": [seg.to_dict() for seg in self.segments],
            "length": self.length,
            "tick": self.tick,
            "board_size": self.board_size,
            "game_over_cause": (
                self.game_over_cause.value
                if self.game_over_cause is not None else None
            ),
        }


class GameSession:
    """Single-snake, tick-driven game.

    The session owns the board, snake body, food and score. Each call to
    :meth:`tick` either commits one whole step or reports game over without
    mutating anything. Input from :meth:`set_direction` is buffered and read
    at the start of the next tick.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.board = Board(self.config.board_size)
        self.rng = np.random.default_rng(self.config.seed)
        self.placer = FoodPlacer(
            self.board,
            rng=self.rng,
            reversal_probability=self.config.reversal_probability,
        )
        self.body = SnakeBody(self._start_segment())
        self.reset()

    def _start_segment(self) -> SnakeSegment:
        start = round(self.board.size / 3)
        coord = Coordinate(start, start)
        return SnakeSegment(coord, self.board.cell_id(coord))

    def reset(self) -> None:
        """Return to RUNNING with a fresh snake, food and score."""
        start = self._start_segment()
        self.body.initialize(start)
        self.food: Food | None = self.placer.initial(
            start.cell, self.body.cells, offset=self.config.food_offset,
        )
        self.score = 0
        self.tick_count = 0
        self.direction = INITIAL_DIRECTION
        self._pending_direction: Direction | None = None
        self.state = GameState.RUNNING
        self.game_over_cause: CollisionCause | None = None
        logger.info("Session reset (board %dx%d).", self.board.size, self.board.size)

    def set_direction(self, requested: Direction | str) -> bool:
        """Buffer a heading change for the next tick.

        Returns False when the input is malformed or would turn the snake
        straight back into its own neck.
        """
        direction = Direction.parse(requested)
        if direction is None:
            logger.debug("Ignoring invalid direction %r.", requested)
            return False
        if direction is self.direction.opposite and len(self.body) > 1:
            return False
        self._pending_direction = direction
        return True

    def tick(self) -> TickResult:
        """Advance the game by one step."""
        if self.state is GameState.GAME_OVER:
            return TickResult(game_over=self.game_over_cause, tick=self.tick_count)

        heading = self.direction
        if self._pending_direction is not None:
            heading = self._pending_direction
        planned = plan_move(self.board, self.body, heading)
        if isinstance(planned, Collision):
            return self._end_game(planned.cause)

        self._pending_direction = None
        self.direction = heading
        commit_move(self.body, planned)

        ate = self.food is not None and planned.cell == self.food.cell
        grew = reversed_ = False
        if ate:
            eaten = self.food
            grew = growth.grow(self.board, self.body, self.direction)
            if eaten.reversed:
                self.direction = growth.reverse(self.body, self.direction)
                reversed_ = True
            self.food = self.placer.place(self.body.cells, previous=eaten.cell)
            self.score += 1

        self.tick_count += 1
        return TickResult(
            cells=tuple(seg.cell for seg in self.body.segments()),
            food=self.food,
            score=self.score,
            tick=self.tick_count,
            ate=ate,
            grew=grew,
            reversed=reversed_,
        )

    def snapshot(self) -> Snapshot:
        """Return a read-only view of the current state."""
        return Snapshot(
            occupied_cells=tuple(sorted(self.body.cells)),
            food_cell=self.food.cell if self.food is not None else None,
            food_reversed=self.food.reversed if self.food is not None else False,
            score=self.score,
            state=self.state,
            direction=self.direction,
            head=self.body.head.coord,
            length=len(self.body),
            tick=self.tick_count,
            board_size=self.board.size,
            game_over_cause=self.game_over_cause,
            segments=tuple(self.body.segments()),
        )

    def _end_game(self, cause: CollisionCause) -> TickResult:
        self.state = GameState.GAME_OVER
        self.game_over_cause = cause
        logger.info(
            "Game over (%s collision) at tick %d with score %d.",
            cause.value, self.tick_count, self.score,
        )
        result = TickResult(game_over=cause, tick=self.tick_count)
        if self.config.auto_reset:
            self.reset()
        return result
