"""Reversal Snake — core game engine."""

from reversal_snake.board import Board, Coordinate, Direction
from reversal_snake.config import GameConfig
from reversal_snake.food import Food, FoodPlacer
from reversal_snake.movement import Collision, CollisionCause
from reversal_snake.session import GameSession, GameState, Snapshot, TickResult
from reversal_snake.snake import SnakeBody, SnakeSegment

__all__ = [
    "Board",
    "Collision",
    "CollisionCause",
    "Coordinate",
    "Direction",
    "Food",
    "FoodPlacer",
    "GameConfig",
    "GameSession",
    "GameState",
    "SnakeBody",
    "SnakeSegment",
    "Snapshot",
    "TickResult",
]
