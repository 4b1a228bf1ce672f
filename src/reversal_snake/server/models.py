"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from reversal_snake.session import GameState


class CreateGameRequest(BaseModel):
    """Request body for POST /games."""

    board_size: int = Field(default=10, ge=3, le=100)
    tick_rate_ms: int = Field(default=150, ge=50, le=2000)
    reversal_probability: float = Field(default=0.3, ge=0.0, le=1.0)
    auto_reset: bool = False
    seed: int | None = None


class DirectionRequest(BaseModel):
    """Request body for POST /games/{game_id}/direction."""

    direction: str = Field(min_length=1, max_length=16)


class DirectionResponse(BaseModel):
    """Whether a buffered turn was accepted."""

    accepted: bool
    direction: str


class GameSummary(BaseModel):
    """Compact game info for list endpoints."""

    game_id: str
    state: GameState
    score: int
    board_size: int
    tick_rate_ms: int
