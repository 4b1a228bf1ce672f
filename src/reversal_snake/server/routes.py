"""REST API route handlers for game lifecycle management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from reversal_snake.config import GameConfig
from reversal_snake.server.models import (
    CreateGameRequest,
    DirectionRequest,
    DirectionResponse,
    GameSummary,
)

router = APIRouter(prefix="/games", tags=["games"])


def _get_manager(request: Request):
    return request.app.state.game_manager


@router.post("", status_code=201)
async def create_game(body: CreateGameRequest, request: Request) -> GameSummary:
    """Create a game and start ticking it."""
    try:
        config = GameConfig(
            board_size=body.board_size,
            tick_rate_ms=body.tick_rate_ms,
            reversal_probability=body.reversal_probability,
            auto_reset=body.auto_reset,
            seed=body.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    game = _get_manager(request).create_game(config)
    return game.summary()


@router.get("")
async def list_games(request: Request) -> list[GameSummary]:
    return _get_manager(request).list_games()


@router.get("/{game_id}")
async def get_game(game_id: str, request: Request) -> dict:
    """Get the current snapshot of a game."""
    game = _get_manager(request).get_game(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    return {
        "game_id": game.game_id,
        "tick_rate_ms": game.tick_rate_ms,
        "snapshot": game.session.snapshot().to_dict(),
    }


@router.post("/{game_id}/direction")
async def set_direction(
    game_id: str, body: DirectionRequest, request: Request,
) -> DirectionResponse:
    """Buffer a turn for the next tick."""
    try:
        accepted = await _get_manager(request).set_direction(
            game_id, body.direction,
        )
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return DirectionResponse(accepted=accepted, direction=body.direction)


@router.post("/{game_id}/reset")
async def reset_game(game_id: str, request: Request) -> dict:
    """Restart a game from its initial state."""
    try:
        snapshot = await _get_manager(request).reset_game(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return snapshot.to_dict()


@router.delete("/{game_id}", status_code=204)
async def delete_game(game_id: str, request: Request) -> Response:
    """Stop a game's tick loop and discard it."""
    try:
        await _get_manager(request).remove_game(game_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
