"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from reversal_snake.board import Direction
from reversal_snake.server.game_manager import GameManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> GameManager:
    return ws.app.state.game_manager


@ws_router.websocket("/games/{game_id}/play")
async def play(websocket: WebSocket, game_id: str) -> None:
    """Send directions, receive every tick result."""
    manager = _get_manager(websocket)
    game = manager.get_game(game_id)
    if game is None:
        await websocket.close(code=4004, reason="Game not found.")
        return

    await websocket.accept()
    game.connections.append(websocket)
    logger.info("Client connected to game %s.", game_id)

    # Send initial state snapshot so the client can render immediately.
    snapshot = game.session.snapshot()
    await websocket.send_text(
        json.dumps(
            {"type": "snapshot", **snapshot.to_dict()}, separators=(",", ":"),
        ),
    )

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("action") == "reset":
                try:
                    await manager.reset_game(game_id)
                except KeyError:
                    await websocket.close(code=4004, reason="Game not found.")
                    return
                continue

            direction = Direction.parse(msg.get("direction"))
            if direction is None:
                continue

            async with game.lock:
                game.session.set_direction(direction)
    except WebSocketDisconnect:
        logger.info("Client disconnected from game %s.", game_id)
    finally:
        if websocket in game.connections:
            game.connections.remove(websocket)
