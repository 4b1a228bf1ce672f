"""In-memory session registry and async tick loops."""

from __future__ import annotations

import asyncio
import json
import logging
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from reversal_snake.board import Direction
from reversal_snake.config import GameConfig
from reversal_snake.server.models import GameSummary
from reversal_snake.session import GameSession, GameState, Snapshot

logger = logging.getLogger(__name__)


@dataclass
class GameInstance:
    """A session plus the connections and task driving it."""

    game_id: str
    session: GameSession
    connections: list[WebSocket] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    @property
    def tick_rate_ms(self) -> int:
        return self.session.config.tick_rate_ms

    def summary(self) -> GameSummary:
        return GameSummary(
            game_id=self.game_id,
            state=self.session.state,
            score=self.session.score,
            board_size=self.session.board.size,
            tick_rate_ms=self.tick_rate_ms,
        )


class GameManager:
    """Central registry managing all running sessions."""

    def __init__(self) -> None:
        self._games: dict[str, GameInstance] = {}

    def create_game(self, config: GameConfig) -> GameInstance:
        """Create a session and start its tick loop."""
        game_id = uuid.uuid4().hex[:12]
        instance = GameInstance(game_id=game_id, session=GameSession(config))
        self._games[game_id] = instance
        instance._task = asyncio.create_task(self._tick_loop(instance))
        logger.info(
            "Game %s created (board=%d, tick=%dms).",
            game_id, config.board_size, config.tick_rate_ms,
        )
        return instance

    def get_game(self, game_id: str) -> GameInstance | None:
        return self._games.get(game_id)

    def _require(self, game_id: str) -> GameInstance:
        game = self._games.get(game_id)
        if game is None:
            raise KeyError(f"Game {game_id} not found.")
        return game

    def list_games(self) -> list[GameSummary]:
        return [g.summary() for g in self._games.values()]

    async def set_direction(
        self, game_id: str, direction: Direction | str,
    ) -> bool:
        """Buffer a turn for the next tick of a game."""
        game = self._require(game_id)
        async with game.lock:
            return game.session.set_direction(direction)

    async def reset_game(self, game_id: str) -> Snapshot:
        """Restart a game and push the fresh snapshot to its connections.

        A tick loop that died on an error is started again.
        """
        game = self._require(game_id)
        async with game.lock:
            game.session.reset()
            snapshot = game.session.snapshot()
            if game._task is None or game._task.done():
                game._task = asyncio.create_task(self._tick_loop(game))
                logger.info("Tick loop restarted for game %s.", game_id)
        await self._broadcast(game, {"type": "snapshot", **snapshot.to_dict()})
        return snapshot

    async def remove_game(self, game_id: str) -> None:
        """Stop a game's tick loop and drop it from the registry."""
        game = self._games.pop(game_id, None)
        if game is None:
            raise KeyError(f"Game {game_id} not found.")
        await self._stop(game)
        await self._close_connections(game)
        logger.info("Game %s removed.", game_id)

    async def _tick_loop(self, game: GameInstance) -> None:
        """Run one tick per interval, broadcasting each result."""
        tick_interval = game.tick_rate_ms / 1000.0
        try:
            while True:
                await asyncio.sleep(tick_interval)
                async with game.lock:
                    if game.session.state is GameState.GAME_OVER:
                        continue
                    result = game.session.tick()
                await self._broadcast(game, {"type": "tick", **result.to_dict()})
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled for game %s.", game.game_id)
        except Exception:
            logger.exception("Tick loop error in game %s.", game.game_id)

    async def _stop(self, game: GameInstance) -> None:
        task = game._task
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

    async def _broadcast(self, game: GameInstance, message: dict) -> None:
        """Send a message to every connected socket of a game."""
        payload = json.dumps(message, separators=(",", ":"))
        dead: list[WebSocket] = []

        # Iterate over a snapshot so disconnect handlers can mutate the list.
        for ws in list(game.connections):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.send_text(payload)
            except Exception:
                dead.append(ws)

        for ws in dead:
            if ws in game.connections:
                game.connections.remove(ws)

    async def _close_connections(self, game: GameInstance) -> None:
        for ws in list(game.connections):
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Game removed.")
            except Exception:
                logger.warning("Failed closing socket in game %s.", game.game_id)
        game.connections.clear()

    async def cleanup(self) -> None:
        """Cancel all running tick loops."""
        for game in list(self._games.values()):
            await self._stop(game)
        logger.info("GameManager cleanup complete.")
