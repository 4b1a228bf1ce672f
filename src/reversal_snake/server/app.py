"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from reversal_snake.server.game_manager import GameManager
from reversal_snake.server.routes import router
from reversal_snake.server.websocket import ws_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    yield
    # Stop every tick loop before the event loop goes away.
    await app.state.game_manager.cleanup()
    logger.info("Reversal Snake API shut down.")


def create_app(manager: GameManager | None = None) -> FastAPI:
    """Build the FastAPI application around a session registry.

    Pass *manager* to share one registry with the caller, e.g. to inspect
    sessions from tests; otherwise a fresh one is created.
    """
    app = FastAPI(
        title="Reversal Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.state.game_manager = manager if manager is not None else GameManager()
    app.include_router(router)
    app.include_router(ws_router)
    return app
