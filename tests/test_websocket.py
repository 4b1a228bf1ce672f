"""WebSocket integration tests for real-time play."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from reversal_snake.server.app import create_app
from reversal_snake.server.game_manager import GameManager


@pytest.fixture()
def tc():
    """Starlette sync TestClient; entering it runs the app lifespan so the
    game manager and its tick loops share one event loop."""
    with TestClient(create_app()) as client:
        yield client


def _create_game(tc, tick_rate_ms=50, **extra):
    resp = tc.post(
        "/games", json={"tick_rate_ms": tick_rate_ms, "seed": 0, **extra},
    )
    assert resp.status_code == 201
    return resp.json()["game_id"]


def _receive_until(ws, message_type, limit=50):
    for _ in range(limit):
        msg = ws.receive_json()
        if msg.get("type") == message_type:
            return msg
    raise AssertionError(f"No {message_type!r} message received.")


class TestPlayWebSocket:
    def test_connect_and_receive_initial_snapshot(self, tc):
        game_id = _create_game(tc, tick_rate_ms=500)
        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            msg = ws.receive_json()
            assert msg["type"] == "snapshot"
            assert msg["occupied_cells"] == [34]
            assert msg["food_cell"] == 39
            assert msg["state"] == "running"

    def test_receives_ticks(self, tc):
        game_id = _create_game(tc)
        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            ws.receive_json()
            msg = _receive_until(ws, "tick")
            assert msg["tick"] >= 1
            assert "cells" in msg
            assert "score" in msg

    def test_direction_applies_on_next_tick(self, tc):
        game_id = _create_game(tc, tick_rate_ms=500)
        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            ws.receive_json()
            ws.send_text(json.dumps({"direction": "down"}))
            msg = _receive_until(ws, "tick")
            assert msg["tick"] == 1
            assert msg["cells"] == [44]

    def test_malformed_messages_ignored(self, tc):
        game_id = _create_game(tc)
        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            ws.receive_json()
            ws.send_text("not json")
            ws.send_text(json.dumps([1, 2]))
            ws.send_text(json.dumps({"direction": 5}))
            msg = _receive_until(ws, "tick")
            assert msg["tick"] >= 1

    def test_reset_action(self, tc):
        game_id = _create_game(tc)
        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            ws.receive_json()
            _receive_until(ws, "tick")
            ws.send_text(json.dumps({"action": "reset"}))
            msg = _receive_until(ws, "snapshot")
            assert msg["score"] == 0

    def test_nonexistent_game_rejected(self, tc):
        with pytest.raises(WebSocketDisconnect), tc.websocket_connect(
            "/games/nonexistent/play",
        ):
            pass

    def test_reset_after_game_removed_closes_socket(self):
        manager = GameManager()
        with TestClient(create_app(manager)) as client:
            game_id = _create_game(client, tick_rate_ms=2000)
            with client.websocket_connect(f"/games/{game_id}/play") as ws:
                ws.receive_json()
                # Drop the game behind the socket's back.
                game = manager._games.pop(game_id)
                try:
                    ws.send_text(json.dumps({"action": "reset"}))
                    with pytest.raises(WebSocketDisconnect) as exc_info:
                        ws.receive_json()
                    assert exc_info.value.code == 4004
                finally:
                    manager._games[game_id] = game


class TestGameOverBroadcast:
    def test_wall_hit_is_reported(self, tc):
        game_id = _create_game(tc)
        with tc.websocket_connect(f"/games/{game_id}/play") as ws:
            ws.receive_json()
            ws.send_text(json.dumps({"direction": "up"}))
            msg = _receive_until(ws, "tick")
            while "game_over" not in msg:
                msg = _receive_until(ws, "tick")
            assert msg["game_over"] in {"wall", "self"}
        snap = tc.get(f"/games/{game_id}").json()["snapshot"]
        assert snap["state"] == "game_over"
