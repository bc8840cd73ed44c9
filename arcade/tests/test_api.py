"""
Tests for API layer.

Tests:
- API service methods
- HTTP endpoints via TestClient
- Error handling
"""

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.schemas import (
    ActionRequest,
    CreateSessionRequest,
    ErrorCode,
    ErrorResponse,
    SessionStatus,
)
from ..api.service import APIService, to_action
from ..engine_core.action import ActionType
from ..engine_core.grid import Direction
from ..session import MemoryScoreStore, SessionManager


class TestAPIService:
    """Tests for APIService."""

    @pytest.fixture
    def service(self):
        """Create a fresh API service."""
        return APIService(session_manager=SessionManager(store=MemoryScoreStore()))

    def test_create_session(self, service):
        """Can create a 2048 session via the service."""
        response = service.create_session(CreateSessionRequest(game="2048", seed=3))
        assert response.session_id
        assert response.status == SessionStatus.ACTIVE
        assert response.state["status"] == "playing"
        assert response.scoreboard is None

    def test_tictactoe_session_has_scoreboard(self, service):
        response = service.create_session(CreateSessionRequest(game="tictactoe"))
        assert response.scoreboard == {"X": 0, "O": 0, "draws": 0}

    def test_get_nonexistent_session(self, service):
        """Getting nonexistent session returns error."""
        response = service.get_session("nonexistent-id")
        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.SESSION_NOT_FOUND

    def test_dispatch(self, service):
        session_id = service.create_session(CreateSessionRequest(game="tictactoe")).session_id
        response = service.dispatch(session_id, ActionRequest(type="play", index=4))
        assert response.accepted
        assert response.state["board"][4] == "X"
        assert response.state["current"] == "O"

    def test_ignored_dispatch(self, service):
        session_id = service.create_session(CreateSessionRequest(game="lights_out")).session_id
        response = service.dispatch(session_id, ActionRequest(type="click", index=0))
        assert not response.accepted
        assert response.changes == []

    def test_unsupported_action(self, service):
        session_id = service.create_session(CreateSessionRequest(game="2048")).session_id
        response = service.dispatch(session_id, ActionRequest(type="click", index=0))
        assert response.error_code == ErrorCode.NOT_SUPPORTED
        assert "move" in response.details["supported"]

    def test_invalid_snapshot(self, service):
        session_id = service.create_session(CreateSessionRequest(game="snake")).session_id
        response = service.dispatch(session_id, ActionRequest(type="load", snapshot={"score": 1}))
        assert response.error_code == ErrorCode.INVALID_SNAPSHOT
        assert response.details == {"field": "snake"}

    def test_solution_only_for_lights_out(self, service):
        session_id = service.create_session(CreateSessionRequest(game="snake")).session_id
        response = service.solution(session_id)
        assert response.error_code == ErrorCode.NOT_SUPPORTED

    def test_solution_and_hint(self, service):
        session_id = service.create_session(CreateSessionRequest(game="lights_out", seed=8)).session_id
        service.dispatch(session_id, ActionRequest(type="new_game"))
        solution = service.solution(session_id)
        assert solution.solvable
        assert solution.moves == len(solution.indices)

        hint = service.hint(session_id)
        if solution.indices:
            assert hint.index == solution.indices[0]
        else:
            assert hint.index is None

    def test_end_session(self, service):
        session_id = service.create_session(CreateSessionRequest(game="snake")).session_id
        assert service.end_session(session_id)
        assert session_id not in service.list_sessions()


class TestToAction:
    def test_direction_is_converted(self):
        action = to_action(ActionRequest(type="move", direction="up"))
        assert action.action_type is ActionType.MOVE
        assert action.payload.direction is Direction.UP

    def test_new_game_flag(self):
        action = to_action(ActionRequest(type="new_game", alternate_starter=True))
        assert action.payload.alternate_starter


class TestHTTP:
    """End-to-end through FastAPI."""

    @pytest.fixture
    def client(self):
        service = APIService(session_manager=SessionManager(store=MemoryScoreStore()))
        return TestClient(create_app(service))

    def create(self, client, game, seed=None) -> str:
        response = client.post("/api/v1/sessions", json={"game": game, "seed": seed})
        assert response.status_code == 200
        return response.json()["session_id"]

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_and_get(self, client):
        session_id = self.create(client, "2048", seed=1)
        response = client.get(f"/api/v1/sessions/{session_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["game"] == "2048"
        assert len(body["state"]["board"]) == 16

    def test_unknown_game_rejected(self, client):
        response = client.post("/api/v1/sessions", json={"game": "chess"})
        assert response.status_code == 422

    def test_session_not_found(self, client):
        response = client.get("/api/v1/sessions/missing")
        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_play_2048(self, client):
        session_id = self.create(client, "2048", seed=4)
        response = client.post(f"/api/v1/sessions/{session_id}/actions", json={"type": "new_game"})
        assert response.status_code == 200
        tiles = [v for v in response.json()["state"]["board"] if v]
        assert len(tiles) == 2

    def test_tictactoe_round(self, client):
        session_id = self.create(client, "tictactoe")
        for index in [0, 3, 1, 4, 2]:
            response = client.post(
                f"/api/v1/sessions/{session_id}/actions",
                json={"type": "play", "index": index},
            )
        body = response.json()
        assert body["state"]["status"] == "x_won"
        assert body["state"]["win_line"] == [0, 1, 2]

        session = client.get(f"/api/v1/sessions/{session_id}").json()
        assert session["scoreboard"]["X"] == 1

    def test_unsupported_action_is_400(self, client):
        session_id = self.create(client, "snake")
        response = client.post(
            f"/api/v1/sessions/{session_id}/actions",
            json={"type": "play", "index": 0},
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "NOT_SUPPORTED"

    def test_bad_snapshot_is_400(self, client):
        session_id = self.create(client, "lights_out")
        response = client.post(
            f"/api/v1/sessions/{session_id}/actions",
            json={"type": "load", "snapshot": {"moves": 2}},
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_SNAPSHOT"

    def test_bad_direction_is_422(self, client):
        session_id = self.create(client, "2048")
        response = client.post(
            f"/api/v1/sessions/{session_id}/actions",
            json={"type": "move", "direction": "sideways"},
        )
        assert response.status_code == 422

    def test_solution_endpoint(self, client):
        session_id = self.create(client, "lights_out", seed=2)
        client.post(f"/api/v1/sessions/{session_id}/actions", json={"type": "new_game"})
        response = client.get(f"/api/v1/sessions/{session_id}/solution")
        assert response.status_code == 200
        assert response.json()["solvable"]

    def test_unsolvable_board(self, client):
        """A lone corner light on 5x5 has no solution and no hint."""
        session_id = self.create(client, "lights_out")
        board = [False] * 25
        board[0] = True
        client.post(
            f"/api/v1/sessions/{session_id}/actions",
            json={"type": "load", "snapshot": {"board": board, "status": "playing"}},
        )
        assert client.get(f"/api/v1/sessions/{session_id}/solution").json()["solvable"] is False
        assert client.get(f"/api/v1/sessions/{session_id}/hint").json()["index"] is None

    def test_hint_not_supported(self, client):
        session_id = self.create(client, "2048")
        response = client.get(f"/api/v1/sessions/{session_id}/hint")
        assert response.status_code == 400

    def test_list_and_end(self, client):
        session_id = self.create(client, "snake")
        assert session_id in client.get("/api/v1/sessions").json()["sessions"]

        response = client.delete(f"/api/v1/sessions/{session_id}")
        assert response.json() == {"success": True, "session_id": session_id}
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
