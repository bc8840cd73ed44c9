"""
API Service - Business logic layer between API and engines.

The service:
1. Translates API requests to engine actions
2. Manages sessions
3. Answers Lights Out solver queries
4. Formats responses

This layer is framework-agnostic: failures come back as ErrorResponse
objects and the web layer decides on status codes.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from ..engine_core.action import Action, ActionPayload, ActionType
from ..engine_core.errors import SnapshotError
from ..engine_core.grid import Direction
from ..games import GameKind
from ..games.lights_out import cached_solve
from ..games.lights_out import hint as next_press
from ..session import Session, SessionManager
from .schemas import (
    ActionRequest,
    ActionResponse,
    CreateSessionRequest,
    ErrorCode,
    ErrorResponse,
    HintResponse,
    SessionResponse,
    SessionStatus,
    SolutionResponse,
)

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()
        session = service.create_session(CreateSessionRequest(game="2048", seed=7))
        result = service.dispatch(session.session_id, ActionRequest(type="new_game"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        session = self.session_manager.create_session(
            GameKind(request.game.value), seed=request.seed
        )
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        return self._session_to_response(session)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    def dispatch(self, session_id: str, request: ActionRequest) -> ActionResponse | ErrorResponse:
        """Apply one action to a session's game."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)

        action = to_action(request)
        if action.action_type not in session.reducer.supported_actions:
            return ErrorResponse(
                error=f"{request.type.value} is not an action for {session.game.value}",
                error_code=ErrorCode.NOT_SUPPORTED,
                details={"supported": sorted(a.value for a in session.reducer.supported_actions)},
            )

        try:
            result = session.dispatch(action)
        except SnapshotError as e:
            logger.info("Rejected snapshot for session %s: %s", session_id, e)
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.INVALID_SNAPSHOT,
                details={"field": e.field} if e.field else None,
            )

        return ActionResponse(
            session_id=session_id,
            accepted=result.accepted,
            changes=result.changes,
            state=result.new_state.to_snapshot(),
        )

    def solution(self, session_id: str) -> SolutionResponse | ErrorResponse:
        """Optimal press set for a Lights Out session."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        if session.game is not GameKind.LIGHTS_OUT:
            return _not_lights_out(session)

        state = session.game_state
        solved = cached_solve(state.board, state.size)
        if solved is None:
            return SolutionResponse(session_id=session_id, solvable=False)
        return SolutionResponse(
            session_id=session_id,
            solvable=True,
            indices=list(solved.indices),
            moves=solved.moves,
        )

    def hint(self, session_id: str) -> HintResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        if session.game is not GameKind.LIGHTS_OUT:
            return _not_lights_out(session)

        state = session.game_state
        return HintResponse(session_id=session_id, index=next_press(state.board, state.size))

    def _session_to_response(self, session: Session) -> SessionResponse:
        scoreboard = None
        if session.game is GameKind.TICTACTOE:
            scoreboard = dict(session.scoreboard())
        return SessionResponse(
            session_id=session.session_id,
            game=session.game.value,
            status=SessionStatus(session.state.value),
            created_at=session.created_at,
            actions_applied=session.actions_applied,
            state=session.snapshot(),
            scoreboard=scoreboard,
        )


def to_action(request: ActionRequest) -> Action:
    """Build an engine Action from the API request."""
    return Action(
        action_type=ActionType(request.type.value),
        payload=ActionPayload(
            direction=Direction(request.direction.value) if request.direction else None,
            index=request.index,
            mode=request.mode,
            size=request.size,
            alternate_starter=request.alternate_starter,
            snapshot=request.snapshot,
        ),
    )


def _not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"Session {session_id} not found",
        error_code=ErrorCode.SESSION_NOT_FOUND,
    )


def _not_lights_out(session: Session) -> ErrorResponse:
    return ErrorResponse(
        error=f"Solver is only available for lights_out, not {session.game.value}",
        error_code=ErrorCode.NOT_SUPPORTED,
    )
