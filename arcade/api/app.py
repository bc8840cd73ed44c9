"""
FastAPI Application - REST API for arcade front ends.

Endpoints:
    POST   /api/v1/sessions                    Create game session
    GET    /api/v1/sessions                    List active sessions
    GET    /api/v1/sessions/{id}               Get session and state
    DELETE /api/v1/sessions/{id}               End session (saves scores)
    POST   /api/v1/sessions/{id}/actions       Dispatch an action
    GET    /api/v1/sessions/{id}/solution      Lights Out optimal solution
    GET    /api/v1/sessions/{id}/hint          Lights Out next press

The front end owns rendering, input, timers and animation. It sends
abstract actions (for Snake, one `tick` per timer fire at the state's
`speed_ms`) and renders the returned state snapshot.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union
import logging
import os

# Environment configuration
ARCADE_ENV = os.getenv("ARCADE_ENV", "development")
ARCADE_SCORES_DIR = os.getenv("ARCADE_SCORES_DIR", None)
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

logger = logging.getLogger(__name__)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Query
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .. import __version__
    from ..session import FileScoreStore, SessionManager
    from .service import APIService
    from .schemas import (
        # Request models
        ActionRequest,
        CreateSessionRequest,
        # Response models
        ActionResponse,
        EndSessionResponse,
        ErrorResponse,
        HealthResponse,
        HintResponse,
        SessionListResponse,
        SessionResponse,
        SolutionResponse,
        # Enums
        ErrorCode,
    )

    app = FastAPI(
        title="Arcade Engine API",
        description="""
Game engines for 2048, Snake, Tic-Tac-Toe and Lights Out.

## Flow

1. `POST /api/v1/sessions` with a `game` (and optional `seed`)
2. `POST /api/v1/sessions/{id}/actions` with `{"type": "new_game"}`
3. Keep dispatching actions; each response carries the new state
4. `DELETE /api/v1/sessions/{id}` to save best scores

Ignored actions come back with `accepted=false` and the unchanged state.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `INVALID_SNAPSHOT` | LOAD snapshot is malformed |
| `NOT_SUPPORTED` | Action or query does not apply to this game |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Service instance
    if service is None:
        store = FileScoreStore(scores_dir=ARCADE_SCORES_DIR) if ARCADE_SCORES_DIR else None
        service = APIService(session_manager=SessionManager(store=store))
    api_service = service
    logger.info("Arcade API starting (%s)", ARCADE_ENV)

    # =========================================================================
    # Error helpers
    # =========================================================================

    status_codes = {
        ErrorCode.SESSION_NOT_FOUND: 404,
    }

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code or status_codes.get(error_code, 400),
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def from_error(response: ErrorResponse) -> JSONResponse:
        return make_error_response(response.error_code, response.error, details=response.details)

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={422: {"description": "Unknown game type"}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(request: CreateSessionRequest) -> SessionResponse:
        """
        Create a new game session.

        The session starts in the game's initial state with stored best
        scores loaded. Send a `new_game` action to start playing.
        """
        return api_service.create_session(request)

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """List all active session IDs."""
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session and game state",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return from_error(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "completed",
    ) -> EndSessionResponse:
        """End a game session, saving best scores and scoreboards."""
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Loop
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/actions",
        response_model=ActionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Action not supported or bad snapshot"},
            404: {"model": ErrorResponse, "description": "Session not found"},
        },
        tags=["Game Loop"],
        summary="Dispatch an action",
    )
    async def dispatch_action(
        session_id: str,
        request: ActionRequest,
    ) -> Union[ActionResponse, JSONResponse]:
        """
        Apply one action to the session's game.

        **Examples:**
        ```json
        {"type": "move", "direction": "left"}
        {"type": "play", "index": 4}
        {"type": "new_game", "alternate_starter": true}
        ```
        """
        response = api_service.dispatch(session_id, request)
        if isinstance(response, ErrorResponse):
            return from_error(response)
        return response

    # =========================================================================
    # Solver Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/solution",
        response_model=SolutionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Not a Lights Out session"},
            404: {"model": ErrorResponse},
        },
        tags=["Solver"],
        summary="Minimum press set for the current board",
    )
    async def get_solution(session_id: str) -> Union[SolutionResponse, JSONResponse]:
        response = api_service.solution(session_id)
        if isinstance(response, ErrorResponse):
            return from_error(response)
        return response

    @app.get(
        "/api/v1/sessions/{session_id}/hint",
        response_model=HintResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Not a Lights Out session"},
            404: {"model": ErrorResponse},
        },
        tags=["Solver"],
        summary="Next press from the optimal solution",
    )
    async def get_hint(session_id: str) -> Union[HintResponse, JSONResponse]:
        response = api_service.hint(session_id)
        if isinstance(response, ErrorResponse):
            return from_error(response)
        return response

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="arcade-engine",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Arcade Engine API",
            "version": __version__,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn arcade.api.app:app
app = None
try:
    app = create_app()
except ImportError:
    # FastAPI not installed
    pass
