"""
API Module - Front-end interface.

Exposes the engines via REST API. A front end:
1. Creates a session for one game
2. Dispatches abstract actions (moves, turns, ticks, clicks)
3. Renders the returned state snapshot
4. Ends the session so best scores are saved

The FastAPI app lives in `arcade.api.app` and is only built when that
module is imported.

All game state is session-scoped; only scores persist.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    ActionRequest,
    # Responses
    SessionResponse,
    ActionResponse,
    SolutionResponse,
    HintResponse,
    ErrorResponse,
    # Enums
    ErrorCode,
    GameType,
)
from .service import APIService, to_action

__all__ = [
    # Requests
    "CreateSessionRequest",
    "ActionRequest",
    # Responses
    "SessionResponse",
    "ActionResponse",
    "SolutionResponse",
    "HintResponse",
    "ErrorResponse",
    # Enums
    "ErrorCode",
    "GameType",
    # Service
    "APIService",
    "to_action",
]
