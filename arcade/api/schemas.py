"""
Pydantic Schemas for API - request/response models for OpenAPI.

These models define the contract between a front end and the engines.
Game state travels as the engine's own snapshot dict, so the same
payload can be fed back through a LOAD action.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- INVALID_SNAPSHOT: LOAD snapshot is missing a mandatory field or malformed
- NOT_SUPPORTED: Action or query does not apply to this game

Request bodies that fail validation (unknown game, action or direction)
are rejected by FastAPI with 422 before reaching the service.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class GameType(str, Enum):
    """Games hosted by the arcade."""
    GAME_2048 = "2048"
    SNAKE = "snake"
    TICTACTOE = "tictactoe"
    LIGHTS_OUT = "lights_out"


class ActionName(str, Enum):
    """Action names accepted by POST /actions."""
    NEW_GAME = "new_game"
    RESET = "reset"
    LOAD = "load"
    RESET_BEST = "reset_best"
    MOVE = "move"
    KEEP_PLAYING = "keep_playing"
    TURN = "turn"
    TICK = "tick"
    PAUSE = "pause"
    RESUME = "resume"
    PLAY = "play"
    UNDO = "undo"
    SET_MODE = "set_mode"
    CLICK = "click"
    SET_SIZE = "set_size"


class DirectionName(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class SessionStatus(str, Enum):
    ACTIVE = "active"
    ENDED = "ended"
    ABANDONED = "abandoned"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_SNAPSHOT = "INVALID_SNAPSHOT"
    NOT_SUPPORTED = "NOT_SUPPORTED"


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start hosting a game."""
    game: GameType
    seed: Optional[int] = Field(None, description="Seed for reproducible spawns and scrambles")


class ActionRequest(BaseModel):
    """
    One abstract action. Only the fields the action needs are read:
    `direction` for move/turn, `index` for play/click, `mode` for
    set_mode, `size` for set_size, `snapshot` for load.
    """
    type: ActionName
    direction: Optional[DirectionName] = None
    index: Optional[int] = Field(None, ge=0)
    mode: Optional[str] = Field(None, description="classic or bolt")
    size: Optional[int] = Field(None, ge=1)
    alternate_starter: bool = False
    snapshot: Optional[dict[str, Any]] = None


# =============================================================================
# Response Models
# =============================================================================

class SessionResponse(BaseModel):
    """A session and its current game state."""
    session_id: str
    game: GameType
    status: SessionStatus
    created_at: float
    actions_applied: int = 0
    state: dict[str, Any] = Field(default_factory=dict, description="Engine snapshot")
    scoreboard: Optional[dict[str, int]] = Field(None, description="Tic-Tac-Toe wins/draws for the current mode")
    api_version: str = "v1"


class ActionResponse(BaseModel):
    """Outcome of dispatching an action."""
    session_id: str
    accepted: bool = Field(description="False when the engine ignored the action")
    changes: list[str] = Field(default_factory=list)
    state: dict[str, Any] = Field(default_factory=dict)


class SolutionResponse(BaseModel):
    """Optimal Lights Out press set for the current board."""
    session_id: str
    solvable: bool
    indices: list[int] = Field(default_factory=list)
    moves: Optional[int] = None


class HintResponse(BaseModel):
    """Single suggested press, or null when no hint is available."""
    session_id: str
    index: Optional[int] = None


class SessionListResponse(BaseModel):
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error payload."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
