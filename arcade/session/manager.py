"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. A session is created for one game; stored best scores are loaded
   into its initial state
2. The outer layer dispatches actions; the session applies them through
   the game's reducer and holds the returned state
3. The session ends; best scores and scoreboards are saved back to the
   store and the session is dropped

Each session is single-player and applies actions one at a time.
Persistence happens only at session boundaries, through the injected
ScoreStore.
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..engine_core.action import Action, ActionResult, ActionType
from ..engine_core.reducer import Reducer
from ..engine_core.rng import RandomSource, make_rng
from ..engine_core.state import EngineState
from ..games import GameKind, create_reducer
from ..games.tictactoe import GameStatus as TicTacToeStatus
from ..games.tictactoe import Mode
from .store import MemoryScoreStore, ScoreStore, best_key, scoreboard_key

logger = logging.getLogger(__name__)

# Games whose state carries a best score
GAMES_WITH_BEST = (GameKind.GAME_2048, GameKind.SNAKE)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"
    ENDED = "ended"
    ABANDONED = "abandoned"


def empty_scoreboard() -> dict[str, int]:
    return {"X": 0, "O": 0, "draws": 0}


@dataclass
class Session:
    """
    One game's controller.

    Owns the reducer and the current state; every change goes through
    dispatch(). Tic-Tac-Toe sessions also keep per-mode scoreboards.
    """
    session_id: str
    game: GameKind
    reducer: Reducer
    game_state: EngineState
    store: ScoreStore
    created_at: float

    state: SessionState = SessionState.ACTIVE
    actions_applied: int = 0
    scoreboards: dict[str, dict[str, int]] = field(default_factory=dict)

    def is_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def dispatch(self, action: Action) -> ActionResult:
        """
        Apply one action.

        A no-op (the reducer returned the same state object) is reported
        as not accepted and leaves the session untouched.
        """
        before = self.game_state
        after = self.reducer.apply(before, action)
        if after is before:
            return ActionResult.ignored(before)

        self.game_state = after
        self.actions_applied += 1
        changes = [action.action_type.value]

        status_before = getattr(before, "status", None)
        status_after = getattr(after, "status", None)
        if status_before is not status_after:
            changes.append(f"status: {status_before.value} -> {status_after.value}")
            # a restored snapshot is not a finished round
            if self.game is GameKind.TICTACTOE and action.action_type is not ActionType.LOAD:
                self._record_round(before, after)

        return ActionResult.applied(after, changes)

    def snapshot(self) -> dict[str, Any]:
        return self.game_state.to_snapshot()

    def scoreboard(self, mode: str | None = None) -> dict[str, int]:
        mode = mode or self.game_state.mode.value
        return self.scoreboards.setdefault(mode, empty_scoreboard())

    def reset_scoreboard(self, mode: str | None = None) -> None:
        mode = mode or self.game_state.mode.value
        self.scoreboards[mode] = empty_scoreboard()

    def load_scores(self) -> None:
        """Pull persisted best / scoreboards into the session."""
        if self.game in GAMES_WITH_BEST:
            best = self.store.get(best_key(self.game.value), 0)
            if isinstance(best, int) and best > 0:
                self.game_state = self.game_state._copy_with(best=best)
        elif self.game is GameKind.TICTACTOE:
            for mode in Mode:
                stored = self.store.get(scoreboard_key(self.game.value, mode.value))
                board = empty_scoreboard()
                if isinstance(stored, dict):
                    board.update({k: v for k, v in stored.items() if k in board and isinstance(v, int)})
                self.scoreboards[mode.value] = board

    def save(self) -> None:
        """Push best / scoreboards back to the store."""
        if self.game in GAMES_WITH_BEST:
            self.store.put(best_key(self.game.value), self.game_state.best)
        elif self.game is GameKind.TICTACTOE:
            for mode, board in self.scoreboards.items():
                self.store.put(scoreboard_key(self.game.value, mode), board)

    def _record_round(self, before: EngineState, after: EngineState) -> None:
        """Count a finished round once, when status leaves PLAYING."""
        if before.status is not TicTacToeStatus.PLAYING:
            return
        board = self.scoreboard(after.mode.value)
        if after.status is TicTacToeStatus.X_WON:
            board["X"] += 1
        elif after.status is TicTacToeStatus.O_WON:
            board["O"] += 1
        elif after.status is TicTacToeStatus.DRAW:
            board["draws"] += 1


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a seeded or unseeded random source
    - Track active sessions
    - Save scores and drop sessions when they end
    """

    def __init__(self, store: ScoreStore | None = None):
        self.store = store if store is not None else MemoryScoreStore()
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        game: GameKind | str,
        seed: int | None = None,
        rng: RandomSource | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            game: Which game to host
            seed: Seed for a fresh random source (ignored if rng is given)
            rng: Explicit random source

        Returns:
            New Session holding the game's initial state
        """
        game = GameKind(game)
        reducer = create_reducer(game, rng if rng is not None else make_rng(seed))

        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            reducer=reducer,
            game_state=reducer.initial_state(),
            store=self.store,
            created_at=time.time(),
        )
        session.load_scores()

        self._sessions[session.session_id] = session
        logger.info("Created %s session %s", game.value, session.session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session: save its scores and forget it.

        Returns False if there was no such session.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False

        session.save()
        session.state = SessionState.ENDED if reason == "completed" else SessionState.ABANDONED
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        End sessions older than max_age.

        Returns how many were ended.
        """
        now = time.time()
        stale = [
            sid for sid, session in self._sessions.items()
            if now - session.created_at > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
