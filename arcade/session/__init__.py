"""
Session Module - Owns running games.

A session represents one game being played:
- Created for a single game kind
- Holds the current engine state and applies actions in order
- Loads best scores from the score store when created
- Saves them back when it ends

The score store is the only persistence in the system.
"""

from .manager import SessionManager, Session, SessionState, GAMES_WITH_BEST
from .store import ScoreStore, MemoryScoreStore, FileScoreStore, best_key, scoreboard_key

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GAMES_WITH_BEST",
    "ScoreStore",
    "MemoryScoreStore",
    "FileScoreStore",
    "best_key",
    "scoreboard_key",
]
