"""
Score Store - Key-value persistence for best scores and scoreboards.

The store:
- Is injected into sessions, never a process-wide singleton
- Is only touched at session boundaries (create / save / end)
- Holds JSON-serializable values under keys like "2048:best" or
  "tictactoe:scores:bolt"

Two implementations: in-memory (default, and for tests) and a simple
file-based store with one JSON file per key.
"""

from __future__ import annotations
import hashlib
import json
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def best_key(game: str) -> str:
    return f"{game}:best"


def scoreboard_key(game: str, mode: str) -> str:
    return f"{game}:scores:{mode}"


class ScoreStore(ABC):
    """Abstract key-value store."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        ...


class MemoryScoreStore(ScoreStore):
    """Dict-backed store. Values are JSON round-tripped so callers can't alias them."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        return default if raw is None else json.loads(raw)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class FileScoreStore(ScoreStore):
    """
    File-based store.

    Usage:
        store = FileScoreStore(scores_dir="~/.arcade/scores")
        store.put("2048:best", 10240)
        store.get("2048:best")  # 10240
    """

    def __init__(self, scores_dir: str | Path | None = None):
        if scores_dir is None:
            scores_dir = Path.home() / ".arcade" / "scores"
        self.scores_dir = Path(scores_dir).expanduser()

        # Ensure the directory exists
        self.scores_dir.mkdir(parents=True, exist_ok=True)

    def get(self, key: str, default: Any = None) -> Any:
        path = self._get_path(key)
        if not path.exists():
            return default

        try:
            with open(path, encoding="utf-8") as f:
                entry = json.load(f)
            return entry["value"]
        except (OSError, ValueError, KeyError):
            # Unreadable entry, drop it
            logger.warning("Discarding unreadable score entry %s", path)
            path.unlink(missing_ok=True)
        return default

    def put(self, key: str, value: Any) -> None:
        entry = {"key": key, "value": value, "updated_at": time.time()}
        with open(self._get_path(key), "w", encoding="utf-8") as f:
            json.dump(entry, f, indent=2)

    def delete(self, key: str) -> None:
        self._get_path(key).unlink(missing_ok=True)

    def keys(self) -> list[str]:
        found = []
        for path in self.scores_dir.glob("*.json"):
            try:
                with open(path, encoding="utf-8") as f:
                    found.append(json.load(f)["key"])
            except (OSError, ValueError, KeyError):
                continue
        return sorted(found)

    def clear(self) -> None:
        for path in self.scores_dir.glob("*.json"):
            path.unlink(missing_ok=True)

    def _get_path(self, key: str) -> Path:
        """Keys contain ':' so files are named by a truncated SHA-256 of the key."""
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()[:16]
        return self.scores_dir / f"{digest}.json"
