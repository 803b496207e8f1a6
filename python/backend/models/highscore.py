"""High score persistence."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

HIGHSCORE_KEY = "neuroaura_game_highscore"


class KeyValueBackend(Protocol):
    """Minimal persistence primitive: one integer per key."""

    def get(self, key: str) -> int | None: ...

    def set(self, key: str, value: int) -> None: ...


class MemoryBackend:
    """Keeps values in a dict for the lifetime of the process."""

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self.values: dict[str, int] = dict(initial or {})
        self.writes: list[tuple[str, int]] = []

    def get(self, key: str) -> int | None:
        return self.values.get(key)

    def set(self, key: str, value: int) -> None:
        self.values[key] = value
        self.writes.append((key, value))


class JsonFileBackend:
    """Stores values in a flat JSON object file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath

    # -- persistence ----------------------------------------------------------

    def _read(self) -> dict[str, int]:
        if not self.filepath.exists():
            return {}
        data = json.loads(self.filepath.read_text())
        if not isinstance(data, dict):
            raise ValueError(f"{self.filepath} does not hold a JSON object.")
        return data

    def get(self, key: str) -> int | None:
        value = self._read().get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Stored value for {key!r} is not an integer: {value!r}")
        return value

    def set(self, key: str, value: int) -> None:
        try:
            data = self._read()
        except ValueError:
            logger.warning("Discarding unreadable score file %s", self.filepath)
            data = {}
        data[key] = value
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")


class ScoreStore:
    """Loads and saves the single best score.

    Storage failures never reach the caller: a failed ``load`` reads as 0
    and a failed ``save`` is logged and dropped.
    """

    def __init__(self, backend: KeyValueBackend, key: str = HIGHSCORE_KEY) -> None:
        self.backend = backend
        self.key = key

    def load(self) -> int:
        try:
            value = self.backend.get(self.key)
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("High score unavailable, using 0: %s", exc)
            return 0
        return 0 if value is None else value

    def save(self, value: int) -> None:
        try:
            self.backend.set(self.key, value)
        except (OSError, TypeError) as exc:
            logger.warning("Could not save high score %d: %s", value, exc)
            return
        logger.info("High score saved: %d", value)
