from backend.models.config import GameConfig
from backend.models.highscore import (
    HIGHSCORE_KEY,
    JsonFileBackend,
    KeyValueBackend,
    MemoryBackend,
    ScoreStore,
)
from backend.models.phase import SessionPhase, Verdict
from backend.models.tile import PALETTE_SIZE, Tile

__all__ = [
    "GameConfig",
    "HIGHSCORE_KEY",
    "JsonFileBackend",
    "KeyValueBackend",
    "MemoryBackend",
    "PALETTE_SIZE",
    "ScoreStore",
    "SessionPhase",
    "Tile",
    "Verdict",
]
