"""Session phases and validation verdicts."""

from __future__ import annotations

from enum import StrEnum


class SessionPhase(StrEnum):
    IDLE = "idle"
    PLAYBACK = "playback"
    AWAITING_INPUT = "awaiting_input"
    ROUND_COMPLETE = "round_complete"
    GAME_OVER = "game_over"

    @property
    def is_active(self) -> bool:
        """True while a game is in progress (any phase but idle / game over)."""
        return self not in (SessionPhase.IDLE, SessionPhase.GAME_OVER)


class Verdict(StrEnum):
    CONTINUE = "continue"
    ROUND_COMPLETE = "round_complete"
    MISMATCH = "mismatch"
