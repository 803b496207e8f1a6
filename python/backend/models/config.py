"""Timing and scoring knobs for a game session."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class GameConfig:
    """All durations are in milliseconds of scheduler time."""

    pulse_ms: float = 400
    gap_ms: float = 100
    echo_pulse_ms: float = 200
    echo_gap_ms: float = 100
    settle_ms: float = 800
    lead_in_ms: float = 500
    score_increment: int = 10

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name.endswith("_ms") and getattr(self, f.name) < 0:
                raise ValueError(
                    f"{f.name} must be non-negative, got {getattr(self, f.name)}."
                )
        if self.score_increment <= 0:
            raise ValueError(
                f"score_increment must be positive, got {self.score_increment}."
            )

    def scaled(self, speed: float) -> GameConfig:
        """Return a copy with every duration divided by *speed*.

        ``speed=2`` plays twice as fast; scoring is unchanged.
        """
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}.")
        durations = {
            f.name: getattr(self, f.name) / speed
            for f in fields(self)
            if f.name.endswith("_ms")
        }
        return replace(self, **durations)
