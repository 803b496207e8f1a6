"""GameConfig defaults, validation, and speed scaling."""

from __future__ import annotations

import pytest

from backend.models.config import GameConfig


def test_defaults() -> None:
    config = GameConfig()
    assert config.pulse_ms == 400
    assert config.gap_ms == 100
    assert config.echo_pulse_ms == 200
    assert config.settle_ms == 800
    assert config.score_increment == 10


@pytest.mark.parametrize("field", ["pulse_ms", "gap_ms", "settle_ms", "lead_in_ms"])
def test_negative_durations_rejected(field: str) -> None:
    with pytest.raises(ValueError, match=field):
        GameConfig(**{field: -1})


def test_score_increment_must_be_positive() -> None:
    with pytest.raises(ValueError):
        GameConfig(score_increment=0)


def test_scaled_divides_durations_only() -> None:
    fast = GameConfig().scaled(2)
    assert fast.pulse_ms == 200
    assert fast.gap_ms == 50
    assert fast.settle_ms == 400
    assert fast.lead_in_ms == 250
    assert fast.score_increment == 10


@pytest.mark.parametrize("speed", [0, -1])
def test_scaled_rejects_non_positive_speed(speed: float) -> None:
    with pytest.raises(ValueError):
        GameConfig().scaled(speed)
