"""InputValidator verdicts and the prefix check."""

from __future__ import annotations

import pytest

from backend.engine.gamevalidator import InputValidator
from backend.models.phase import Verdict
from backend.models.tile import Tile

TARGET = (Tile.EMERALD, Tile.PRIMARY, Tile.AMBER)


@pytest.mark.parametrize(
    ("tile", "position", "expected"),
    [
        (Tile.EMERALD, 0, Verdict.CONTINUE),
        (Tile.PRIMARY, 1, Verdict.CONTINUE),
        (Tile.AMBER, 2, Verdict.ROUND_COMPLETE),
        (Tile.PRIMARY, 0, Verdict.MISMATCH),
        (Tile.SECONDARY, 2, Verdict.MISMATCH),
    ],
    ids=["first", "middle", "last", "wrong-first", "wrong-last"],
)
def test_submit(tile: Tile, position: int, expected: Verdict) -> None:
    assert InputValidator.submit(tile, position, TARGET) is expected


def test_single_tile_target_completes_immediately() -> None:
    assert InputValidator.submit(Tile.AMBER, 0, [Tile.AMBER]) is Verdict.ROUND_COMPLETE


@pytest.mark.parametrize("position", [-1, 3, 10])
def test_position_outside_target_is_a_mismatch(position: int) -> None:
    assert InputValidator.submit(Tile.EMERALD, position, TARGET) is Verdict.MISMATCH


def test_submit_does_not_touch_target() -> None:
    target = list(TARGET)
    InputValidator.submit(Tile.SECONDARY, 0, target)
    assert target == list(TARGET)


def test_is_prefix() -> None:
    assert InputValidator.is_prefix((), TARGET)
    assert InputValidator.is_prefix(TARGET[:2], TARGET)
    assert InputValidator.is_prefix(TARGET, TARGET)
    assert not InputValidator.is_prefix((Tile.AMBER,), TARGET)
    assert not InputValidator.is_prefix(TARGET + (Tile.PRIMARY,), TARGET)
