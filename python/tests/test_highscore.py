"""ScoreStore over the memory and JSON file backends."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from backend.models.highscore import (
    HIGHSCORE_KEY,
    JsonFileBackend,
    MemoryBackend,
    ScoreStore,
)


def test_empty_store_loads_zero(store: ScoreStore) -> None:
    assert store.load() == 0


def test_save_then_load(store: ScoreStore, backend: MemoryBackend) -> None:
    store.save(30)
    assert store.load() == 30
    assert backend.writes == [(HIGHSCORE_KEY, 30)]


def test_save_overwrites_unconditionally(store: ScoreStore) -> None:
    store.save(50)
    store.save(20)
    assert store.load() == 20


def test_custom_key_is_isolated(backend: MemoryBackend) -> None:
    ScoreStore(backend, key="other").save(5)
    assert ScoreStore(backend).load() == 0


# -- JSON file backend ----------------------------------------------------------


def test_json_file_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "highscore.json"
    ScoreStore(JsonFileBackend(path)).save(40)

    assert json.loads(path.read_text()) == {HIGHSCORE_KEY: 40}
    assert ScoreStore(JsonFileBackend(path)).load() == 40


def test_json_file_keeps_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "highscore.json"
    path.write_text(json.dumps({"volume": 3}))

    ScoreStore(JsonFileBackend(path)).save(10)

    assert json.loads(path.read_text()) == {"volume": 3, HIGHSCORE_KEY: 10}


def test_missing_file_loads_zero(tmp_path: Path) -> None:
    assert ScoreStore(JsonFileBackend(tmp_path / "absent.json")).load() == 0


@pytest.mark.parametrize(
    "content",
    ["not json", "[1, 2]", json.dumps({HIGHSCORE_KEY: "lots"})],
    ids=["garbage", "not-an-object", "not-an-int"],
)
def test_corrupt_file_loads_zero(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, content: str
) -> None:
    path = tmp_path / "highscore.json"
    path.write_text(content)

    with caplog.at_level(logging.WARNING, logger="backend"):
        assert ScoreStore(JsonFileBackend(path)).load() == 0
    assert "High score unavailable" in caplog.text


def test_corrupt_file_is_replaced_on_save(tmp_path: Path) -> None:
    path = tmp_path / "highscore.json"
    path.write_text("not json")

    ScoreStore(JsonFileBackend(path)).save(70)

    assert json.loads(path.read_text()) == {HIGHSCORE_KEY: 70}


def test_unwritable_location_is_best_effort(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = ScoreStore(JsonFileBackend(blocker / "highscore.json"))

    with caplog.at_level(logging.WARNING, logger="backend"):
        store.save(10)
    assert "Could not save high score" in caplog.text
