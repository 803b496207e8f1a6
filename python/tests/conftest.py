"""Shared fixtures: a virtual clock, in-memory storage, and a game driver."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

import pytest

from backend.engine.gamegenerator import SequenceGenerator
from backend.engine.gameplay import GameSession, SessionEvent
from backend.engine.gametimer import ManualScheduler
from backend.models.config import GameConfig
from backend.models.highscore import MemoryBackend, ScoreStore
from backend.models.phase import SessionPhase, Verdict
from backend.models.tile import Tile


class ScriptedGenerator(SequenceGenerator):
    """Yields a fixed tile script, repeating it when exhausted."""

    def __init__(self, tiles: Iterable[int]) -> None:
        super().__init__()
        self._tiles = itertools.cycle([Tile(t) for t in tiles])

    def next(self) -> Tile:
        return next(self._tiles)


@dataclass
class GameDriver:
    """Drives a session on a virtual clock and records what it emits."""

    session: GameSession
    scheduler: ManualScheduler
    backend: MemoryBackend
    events: list[tuple[SessionEvent, object]] = field(default_factory=list)

    def __post_init__(self) -> None:
        for event in SessionEvent:
            self.session.add_listener(
                event, lambda payload, event=event: self.events.append((event, payload))
            )

    @property
    def config(self) -> GameConfig:
        return self.session.config

    def emitted(self, event: SessionEvent) -> list[object]:
        return [payload for kind, payload in self.events if kind is event]

    # -- time -----------------------------------------------------------------

    def replay_duration(self) -> float:
        per_tile = self.config.pulse_ms + self.config.gap_ms
        return self.config.lead_in_ms + per_tile * len(self.session.target_sequence)

    def finish_playback(self) -> None:
        self.scheduler.advance(self.replay_duration())
        assert self.session.phase is SessionPhase.AWAITING_INPUT

    def settle(self) -> None:
        self.scheduler.advance(self.config.settle_ms)

    # -- input ----------------------------------------------------------------

    def click(self, *tiles: int) -> list[Verdict | None]:
        return [self.session.on_tile_clicked(t) for t in tiles]

    def clear_round(self) -> None:
        """Watch the replay, repeat it correctly, and wait for the next round."""
        self.finish_playback()
        verdicts = self.click(*self.session.target_sequence)
        assert verdicts[-1] is Verdict.ROUND_COMPLETE
        self.settle()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend) -> ScoreStore:
    return ScoreStore(backend)


@pytest.fixture
def make_game(
    scheduler: ManualScheduler, backend: MemoryBackend
) -> Callable[..., GameDriver]:
    """Factory for drivers sharing the test's clock and storage."""

    def _make(
        tiles: Iterable[int] = (0, 1, 2, 3),
        config: GameConfig | None = None,
    ) -> GameDriver:
        session = GameSession(
            ScoreStore(backend),
            scheduler,
            generator=ScriptedGenerator(tiles),
            config=config,
        )
        return GameDriver(session, scheduler, backend)

    return _make


@pytest.fixture
def game(make_game: Callable[..., GameDriver]) -> GameDriver:
    return make_game()
