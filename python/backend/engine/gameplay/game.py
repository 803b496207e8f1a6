"""Core gameplay logic — runs rounds, checks input, and keeps score."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from backend.engine.gamegenerator import SequenceGenerator
from backend.engine.gameplayback import PlaybackScheduler
from backend.engine.gamestate import GameState
from backend.engine.gametimer import Scheduler, TimerGroup
from backend.engine.gamevalidator import InputValidator
from backend.models.config import GameConfig
from backend.models.highscore import ScoreStore
from backend.models.phase import SessionPhase, Verdict
from backend.models.tile import Tile

logger = logging.getLogger(__name__)


class SessionEvent(StrEnum):
    ACTIVE_TILE = "active_tile"  # payload: Tile | None
    PHASE = "phase"  # payload: SessionPhase
    GAME_OVER = "game_over"  # payload: final score


class GameSession:
    """Orchestrates one player's games from start to game over.

    Phases::

        IDLE -> PLAYBACK -> AWAITING_INPUT -> ROUND_COMPLETE -> PLAYBACK ...
                                 |
                                 +-> GAME_OVER  (mismatch or abandon)

    Replay and input collection never overlap: clicks are only honoured
    in ``AWAITING_INPUT`` and silently dropped in every other phase.

    The high score is read once, here, and written at most once per game,
    when the game ends with a better score.
    """

    def __init__(
        self,
        store: ScoreStore,
        scheduler: Scheduler,
        generator: SequenceGenerator | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self.store = store
        self.generator = generator if generator is not None else SequenceGenerator()
        self.config = config if config is not None else GameConfig()
        self.state = GameState()
        self.high_score: int = store.load()

        self._listeners: dict[SessionEvent, list[Callable[[Any], None]]] = {
            event: [] for event in SessionEvent
        }
        self._timers = TimerGroup(scheduler)
        self._playback = PlaybackScheduler(
            scheduler,
            on_active_change=lambda tile: self._emit(SessionEvent.ACTIVE_TILE, tile),
        )

    # -- events ---------------------------------------------------------------

    def add_listener(self, event: SessionEvent, callback: Callable[[Any], None]) -> None:
        self._listeners[event].append(callback)

    def remove_listener(self, event: SessionEvent, callback: Callable[[Any], None]) -> None:
        self._listeners[event].remove(callback)

    def _emit(self, event: SessionEvent, payload: Any) -> None:
        for callback in list(self._listeners[event]):
            callback(payload)

    # -- observable state -----------------------------------------------------

    @property
    def phase(self) -> SessionPhase:
        return self.state.phase

    @property
    def is_active(self) -> bool:
        return self.state.phase.is_active

    @property
    def active_tile(self) -> Tile | None:
        return self._playback.active_tile

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def target_sequence(self) -> tuple[Tile, ...]:
        return self.state.target

    @property
    def player_sequence(self) -> tuple[Tile, ...]:
        return self.state.player

    # -- commands -------------------------------------------------------------

    def start_game(self) -> None:
        """Begin a fresh game.  A game still in progress is abandoned first."""
        if self.is_active:
            logger.info("Restarting: abandoning game at level %d", self.level)
            self.abandon()
            if self.is_active:
                return  # a game-over listener already started the next game
        if self.state.phase is SessionPhase.GAME_OVER:
            self._set_phase(SessionPhase.IDLE)
            if self.state.phase is not SessionPhase.IDLE:
                return

        self.state.reset(self.generator.next())
        logger.info("New game started (high score %d)", self.high_score)
        self._begin_playback()

    def abandon(self) -> None:
        """End the current game immediately, cancelling anything scheduled."""
        if not self.is_active:
            logger.debug("abandon() ignored in phase %s", self.state.phase)
            return
        logger.info("Game abandoned in phase %s", self.state.phase)
        self._game_over()

    def on_tile_clicked(self, tile: object) -> Verdict | None:
        """Handle a player's tile selection.

        Returns the verdict, or ``None`` if the click was ignored because
        no input is expected right now or *tile* is not a tile index.
        """
        parsed = Tile.parse(tile)
        if parsed is None:
            logger.warning("Ignoring click on invalid tile %r", tile)
            return None
        if self.state.phase is not SessionPhase.AWAITING_INPUT:
            logger.debug("Ignoring click on %s during %s", parsed.name, self.state.phase)
            return None

        self._playback.flash(
            parsed,
            pulse_ms=self.config.echo_pulse_ms,
            gap_ms=self.config.echo_gap_ms,
        )
        verdict = InputValidator.submit(parsed, self.state.next_position, self.state.target)
        logger.debug("Click %s at position %d: %s", parsed.name, self.state.next_position, verdict)

        if verdict is Verdict.MISMATCH:
            self._game_over()
            return verdict

        self.state.record_input(parsed, self.config.score_increment)
        if verdict is Verdict.ROUND_COMPLETE:
            self._timers.call_later(self.config.settle_ms, self._next_round)
            self._set_phase(SessionPhase.ROUND_COMPLETE)
        return verdict

    # -- transitions ----------------------------------------------------------

    def _begin_playback(self) -> None:
        self._timers.call_later(self.config.lead_in_ms, self._start_replay)
        self._set_phase(SessionPhase.PLAYBACK)

    def _start_replay(self) -> None:
        self._playback.replay(
            self.state.target,
            on_complete=self._open_input,
            pulse_ms=self.config.pulse_ms,
            gap_ms=self.config.gap_ms,
        )

    def _open_input(self) -> None:
        self._set_phase(SessionPhase.AWAITING_INPUT)

    def _next_round(self) -> None:
        self.state.extend_target(self.generator.next())
        logger.info("Level %d (score %d)", self.level, self.score)
        self._begin_playback()

    def _game_over(self) -> None:
        self._timers.cancel_all()
        self._playback.cancel()

        final = self.state.score
        if final > self.high_score:
            logger.info("New high score: %d (was %d)", final, self.high_score)
            self.high_score = final
            self.store.save(final)
        logger.info("Game over at level %d with score %d", self.level, final)
        self._set_phase(SessionPhase.GAME_OVER)
        self._emit(SessionEvent.GAME_OVER, final)

    def _set_phase(self, phase: SessionPhase) -> None:
        if phase is self.state.phase:
            return
        logger.debug("Phase %s -> %s", self.state.phase, phase)
        self.state.phase = phase
        self._emit(SessionEvent.PHASE, phase)
