"""Replays a tile sequence as timed pulses."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from backend.engine.gametimer import Scheduler, TimerGroup
from backend.models.tile import Tile

logger = logging.getLogger(__name__)


class PlaybackBusyError(RuntimeError):
    """Raised when a replay is requested while another is still running."""


class PlaybackScheduler:
    """Drives the "active tile" through a sequence of pulses.

    Each pulse lights a tile for ``pulse_ms``, darkens it, then waits
    ``gap_ms`` before the next one.  Every step is a timer owned by this
    object, so :meth:`cancel` stops playback at any pulse boundary.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_active_change: Callable[[Tile | None], None] | None = None,
    ) -> None:
        self._timers = TimerGroup(scheduler)
        self._on_active_change = on_active_change
        self._active: Tile | None = None
        self._replaying = False

    # -- queries --------------------------------------------------------------

    @property
    def active_tile(self) -> Tile | None:
        return self._active

    @property
    def is_replaying(self) -> bool:
        return self._replaying

    # -- commands -------------------------------------------------------------

    def replay(
        self,
        sequence: Sequence[Tile],
        on_complete: Callable[[], None],
        pulse_ms: float = 400,
        gap_ms: float = 100,
    ) -> None:
        """Pulse every tile of *sequence* in order, then call *on_complete*.

        The caller is suspended in the sense that nothing else should
        happen until *on_complete* runs; input must be refused meanwhile.
        """
        if self._replaying:
            raise PlaybackBusyError("A replay is already in progress.")

        # A replay takes over from any click echo still on screen.
        self._timers.cancel_all()
        self._set_active(None)

        tiles = list(sequence)
        self._replaying = True
        logger.debug("Replaying %d tile(s)", len(tiles))

        def step(index: int) -> None:
            if index == len(tiles):
                self._replaying = False
                on_complete()
                return
            self._set_active(tiles[index])
            self._timers.call_later(pulse_ms, lambda: end_pulse(index))

        def end_pulse(index: int) -> None:
            self._set_active(None)
            self._timers.call_later(gap_ms, lambda: step(index + 1))

        self._timers.call_later(0, lambda: step(0))

    def flash(
        self,
        tile: Tile,
        pulse_ms: float = 200,
        gap_ms: float = 100,
        on_complete: Callable[[], None] | None = None,
    ) -> None:
        """Echo a single tile, e.g. as feedback for the player's own click.

        A new flash supersedes one still running.
        """
        if self._replaying:
            raise PlaybackBusyError("Cannot flash a tile during a replay.")

        self._timers.cancel_all()
        self._set_active(tile)

        def end_pulse() -> None:
            self._set_active(None)
            if on_complete is not None:
                self._timers.call_later(gap_ms, on_complete)

        self._timers.call_later(pulse_ms, end_pulse)

    def cancel(self) -> None:
        """Stop whatever is playing.  The completion callback never runs."""
        cancelled = self._timers.cancel_all()
        if self._replaying:
            logger.debug("Replay cancelled (%d timer(s) dropped)", cancelled)
        self._replaying = False
        self._set_active(None)

    # -- helpers --------------------------------------------------------------

    def _set_active(self, tile: Tile | None) -> None:
        if tile == self._active:
            return
        self._active = tile
        if self._on_active_change is not None:
            self._on_active_change(tile)
