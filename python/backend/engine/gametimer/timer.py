"""Cancellable callback timers on a millisecond clock."""

from __future__ import annotations

import heapq
import itertools
import time
from collections.abc import Callable
from typing import Protocol


class TimerHandle:
    """A scheduled callback that can be cancelled before it fires."""

    __slots__ = ("due", "callback", "cancelled")

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"<TimerHandle due={self.due:g} {state}>"


class Scheduler(Protocol):
    """What the engine needs from a timer: delayed, cancellable callbacks."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...


class ManualScheduler:
    """Virtual-clock scheduler; time only moves when told to.

    Callbacks fire in due-time order, ties in the order they were
    scheduled.  A callback may schedule further timers; those fire in the
    same ``advance`` call if they fall due inside the window.
    """

    def __init__(self, start: float = 0.0) -> None:
        self.now = start
        self._queue: list[tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}.")
        handle = TimerHandle(self.now + delay_ms, callback)
        heapq.heappush(self._queue, (handle.due, next(self._seq), handle))
        return handle

    # -- clock ----------------------------------------------------------------

    def advance(self, delta_ms: float) -> int:
        """Move the clock forward by *delta_ms*.  Returns callbacks fired."""
        return self.advance_to(self.now + delta_ms)

    def advance_to(self, target: float) -> int:
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = max(self.now, due)
            handle.callback()
            fired += 1
        self.now = max(self.now, target)
        return fired

    def run_until_idle(self, limit: int = 10_000) -> int:
        """Fire everything pending, jumping the clock as needed."""
        fired = 0
        while self.pending:
            if fired >= limit:
                raise RuntimeError(f"Scheduler still busy after {limit} callbacks.")
            fired += self.advance_to(self._queue[0][0])
        return fired

    # -- queries --------------------------------------------------------------

    @property
    def pending(self) -> int:
        self._drop_cancelled()
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0][2].cancelled:
            heapq.heappop(self._queue)


class MonotonicScheduler(ManualScheduler):
    """Scheduler whose clock follows ``time.monotonic`` when polled.

    Frontends call :meth:`poll` from their input loop.
    """

    def __init__(self) -> None:
        super().__init__()
        self._origin = time.monotonic()

    def poll(self) -> int:
        return self.advance_to((time.monotonic() - self._origin) * 1000.0)


class TimerGroup:
    """Tracks the timers one owner has scheduled so they can all be cancelled."""

    def __init__(self, scheduler: Scheduler) -> None:
        self.scheduler = scheduler
        self._handles: set[TimerHandle] = set()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        handle: TimerHandle

        def fire() -> None:
            self._handles.discard(handle)
            callback()

        handle = self.scheduler.call_later(delay_ms, fire)
        self._handles.add(handle)
        return handle

    def cancel_all(self) -> int:
        """Cancel every pending timer.  Returns how many were cancelled."""
        count = len(self._handles)
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
        return count

    def __len__(self) -> int:
        return len(self._handles)
