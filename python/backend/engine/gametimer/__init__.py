from backend.engine.gametimer.timer import (
    ManualScheduler,
    MonotonicScheduler,
    Scheduler,
    TimerGroup,
    TimerHandle,
)

__all__ = [
    "ManualScheduler",
    "MonotonicScheduler",
    "Scheduler",
    "TimerGroup",
    "TimerHandle",
]
