"""Countdown state for a single Pomodoro phase."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum

BAR_WIDTH = 20


class TimerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


class TimerMode(str, Enum):
    FOCUS = "FOCUS"
    BREAK = "BREAK"


@dataclass
class Timer:
    """One countdown phase.

    ``start_time`` and ``paused_at`` are readings of the engine clock
    (seconds, monotonic by default), not datetimes.
    """

    duration: timedelta
    mode: TimerMode = TimerMode.FOCUS
    state: TimerState = TimerState.RUNNING
    remaining: timedelta = field(default=timedelta(0))
    start_time: float | None = None
    paused_at: float | None = None
    paused_total: timedelta = field(default=timedelta(0))

    @classmethod
    def for_minutes(cls, minutes: int, mode: TimerMode) -> "Timer":
        """Create a running timer of *minutes* length."""
        return cls(duration=timedelta(minutes=minutes), mode=mode)

    @property
    def elapsed(self) -> timedelta:
        """Running time consumed so far (pauses excluded)."""
        return self.duration - self.remaining

    def progress_fill(self, width: int = BAR_WIDTH) -> int:
        """Number of filled cells in a *width*-cell progress bar."""
        if self.duration <= timedelta(0):
            return width
        fill = math.floor(self.elapsed / self.duration * width)
        return min(width, max(0, fill))

    @property
    def is_finished(self) -> bool:
        return self.state is TimerState.RUNNING and self.remaining <= timedelta(0)
