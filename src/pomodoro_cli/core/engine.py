"""Countdown engine for one Pomodoro phase.

The engine waits on "next tick or next toggle". Each tick recomputes the
remaining time from the clock against a fixed end time, so delayed or missed
ticks never make the countdown drift. Pausing records the clock; resuming
pushes the end time out by exactly the time spent paused.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Protocol

from pomodoro_cli.models.timer import Timer, TimerState

TICK_SECONDS = 1.0

logger = logging.getLogger(__name__)


class EventSource(Protocol):
    def wait(self, timeout: float) -> bool: ...


Renderer = Callable[[Timer], None]


class TimerEngine:
    """Runs a :class:`Timer` to completion.

    Args:
        clock: Returns the current time in seconds. Only differences between
            readings are used.
        render: Called with the timer after every tick while running and
            after every toggle.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        render: Renderer | None = None,
    ):
        self.clock = clock
        self.render = render

    def run(self, timer: Timer, events: EventSource) -> Timer:
        """Count *timer* down to zero, honouring pause/resume toggles.

        Returns the same timer with ``remaining`` at zero. There is no early
        exit; only process termination stops a run.
        """
        timer.state = TimerState.RUNNING
        timer.remaining = timer.duration
        timer.paused_at = None
        timer.paused_total = timedelta(0)
        timer.start_time = self.clock()

        end_time = timer.start_time + timer.duration.total_seconds()
        next_tick = timer.start_time + TICK_SECONDS
        logger.info("Run started: %s for %s", timer.mode.value, timer.duration)

        while not timer.is_finished:
            if events.wait(next_tick - self.clock()):
                end_time = self._toggle(timer, end_time)
                self._draw(timer)
                continue

            now = self.clock()
            next_tick += TICK_SECONDS
            if next_tick <= now:
                # Late tick; realign rather than replay the missed ones.
                next_tick = now + TICK_SECONDS

            if timer.state is TimerState.RUNNING:
                timer.remaining = timedelta(seconds=max(0.0, end_time - now))
                self._draw(timer)

        logger.info(
            "Run finished: %s, paused for %s", timer.mode.value, timer.paused_total
        )
        return timer

    def _toggle(self, timer: Timer, end_time: float) -> float:
        now = self.clock()
        if timer.state is TimerState.RUNNING:
            timer.state = TimerState.PAUSED
            timer.paused_at = now
            logger.debug("Paused with %s remaining", timer.remaining)
        elif timer.state is TimerState.PAUSED:
            pause = now - timer.paused_at
            end_time += pause
            timer.paused_total += timedelta(seconds=pause)
            timer.paused_at = None
            timer.state = TimerState.RUNNING
            logger.debug("Resumed after %.1fs pause", pause)
        return end_time

    def _draw(self, timer: Timer) -> None:
        if self.render:
            self.render(timer)
