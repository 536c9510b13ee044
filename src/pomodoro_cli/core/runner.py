"""Orchestration loop: alternate focus and break phases.

After each completed phase the runner records it on the session, sends the
notification and prints the statistics, then starts the next phase. The
break after every ``sessions_before_long_break``-th focus phase is a long
break.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from rich.console import Console

from pomodoro_cli.core.engine import EventSource, TimerEngine
from pomodoro_cli.models.session import Session
from pomodoro_cli.models.timer import Timer, TimerMode
from pomodoro_cli.services.notifier import Notifier
from pomodoro_cli.ui.display import ProgressLine, print_header, print_stats
from pomodoro_cli.utils.ui.console import get_console

NOTIFY_TITLE = "Pomodoro Timer"
CONTROLS_HINT = "Controls: [Enter] to pause/resume, Ctrl+C to quit"

logger = logging.getLogger(__name__)


class PomodoroRunner:
    """Drives focus/break phases for one session."""

    def __init__(
        self,
        session: Session,
        events: EventSource,
        notifier: Notifier | None = None,
        console: Console | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.session = session
        self.events = events
        self.console = console or get_console()
        self.notifier = notifier or Notifier(
            sound_enabled=session.config.sound_enabled,
            notifications_enabled=session.config.notifications_enabled,
            console=self.console,
        )
        self.clock = clock

    def run(self) -> Session:
        """Run focus/break pairs until the configured rounds are done.

        With ``rounds == 0`` this only returns when the process is stopped.
        """
        rounds = self.session.config.rounds
        self.console.print(CONTROLS_HINT, markup=False)
        while not rounds or self.session.focus_count < rounds:
            self.run_focus()
            self.run_break()
        return self.session

    def run_focus(self) -> Timer:
        timer = Timer.for_minutes(self.session.config.focus_minutes, TimerMode.FOCUS)
        self._run_phase(timer)

        self.session.record_focus_completion(timer)
        logger.info("Focus phase %d completed", self.session.focus_count)
        self.notifier.notify(NOTIFY_TITLE, f"{timer.mode.value} session completed!")

        print_header(
            f"{timer.mode.value} session completed! "
            f"Time for a {self.session.next_break_minutes()} minute break",
            self.console,
        )
        print_stats(self.session, self.console)
        return timer

    def run_break(self) -> Timer:
        long_break = self.session.is_long_break_due()
        timer = Timer.for_minutes(self.session.next_break_minutes(), TimerMode.BREAK)
        if long_break:
            self.console.print("🎉 Long break this time!", markup=False)
        self._run_phase(timer)

        self.session.record_break_completion(timer)
        logger.info(
            "%s break %d completed",
            "Long" if long_break else "Short",
            self.session.break_count,
        )
        message = f"{timer.mode.value} session completed! Great job!"
        self.notifier.notify(NOTIFY_TITLE, message)
        print_header(message, self.console)
        print_stats(self.session, self.console)
        return timer

    def _run_phase(self, timer: Timer) -> None:
        minutes = int(timer.duration.total_seconds() // 60)
        print_header(
            f"Starting {timer.mode.value} session for {minutes} minutes", self.console
        )
        self.notifier.beep()

        with ProgressLine(self.console) as line:
            engine = TimerEngine(clock=self.clock, render=line.render)
            engine.run(timer, self.events)
