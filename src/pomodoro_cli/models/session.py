"""Statistics accumulated across the phases of one process run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from pomodoro_cli.models.config_models import PomodoroConfig
from pomodoro_cli.models.timer import Timer
from pomodoro_cli.utils.formatting import format_duration

REPORT_RULE = "-" * 40


@dataclass
class Session:
    """Completed focus/break counts and their cumulative durations.

    Only the orchestration loop mutates a session, and only after an engine
    run has returned, so a phase interrupted midway is never counted.
    """

    config: PomodoroConfig = field(default_factory=PomodoroConfig)
    focus_count: int = 0
    break_count: int = 0
    total_focus_time: timedelta = field(default=timedelta(0))
    total_break_time: timedelta = field(default=timedelta(0))

    def record_focus_completion(self, timer: Timer) -> None:
        """Count a finished focus phase at its configured length."""
        self.focus_count += 1
        self.total_focus_time += timer.duration

    def record_break_completion(self, timer: Timer) -> None:
        """Count a finished break phase at its configured length."""
        self.break_count += 1
        self.total_break_time += timer.duration

    def is_long_break_due(self) -> bool:
        """True when the completed focus count is a multiple of the cadence."""
        return self.focus_count % self.config.sessions_before_long_break == 0

    def next_break_minutes(self) -> int:
        if self.is_long_break_due():
            return self.config.long_break_minutes
        return self.config.short_break_minutes

    def report(self) -> str:
        """Render the statistics block. Does not modify the session."""
        lines = [
            "",
            "📊 Session Statistics:",
            f"  Focus Sessions: {self.focus_count}",
            f"  Total Focus Time: {format_duration(self.total_focus_time)}",
            f"  Break Sessions: {self.break_count}",
            f"  Total Break Time: {format_duration(self.total_break_time)}",
            REPORT_RULE,
        ]
        return "\n".join(lines)
