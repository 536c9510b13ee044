"""pomodoro-cli domain models.

Timer state for a single phase, the session accumulator spanning phases, and
the validated configuration both are built from.
"""

from .config_models import PomodoroConfig
from .session import Session
from .timer import BAR_WIDTH, Timer, TimerMode, TimerState

__all__ = [
    "BAR_WIDTH",
    "PomodoroConfig",
    "Session",
    "Timer",
    "TimerMode",
    "TimerState",
]
