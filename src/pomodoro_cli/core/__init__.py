"""Timer engine, input events, phase orchestration and stop handling."""

from .engine import TICK_SECONDS, TimerEngine
from .events import StdinReader, ToggleEvents
from .runner import PomodoroRunner
from .shutdown import StopRequested, stop_on_signal

__all__ = [
    "TICK_SECONDS",
    "PomodoroRunner",
    "StdinReader",
    "StopRequested",
    "TimerEngine",
    "ToggleEvents",
    "stop_on_signal",
]
