"""pomodoro-cli: a terminal Pomodoro timer with pause/resume and session stats."""

__version__ = "0.3.0"
