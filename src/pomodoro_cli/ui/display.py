"""Terminal output for the timer: headers, the live progress line, stats."""

from __future__ import annotations

from rich.console import Console
from rich.live import Live
from rich.text import Text

from pomodoro_cli.models.session import Session
from pomodoro_cli.models.timer import BAR_WIDTH, Timer, TimerState
from pomodoro_cli.utils.formatting import format_clock
from pomodoro_cli.utils.ui.console import get_console

FILLED = "█"
EMPTY = "░"
GLYPHS = {
    TimerState.RUNNING: "▶",
    TimerState.PAUSED: "⏸",
    TimerState.STOPPED: "■",
}


def format_bar(timer: Timer, width: int = BAR_WIDTH) -> str:
    filled = timer.progress_fill(width)
    return FILLED * filled + EMPTY * (width - filled)


def format_progress(timer: Timer) -> str:
    """Build the single status line, e.g. ``▶ [FOCUS] 24:59 [░░░…]``."""
    glyph = GLYPHS[timer.state]
    return (
        f"{glyph} [{timer.mode.value}] {format_clock(timer.remaining)} "
        f"[{format_bar(timer):<{BAR_WIDTH}}]"
    )


def print_header(message: str, console: Console | None = None) -> None:
    """Print *message* underlined with ``=`` of the same length."""
    console = console or get_console()
    console.print()
    console.print(message, markup=False)
    console.print("=" * len(message), markup=False)


def print_stats(session: Session, console: Console | None = None) -> None:
    console = console or get_console()
    console.print(session.report(), markup=False)


class ProgressLine:
    """Rewrites one terminal line in place while a phase runs.

    Usage::

        with ProgressLine(console) as line:
            engine = TimerEngine(render=line.render)
            engine.run(timer, events)
    """

    def __init__(self, console: Console | None = None):
        self.console = console or get_console()
        self._live: Live | None = None

    def __enter__(self) -> "ProgressLine":
        self._live = Live(
            Text(""),
            console=self.console,
            auto_refresh=False,
            transient=False,
        )
        self._live.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def render(self, timer: Timer) -> None:
        text = Text(format_progress(timer))
        if self._live is None:
            self.console.print(text)
            return
        self._live.update(text, refresh=True)
