"""Process-scope stop handling.

SIGINT/SIGTERM raise :class:`StopRequested` in the main thread. The timer
unwinds first, closing the live progress line, and only then
:func:`stop_on_signal` prints the statistics gathered so far and exits with
status 0. The engine knows nothing about this; the phase in progress is not
recorded because the session is only updated after a run returns.
"""

from __future__ import annotations

import logging
import signal
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console

from pomodoro_cli.models.session import Session
from pomodoro_cli.ui.display import print_stats
from pomodoro_cli.utils.exit_codes import SUCCESS
from pomodoro_cli.utils.ui.console import get_console

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)

logger = logging.getLogger(__name__)


class StopRequested(BaseException):
    """A stop signal arrived. Not an ``Exception``, so nothing swallows it."""

    def __init__(self, signum: int):
        super().__init__(signum)
        self.signum = signum


def _request_stop(signum, frame):
    raise StopRequested(signum)


def install_shutdown_hook(signals: Iterable[signal.Signals] = STOP_SIGNALS) -> dict:
    """Make *signals* raise StopRequested; returns the previous handlers."""
    previous = {}
    for signum in signals:
        previous[signum] = signal.signal(signum, _request_stop)
    return previous


def restore_handlers(previous: dict) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def report_stop(session: Session, console: Console | None = None) -> None:
    console = console or get_console()
    console.print()
    console.print("Timer stopped by user", markup=False)
    print_stats(session, console)


@contextmanager
def stop_on_signal(
    session: Session,
    console: Console | None = None,
    signals: Iterable[signal.Signals] = STOP_SIGNALS,
) -> Iterator[None]:
    """Run the body until a stop signal, then report *session* and exit 0.

    Usage::

        with stop_on_signal(session, console):
            runner.run()
    """
    previous = install_shutdown_hook(signals)
    try:
        yield
    except StopRequested as e:
        restore_handlers(previous)
        logger.info("Stopped by signal %s", e.signum)
        report_stop(session, console)
        raise SystemExit(SUCCESS) from None
    finally:
        restore_handlers(previous)
