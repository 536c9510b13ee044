"""Shared test fixtures and configuration.

Keeps tests away from the real platform config/log directories and provides
a fake clock plus a scripted toggle source so timer runs finish instantly.
"""

from __future__ import annotations

import io
import logging
from unittest.mock import patch

import pytest
from rich.console import Console


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset cached singletons."""
    import pomodoro_cli.utils.logger as logger_mod
    from pomodoro_cli.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("pomodoro_cli").handlers.clear()

    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=tmpdir):
        with patch(
            "pomodoro_cli.services.config_service.user_config_dir",
            return_value=tmpdir,
        ):
            yield tmp_path

    get_config_service.cache_clear()
    logger_mod._logger = None
    app_logger = logging.getLogger("pomodoro_cli")
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()


# ---------------------------------------------------------------------------
# Time helpers
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.start = start

    def __call__(self) -> float:
        return self.now

    @property
    def elapsed(self) -> float:
        return self.now - self.start


class ScriptedEvents:
    """Toggle source that advances a FakeClock instead of blocking.

    *toggles* are offsets in seconds from the clock reading at construction.
    *lag* is added to every wait that times out, simulating late ticks.
    """

    def __init__(self, clock: FakeClock, toggles=(), lag: float = 0.0):
        self.clock = clock
        self.toggles = sorted(clock.now + offset for offset in toggles)
        self.lag = lag
        self.waits = 0

    def wait(self, timeout: float) -> bool:
        self.waits += 1
        deadline = self.clock.now + max(0.0, timeout)
        if self.toggles and self.toggles[0] <= deadline:
            self.clock.now = max(self.clock.now, self.toggles.pop(0))
            return True
        self.clock.now = deadline + self.lag
        return False


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def quiet_console() -> Console:
    """Console writing to an in-memory buffer (``console.file.getvalue()``)."""
    return Console(file=io.StringIO(), width=100, highlight=False)


@pytest.fixture()
def make_events(clock):
    """Factory for ScriptedEvents bound to the ``clock`` fixture."""

    def _make(toggles=(), lag: float = 0.0) -> ScriptedEvents:
        return ScriptedEvents(clock, toggles=toggles, lag=lag)

    return _make
