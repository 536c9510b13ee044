"""Pause/resume toggle events fed from a line-buffered input stream.

A daemon thread reads lines and offers one toggle per line into a
single-slot queue. If a toggle is still pending when the next line arrives,
the new line is dropped, so a fast burst of lines can collapse into fewer
toggles than lines typed.
"""

from __future__ import annotations

import logging
import queue
import sys
import threading
from typing import TextIO

logger = logging.getLogger(__name__)


class ToggleEvents:
    """Single-slot queue of pause/resume toggles."""

    def __init__(self):
        self._queue: queue.Queue[str] = queue.Queue(maxsize=1)

    def offer(self, line: str = "") -> bool:
        """Queue a toggle for *line*. Returns False if one is already pending."""
        try:
            self._queue.put_nowait(line)
        except queue.Full:
            logger.debug("Toggle dropped, one already pending")
            return False
        return True

    def wait(self, timeout: float) -> bool:
        """Block up to *timeout* seconds for a toggle; True if one arrived."""
        try:
            self._queue.get(timeout=max(0.0, timeout))
        except queue.Empty:
            return False
        return True


class StdinReader:
    """Background producer turning input lines into toggle events.

    Line content is ignored. The thread is a daemon and ends on EOF; the
    countdown itself does not depend on it.
    """

    def __init__(self, events: ToggleEvents, stream: TextIO | None = None):
        self.events = events
        self.stream = stream if stream is not None else sys.stdin
        self._thread: threading.Thread | None = None

    def start(self) -> "StdinReader":
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._read_lines, name="stdin-reader", daemon=True
            )
            self._thread.start()
        return self

    def _read_lines(self) -> None:
        for line in self.stream:
            self.events.offer(line.rstrip("\r\n"))
        logger.debug("Input stream closed, no more toggles")
