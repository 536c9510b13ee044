"""Duration formatting helpers."""

from __future__ import annotations

from datetime import timedelta


def format_duration(value: timedelta) -> str:
    """Format a duration as ``1h05m00s`` or ``25m00s``.

    Sub-second parts are truncated; negative values render as zero.
    """
    total = max(0, int(value.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes:02d}m{seconds:02d}s"
    return f"{minutes}m{seconds:02d}s"


def format_clock(value: timedelta) -> str:
    """Format a countdown as ``MM:SS``; minutes are not wrapped at 60."""
    total = max(0, int(value.total_seconds()))
    minutes, seconds = divmod(total, 60)
    return f"{minutes:02d}:{seconds:02d}"
