"""Desktop notification and audible cues.

Both collaborators are best effort. A failed notification falls back to the
terminal bell; a failed beep is ignored. Neither raises to the caller.
"""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess

from rich.console import Console

from pomodoro_cli.utils.ui.console import get_console

logger = logging.getLogger(__name__)

_NOTIFY_TIMEOUT = 5


def _notification_command(title: str, message: str) -> list[str] | None:
    """Return the platform command for a desktop notification, if any."""
    system = platform.system()
    if system == "Linux" and shutil.which("notify-send"):
        return ["notify-send", title, message]
    if system == "Darwin" and shutil.which("osascript"):
        safe_title = title.replace('"', '\\"')
        safe_message = message.replace('"', '\\"')
        return [
            "osascript",
            "-e",
            f'display notification "{safe_message}" with title "{safe_title}"',
        ]
    if system == "Windows" and shutil.which("powershell"):
        title = title.replace("'", "''")
        message = message.replace("'", "''")
        script = (
            "[reflection.assembly]::loadwithpartialname('System.Windows.Forms');"
            "$n = New-Object System.Windows.Forms.NotifyIcon;"
            "$n.Icon = [System.Drawing.SystemIcons]::Information;"
            "$n.Visible = $true;"
            f"$n.ShowBalloonTip(5000, '{title}', '{message}', 'Info')"
        )
        return ["powershell", "-NoProfile", "-Command", script]
    return None


class Notifier:
    """Phase-boundary cues, each switched by configuration."""

    def __init__(
        self,
        sound_enabled: bool = True,
        notifications_enabled: bool = True,
        console: Console | None = None,
    ):
        self.sound_enabled = sound_enabled
        self.notifications_enabled = notifications_enabled
        self.console = console or get_console()

    def notify(self, title: str, message: str) -> None:
        """Show a desktop notification, or ring the bell if that fails."""
        if not self.notifications_enabled:
            return

        command = _notification_command(title, message)
        if command is None:
            logger.warning("No notification tool available, using bell")
            self._bell()
            return

        try:
            subprocess.run(
                command,
                check=True,
                capture_output=True,
                timeout=_NOTIFY_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Notification failed (%s), using bell", e)
            self._bell()

    def beep(self) -> None:
        """Ring the terminal bell at phase start."""
        if not self.sound_enabled:
            return
        self._bell()

    def _bell(self) -> None:
        try:
            self.console.bell()
        except OSError as e:
            logger.debug("Bell failed: %s", e)
