"""Tests for the notification/beep collaborators.

subprocess, platform and shutil are patched so nothing is actually shown.
"""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from pomodoro_cli.services.notifier import Notifier, _notification_command


@pytest.fixture()
def console() -> MagicMock:
    return MagicMock()


@pytest.fixture()
def linux_tools():
    with patch("pomodoro_cli.services.notifier.platform.system", return_value="Linux"):
        with patch(
            "pomodoro_cli.services.notifier.shutil.which",
            return_value="/usr/bin/notify-send",
        ):
            yield


class TestNotificationCommand:
    def test_linux_uses_notify_send(self, linux_tools) -> None:
        assert _notification_command("T", "M") == ["notify-send", "T", "M"]

    def test_macos_uses_osascript(self) -> None:
        with patch(
            "pomodoro_cli.services.notifier.platform.system", return_value="Darwin"
        ):
            with patch(
                "pomodoro_cli.services.notifier.shutil.which",
                return_value="/usr/bin/osascript",
            ):
                command = _notification_command('Say "hi"', "Done")

        assert command[0] == "osascript"
        assert 'with title "Say \\"hi\\""' in command[2]

    def test_missing_tool_returns_none(self) -> None:
        with patch("pomodoro_cli.services.notifier.platform.system", return_value="Linux"):
            with patch("pomodoro_cli.services.notifier.shutil.which", return_value=None):
                assert _notification_command("T", "M") is None


class TestNotify:
    def test_disabled_does_nothing(self, console) -> None:
        notifier = Notifier(notifications_enabled=False, console=console)

        with patch("pomodoro_cli.services.notifier.subprocess.run") as run:
            notifier.notify("Pomodoro Timer", "done")

        run.assert_not_called()
        console.bell.assert_not_called()

    def test_success_runs_command(self, console, linux_tools) -> None:
        notifier = Notifier(console=console)

        with patch("pomodoro_cli.services.notifier.subprocess.run") as run:
            notifier.notify("Pomodoro Timer", "done")

        assert run.call_args.args[0] == ["notify-send", "Pomodoro Timer", "done"]
        console.bell.assert_not_called()

    @pytest.mark.parametrize(
        "error",
        [
            subprocess.CalledProcessError(1, "notify-send"),
            subprocess.TimeoutExpired("notify-send", 5),
            FileNotFoundError("notify-send"),
        ],
    )
    def test_failure_falls_back_to_bell(self, console, linux_tools, error) -> None:
        notifier = Notifier(console=console)

        with patch("pomodoro_cli.services.notifier.subprocess.run", side_effect=error):
            notifier.notify("Pomodoro Timer", "done")

        console.bell.assert_called_once_with()

    def test_no_tool_falls_back_to_bell(self, console) -> None:
        notifier = Notifier(console=console)

        with patch(
            "pomodoro_cli.services.notifier._notification_command", return_value=None
        ):
            notifier.notify("Pomodoro Timer", "done")

        console.bell.assert_called_once_with()

    def test_bell_failure_is_swallowed(self, console) -> None:
        console.bell.side_effect = OSError("closed")
        notifier = Notifier(console=console)

        with patch(
            "pomodoro_cli.services.notifier._notification_command", return_value=None
        ):
            notifier.notify("Pomodoro Timer", "done")


class TestBeep:
    def test_beep_rings_bell(self, console) -> None:
        Notifier(console=console).beep()
        console.bell.assert_called_once_with()

    def test_beep_disabled(self, console) -> None:
        Notifier(sound_enabled=False, console=console).beep()
        console.bell.assert_not_called()

    def test_beep_failure_is_ignored(self, console) -> None:
        console.bell.side_effect = OSError("closed")
        Notifier(console=console).beep()
