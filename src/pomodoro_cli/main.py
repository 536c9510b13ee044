"""Main entry point for pomodoro-cli."""

import click
import typer
from rich.markup import escape

from pomodoro_cli import __version__
from pomodoro_cli.core.events import StdinReader, ToggleEvents
from pomodoro_cli.core.runner import PomodoroRunner
from pomodoro_cli.core.shutdown import stop_on_signal
from pomodoro_cli.models.session import Session
from pomodoro_cli.services.config_service import ConfigError, get_config_service
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console

EPILOG = """\
Examples:

  pomodoro                         # Start with default settings

  pomodoro -f 30 -b 10             # 30 min focus, 10 min breaks

  pomodoro -f 20 -b 5 -l 15 -s 3   # Custom long break settings

  pomodoro -sound false            # Disable sound

  pomodoro -h                      # Show this help
"""

app = typer.Typer(
    name="pomodoro",
    help="pomodoro - CLI Pomodoro Timer",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]pomodoro-cli[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command(epilog=EPILOG)
def start(
    focus: int | None = typer.Option(
        None, "-f", help="Focus session duration in minutes (default: 25)"
    ),
    short_break: int | None = typer.Option(
        None, "-b", help="Short break duration in minutes (default: 5)"
    ),
    long_break: int | None = typer.Option(
        None, "-l", help="Long break duration in minutes (default: 15)"
    ),
    sessions: int | None = typer.Option(
        None, "-s", help="Number of focus sessions before long break (default: 4)"
    ),
    # click.BOOL parses the value; a bool annotation would make these flags.
    sound: str | None = typer.Option(
        None,
        "-sound",
        click_type=click.BOOL,
        metavar="BOOL",
        help="Enable sound notifications (default: true)",
    ),
    notify: str | None = typer.Option(
        None,
        "-notify",
        click_type=click.BOOL,
        metavar="BOOL",
        help="Enable desktop notifications (default: true)",
    ),
    rounds: int | None = typer.Option(
        None, "-n", help="Focus sessions to run, 0 runs until stopped (default: 0)"
    ),
    save: bool = typer.Option(
        False, "--save", help="Store these options as the new defaults"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Run focus and break sessions. Press Enter to pause or resume."""
    logger = get_logger()
    service = get_config_service()

    try:
        config = service.resolve(
            focus_minutes=focus,
            short_break_minutes=short_break,
            long_break_minutes=long_break,
            sessions_before_long_break=sessions,
            sound_enabled=sound,
            notifications_enabled=notify,
            rounds=rounds,
        )
        if save:
            path = service.save_config(config)
            console.print(f"[dim]Saved defaults to {escape(str(path))}[/dim]")
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(ERROR_INVALID_ARGS) from e

    logger.info("Starting with %s", config.model_dump())
    session = Session(config=config)
    events = ToggleEvents()
    StdinReader(events).start()

    with stop_on_signal(session, console):
        PomodoroRunner(session, events, console=console).run()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
