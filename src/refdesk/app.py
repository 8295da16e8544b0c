"""Root Typer app — global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from refdesk import __version__
from refdesk.commands import (
    appointments,
    auth,
    availability,
    config_cmd,
    matches,
    referees,
    teams,
    venues,
)

app = typer.Typer(
    name="refdesk",
    help="Client for the referee appointment service.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"refdesk {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send library logs to stderr through Rich, once per process."""
    root = logging.getLogger("refdesk")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False),
        )


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    """refdesk — referees, appointments, venues, teams and matches."""
    setup_logging(verbose)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(auth.app, name="auth")
app.add_typer(appointments.app, name="appointments")
app.add_typer(referees.app, name="referees")
app.add_typer(availability.app, name="availability")
app.add_typer(venues.app, name="venues")
app.add_typer(teams.app, name="teams")
app.add_typer(matches.app, name="matches")


def main() -> None:
    app()
