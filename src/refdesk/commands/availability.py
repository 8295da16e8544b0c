"""Availability commands — show a referee's availability and dates."""

from __future__ import annotations

from typing import Annotated

import typer

from refdesk.client.errors import error_handler
from refdesk.commands._common import FormatOpt, ProfileOpt, UrlOpt, call
from refdesk.output.formatter import render_record

app = typer.Typer(name="availability", help="Referee availability.")


@app.command()
@error_handler
def show(
    referee_id: Annotated[str, typer.Argument(help="Referee ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show availability records for a referee."""
    body = call(profile, url, lambda client: client.availability.get(referee_id))
    render_record(body, fmt, title=f"Availability for referee {referee_id}")


@app.command()
@error_handler
def dates(
    referee_id: Annotated[str, typer.Argument(help="Referee ID")],
    unavailable: Annotated[
        bool, typer.Option("--unavailable", help="Show unavailable dates instead"),
    ] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show the dates a referee is (un)available."""
    if unavailable:
        body = call(
            profile, url, lambda client: client.availability.unavailable_dates(referee_id),
        )
    else:
        body = call(
            profile, url, lambda client: client.availability.available_dates(referee_id),
        )
    render_record(body, fmt, title="Unavailable dates" if unavailable else "Available dates")
