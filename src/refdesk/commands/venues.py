"""Venue commands — list, show."""

from __future__ import annotations

from typing import Annotated

import typer

from refdesk.client.errors import error_handler
from refdesk.commands._common import FormatOpt, ProfileOpt, UrlOpt, call, output_records
from refdesk.output.formatter import render_record

app = typer.Typer(name="venues", help="Browse venues.")

_FIELDS = [("ID", "id"), ("Name", "name"), ("Address", "address"), ("City", "city")]


@app.command("list")
@error_handler
def list_venues(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List all venues."""
    result = call(profile, url, lambda client: client.venues.list())
    output_records(result, fmt, _FIELDS, title="Venues")


@app.command()
@error_handler
def show(
    venue_id: Annotated[str, typer.Argument(help="Venue ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show venue details."""
    body = call(profile, url, lambda client: client.venues.get(venue_id))
    render_record(body, fmt, title=f"Venue {venue_id}")
