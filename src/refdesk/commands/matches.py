"""Match commands — list, show, available."""

from __future__ import annotations

from typing import Annotated

import typer

from refdesk.client.errors import error_handler
from refdesk.commands._common import FormatOpt, ProfileOpt, UrlOpt, call, output_records
from refdesk.output.formatter import render_record

app = typer.Typer(name="matches", help="Browse matches.")

_FIELDS = [
    ("ID", "id"),
    ("Home", "home_team"),
    ("Away", "away_team"),
    ("Date", "date"),
    ("Time", "time"),
    ("Venue", "venue"),
]


@app.command("list")
@error_handler
def list_matches(
    venue: Annotated[str | None, typer.Option("--venue", help="Only matches at this venue")] = None,
    start: Annotated[str | None, typer.Option("--start", help="Start date (YYYY-MM-DD)")] = None,
    end: Annotated[str | None, typer.Option("--end", help="End date (YYYY-MM-DD)")] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List matches, optionally by venue or date range."""
    if venue and (start or end):
        raise typer.BadParameter("--venue cannot be combined with --start/--end")
    if venue:
        result = call(profile, url, lambda client: client.matches.by_venue(venue))
    elif start or end:
        result = call(profile, url, lambda client: client.matches.by_date_range(start, end))
    else:
        result = call(profile, url, lambda client: client.matches.list())
    output_records(result, fmt, _FIELDS, title="Matches")


@app.command()
@error_handler
def available(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List matches that have no appointment yet."""
    result = call(profile, url, lambda client: client.matches.available())
    output_records(result, fmt, _FIELDS, title="Available Matches")


@app.command()
@error_handler
def show(
    match_id: Annotated[str, typer.Argument(help="Match ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show match details."""
    body = call(profile, url, lambda client: client.matches.get(match_id))
    render_record(body, fmt, title=f"Match {match_id}")
