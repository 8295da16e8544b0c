"""Referee commands — list, show, filter."""

from __future__ import annotations

from typing import Annotated

import typer

from refdesk.client.errors import error_handler
from refdesk.commands._common import (
    FormatOpt,
    ProfileOpt,
    UrlOpt,
    call,
    output_records,
    parse_pairs,
)
from refdesk.output.formatter import render_record

app = typer.Typer(name="referees", help="Browse referee profiles.")

_FIELDS = [
    ("ID", "id"),
    ("First", "first_name"),
    ("Last", "last_name"),
    ("Level", "level"),
    ("Email", "email"),
]


@app.command("list")
@error_handler
def list_referees(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List all referees."""
    result = call(profile, url, lambda client: client.referees.list())
    output_records(result, fmt, _FIELDS, title="Referees")


@app.command()
@error_handler
def show(
    referee_id: Annotated[str, typer.Argument(help="Referee ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a referee profile."""
    body = call(profile, url, lambda client: client.referees.get(referee_id))
    render_record(body, fmt, title=f"Referee {referee_id}")


@app.command("filter")
@error_handler
def filter_referees(
    where: Annotated[
        list[str] | None,
        typer.Option("--where", "-w", help="Filter as key=value (repeatable)"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List referees matching the given filters; empty values are ignored."""
    filters = parse_pairs(where)
    result = call(profile, url, lambda client: client.referees.filter(filters))
    output_records(result, fmt, _FIELDS, title="Referees")
