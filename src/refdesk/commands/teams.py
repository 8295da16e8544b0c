"""Team commands — list, show."""

from __future__ import annotations

from typing import Annotated

import typer

from refdesk.client.errors import error_handler
from refdesk.commands._common import FormatOpt, ProfileOpt, UrlOpt, call, output_records
from refdesk.output.formatter import render_record

app = typer.Typer(name="teams", help="Browse teams.")

_FIELDS = [("ID", "id"), ("Name", "name"), ("Club", "club"), ("Age Group", "age_group")]


@app.command("list")
@error_handler
def list_teams(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List all teams."""
    body = call(profile, url, lambda client: client.teams.list())
    output_records(body, fmt, _FIELDS, title="Teams")


@app.command()
@error_handler
def show(
    team_id: Annotated[str, typer.Argument(help="Team ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show team details."""
    body = call(profile, url, lambda client: client.teams.get(team_id))
    render_record(body, fmt, title=f"Team {team_id}")
