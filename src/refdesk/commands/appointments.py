"""Appointment commands — list, show, create, update, delete."""

from __future__ import annotations

from typing import Annotated, Any

import typer
from rich.console import Console
from rich.prompt import Confirm

from refdesk.client.api import RefdeskClient
from refdesk.client.errors import error_handler
from refdesk.commands._common import (
    FormatOpt,
    ProfileOpt,
    UrlOpt,
    call,
    output_records,
)
from refdesk.output.formatter import render_record

app = typer.Typer(name="appointments", help="Manage referee appointments.")
console = Console()

_FIELDS = [
    ("ID", "appointment_id"),
    ("Date", "appointment_date"),
    ("Time", "appointment_time"),
    ("Referee", "referee"),
    ("Venue", "venue"),
    ("Match", "match"),
    ("Status", "status"),
]


def _fields_from_options(**options: Any) -> dict[str, Any]:
    return {key: value for key, value in options.items() if value is not None}


@app.command("list")
@error_handler
def list_appointments(
    page: Annotated[int, typer.Option("--page", min=1, help="Page number")] = 1,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List appointments, newest date first."""
    result = call(profile, url, lambda client: client.appointments.list(page))
    output_records(result, fmt, _FIELDS, title="Appointments")


@app.command()
@error_handler
def show(
    appointment_id: Annotated[str, typer.Argument(help="Appointment ID")],
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show appointment details."""
    body = call(profile, url, lambda client: client.appointments.get(appointment_id))
    render_record(body, fmt, title=f"Appointment {appointment_id}")


@app.command()
@error_handler
def create(
    referee: Annotated[str, typer.Option("--referee", help="Referee ID")],
    match: Annotated[str, typer.Option("--match", help="Match ID")],
    venue: Annotated[str | None, typer.Option("--venue", help="Venue ID")] = None,
    date: Annotated[
        str | None, typer.Option("--date", help="Appointment date (YYYY-MM-DD)"),
    ] = None,
    time: Annotated[
        str | None, typer.Option("--time", help="Appointment time (HH, HH:MM or HH:MM:SS)"),
    ] = None,
    distance: Annotated[
        float | None, typer.Option("--distance", help="Travel distance"),
    ] = None,
    appointment_id: Annotated[
        str | None, typer.Option("--id", help="Appointment ID"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Create an appointment (status starts as upcoming)."""
    data = _fields_from_options(
        appointment_id=appointment_id,
        referee=referee,
        venue=venue,
        match=match,
        appointment_date=date,
        appointment_time=time,
        distance=distance,
    )
    body = call(profile, url, lambda client: client.appointments.create(data))
    console.print("[green]Appointment created.[/]")
    if body is not None:
        render_record(body, fmt, title="Appointment")


@app.command()
@error_handler
def update(
    appointment_id: Annotated[str, typer.Argument(help="Appointment ID")],
    status: Annotated[str | None, typer.Option("--status", help="New status")] = None,
    decline_reason: Annotated[
        str | None, typer.Option("--decline-reason", help="Reason for declining"),
    ] = None,
    referee: Annotated[str | None, typer.Option("--referee", help="Referee ID")] = None,
    venue: Annotated[str | None, typer.Option("--venue", help="Venue ID")] = None,
    match: Annotated[str | None, typer.Option("--match", help="Match ID")] = None,
    date: Annotated[str | None, typer.Option("--date", help="Appointment date")] = None,
    time: Annotated[str | None, typer.Option("--time", help="Appointment time")] = None,
    distance: Annotated[
        float | None, typer.Option("--distance", help="Travel distance"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Update an appointment, keeping unspecified fields as they are."""
    changes = _fields_from_options(
        status=status,
        decline_reason=decline_reason,
        referee=referee,
        venue=venue,
        match=match,
        appointment_date=date,
        appointment_time=time,
        distance=distance,
    )

    async def _update(client: RefdeskClient) -> Any:
        current = await client.appointments.get(appointment_id)
        merged = {**(current if isinstance(current, dict) else {}), **changes}
        return await client.appointments.update(appointment_id, merged)

    body = call(profile, url, _update)
    console.print(f"[green]Appointment {appointment_id} updated.[/]")
    if body is not None:
        render_record(body, fmt, title="Appointment")


@app.command()
@error_handler
def delete(
    appointment_id: Annotated[str, typer.Argument(help="Appointment ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
) -> None:
    """Delete an appointment."""
    if not force and not Confirm.ask(f"Delete appointment {appointment_id}?"):
        console.print("Cancelled.")
        return
    call(profile, url, lambda client: client.appointments.delete(appointment_id))
    console.print(f"[green]Appointment {appointment_id} deleted.[/]")
