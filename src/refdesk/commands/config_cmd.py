"""Config commands — manage service profiles and the session file location."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from refdesk.client.errors import error_handler
from refdesk.config.manager import ConfigManager
from refdesk.config.models import ServiceProfile
from refdesk.models.common import ListResult
from refdesk.output.formatter import render_listing, render_record

app = typer.Typer(name="config", help="Manage service profiles and client configuration.")
console = Console()

_PROFILE_FIELDS = [
    ("Name", "name"),
    ("URL", "url"),
    ("Timeout", "timeout"),
    ("Default", "default"),
]


def _get_manager() -> ConfigManager:
    return ConfigManager()


@app.command()
@error_handler
def init() -> None:
    """Interactive setup — create your first service profile."""
    mgr = _get_manager()
    console.print("[bold]refdesk setup[/]\n")

    name = Prompt.ask("Profile name", default="default")
    url = Prompt.ask("Service URL (e.g. https://refs.example.org/api)")
    verify_ssl = Confirm.ask("Verify SSL certificates?", default=True)

    mgr.add_profile(ServiceProfile(name=name, url=url, verify_ssl=verify_ssl))
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="Service URL")],
    timeout: Annotated[
        Optional[float], typer.Option("--timeout", help="Request timeout in seconds"),
    ] = None,
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a service profile."""
    mgr = _get_manager()
    fields = {"timeout": timeout} if timeout is not None else {}
    profile = ServiceProfile(name=name, url=url, verify_ssl=not no_verify_ssl, **fields)
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'refdesk config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    records = [
        {**p.model_dump(), "default": name == default}
        for name, p in profiles.items()
    ]
    render_listing(
        ListResult(data=records), fmt, _PROFILE_FIELDS, title="Service Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details."""
    profile = _get_manager().get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)
    render_record(profile.model_dump(), fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default service profile."""
    if _get_manager().set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
) -> None:
    """Remove a service profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")


@app.command("session-file")
@error_handler
def session_file(
    path: Annotated[
        Optional[Path], typer.Argument(help="New location for the session token file"),
    ] = None,
    reset: Annotated[bool, typer.Option("--reset", help="Go back to the default location")] = False,
) -> None:
    """Show or change where the login token is stored."""
    mgr = _get_manager()
    if reset or path is not None:
        mgr.set_session_file(None if reset else path)
    console.print(str(mgr.session_file()), soft_wrap=True, markup=False)
