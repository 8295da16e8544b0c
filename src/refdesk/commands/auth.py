"""Auth commands — login, logout, whoami, register."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Prompt

from refdesk.client.errors import error_handler
from refdesk.commands import _common
from refdesk.commands._common import FormatOpt, ProfileOpt, UrlOpt, call
from refdesk.output.formatter import render_record

app = typer.Typer(name="auth", help="Sign in and out of the appointment service.")
console = Console()


@app.command()
@error_handler
def login(
    username: Annotated[str, typer.Option("--username", "-u", help="Username")],
    password: Annotated[
        str | None, typer.Option("--password", help="Password (prompted if omitted)"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
) -> None:
    """Log in and store the session token."""
    if password is None:
        password = Prompt.ask("Password", password=True)
    credentials = {"username": username, "password": password}
    body = call(profile, url, lambda client: client.auth.login(credentials))
    token = body.get("token") if isinstance(body, dict) else None
    if not token:
        console.print("[yellow]Login succeeded but no token was returned.[/]")
        raise typer.Exit(1)
    _common.get_session_store().set(token)
    console.print(f"[green]Logged in as {username}.[/]")


@app.command()
@error_handler
def logout(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
) -> None:
    """Log out and forget the stored session token."""
    store = _common.get_session_store()
    if store.get() is None:
        console.print("Not logged in.")
        return
    call(profile, url, lambda client: client.auth.logout())
    store.clear()
    console.print("[green]Logged out.[/]")


@app.command()
@error_handler
def whoami(
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show the currently authenticated user."""
    body = call(profile, url, lambda client: client.auth.current_user())
    render_record(body, fmt, title="Current User")


@app.command()
@error_handler
def register(
    username: Annotated[str, typer.Option("--username", "-u", help="Username")],
    email: Annotated[str, typer.Option("--email", help="Email address")],
    password: Annotated[
        str | None, typer.Option("--password", help="Password (prompted if omitted)"),
    ] = None,
    profile: ProfileOpt = None,
    url: UrlOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Register a new user account."""
    if password is None:
        password = Prompt.ask("Password", password=True)
    user_data = {"username": username, "email": email, "password": password}
    body = call(profile, url, lambda client: client.auth.register(user_data))
    render_record(body, fmt, title="Registered")
