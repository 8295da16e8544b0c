"""Shared helpers for CLI commands — client factory, options, list rendering."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Sequence
from typing import Annotated, Any, Callable, TypeVar

import typer
from rich.console import Console

from refdesk.client.api import RefdeskClient
from refdesk.client.session import FileSessionStore, SessionStore
from refdesk.config.manager import ConfigManager
from refdesk.models.common import ListResult, coerce_list
from refdesk.output.formatter import Fields, render_listing

T = TypeVar("T")

err_console = Console(stderr=True)

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Service profile"),
]
UrlOpt = Annotated[
    str | None,
    typer.Option("--url", help="Service URL override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format"),
]


def get_session_store() -> SessionStore:
    return FileSessionStore(ConfigManager().session_file())


def notify_session_expired() -> None:
    err_console.print(
        "[yellow]Session expired. Run 'refdesk auth login' to sign in again.[/]"
    )


def make_client(profile: str | None, url: str | None) -> RefdeskClient:
    """Create a RefdeskClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    resolved = mgr.resolve_service(profile_name=profile, url=url)
    return RefdeskClient.from_profile(
        resolved,
        get_session_store(),
        on_session_expired=notify_session_expired,
    )


def call(
    profile: str | None,
    url: str | None,
    operation: Callable[[RefdeskClient], Awaitable[T]],
) -> T:
    """Run one facade *operation* on a fresh client and return its result."""

    async def _run() -> T:
        async with make_client(profile, url) as client:
            return await operation(client)

    return asyncio.run(_run())


def parse_pairs(pairs: Sequence[str] | None) -> dict[str, str]:
    """Turn ``key=value`` options into a dict, keeping their order."""
    result: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'")
        result[key] = value
    return result


def output_records(
    result: Any,
    fmt: str,
    fields: Fields,
    *,
    title: str,
) -> ListResult:
    """Coerce any list-shaped body into a ListResult and render it."""
    listing = coerce_list(result)
    render_listing(listing, fmt, fields, title=title)
    return listing
