"""Rich table rendering helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from rich.table import Table


def _cell(value: Any) -> str:
    return str(value) if value is not None else ""


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(_cell(cell) for cell in row))
    return table


def kv_table(data: Mapping[str, Any], *, title: str | None = None) -> Table:
    """Render a key-value mapping as a two-column table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, _cell(value))
    return table


def record_rows(
    records: Sequence[Any], fields: Sequence[str],
) -> list[list[Any]]:
    """Pick *fields* out of each record; non-mapping records give blank rows."""
    return [
        [rec.get(f) if isinstance(rec, Mapping) else None for f in fields]
        for rec in records
    ]
