"""Rendering of service responses — list results and single records.

Tables are for people; JSON, YAML and CSV are for scripts. A
:class:`ListResult` renders its ``data`` as rows and, when the service
paginated it, a page footer under the table.
"""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Mapping, Sequence
from typing import Any

import yaml
from rich.console import Console

from refdesk.models.common import ListResult, PageMeta
from refdesk.output.tables import kv_table, make_table, record_rows

console = Console()
err_console = Console(stderr=True)

# (column label, record key) pairs
Fields = Sequence[tuple[str, str]]


def to_plain(data: Any) -> Any:
    if isinstance(data, ListResult):
        return data.to_dict()
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json", exclude_none=True)
    return data


def page_footer(meta: PageMeta) -> str:
    return f"Page {meta.current_page} of {meta.total_pages} ({meta.count} total)"


def _dump(data: Any, fmt: str) -> bool:
    """Print *data* as JSON or YAML; False if *fmt* is neither."""
    if fmt == "json":
        console.print_json(json.dumps(to_plain(data), default=str))
    elif fmt == "yaml":
        text = yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False)
        console.print(text, end="", markup=False)
    else:
        return False
    return True


def _csv(labels: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(labels)
    writer.writerows(["" if v is None else v for v in row] for row in rows)
    console.print(buf.getvalue(), end="", markup=False)


def render_listing(
    listing: ListResult, fmt: str, fields: Fields, *, title: str,
) -> None:
    """Render a list result in *fmt*, one row per record."""
    if _dump(listing, fmt):
        return
    labels = [label for label, _ in fields]
    rows = record_rows(listing.data, [key for _, key in fields])
    if fmt == "csv":
        _csv(labels, rows)
        return
    if not listing.data:
        err_console.print(f"[yellow]No {title.lower()} found.[/]")
        return
    console.print(make_table(title, labels, rows))
    if listing.meta is not None:
        console.print(page_footer(listing.meta))


def render_record(body: Any, fmt: str, *, title: str | None = None) -> None:
    """Render one response body.

    Mappings become key/value tables (``field,value`` rows in CSV); a
    list of scalars, such as a set of dates, becomes a one-column table.
    Anything else is printed as-is, or as JSON for CSV output.
    """
    if _dump(body, fmt):
        return
    body = to_plain(body)
    if isinstance(body, Mapping):
        if fmt == "csv":
            _csv(["field", "value"], list(body.items()))
        else:
            console.print(kv_table(body, title=title))
    elif fmt == "csv":
        _dump(body, "json")
    elif isinstance(body, list) and not any(isinstance(v, Mapping) for v in body):
        console.print(make_table(title, [title or "Value"], [[v] for v in body]))
    else:
        console.print(body)
