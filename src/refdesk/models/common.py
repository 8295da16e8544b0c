"""List results, pagination metadata, and query building shared by facades."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from refdesk.models.envelope import (
    ListEnvelope,
    ObjectEnvelope,
    PageEnvelope,
    decode_envelope,
)

QueryValue = str | int | float | bool


class PageMeta(BaseModel):
    """Pagination metadata attached to the appointment listing."""

    count: int
    next: Any = None
    previous: Any = None
    current_page: int
    total_pages: int


class ListResult(BaseModel):
    """Consumer-facing list contract: ``data`` is always a list."""

    data: list[Any] = Field(default_factory=list)
    meta: PageMeta | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def coerce_list(value: Any) -> ListResult:
    """Map any accepted response shape onto :class:`ListResult`.

    Bare arrays are used as-is, paginated wrappers yield their
    ``results``, everything else yields an empty list. A value that is
    already a :class:`ListResult` is returned unchanged.
    """
    if isinstance(value, ListResult):
        return value
    if not isinstance(value, (ListEnvelope, PageEnvelope, ObjectEnvelope)):
        value = decode_envelope(value)
    return ListResult(data=value.as_list())


def page_meta(
    envelope: ListEnvelope | PageEnvelope | ObjectEnvelope,
    page: int,
    page_size: int,
) -> PageMeta:
    """Compute pagination metadata for the requested *page*."""
    records = envelope.as_list()
    count = len(records)
    next_page = previous_page = None
    if isinstance(envelope, PageEnvelope):
        count = envelope.count or count
        next_page = envelope.next
        previous_page = envelope.previous
    return PageMeta(
        count=count,
        next=next_page,
        previous=previous_page,
        current_page=page,
        total_pages=math.ceil(count / page_size),
    )


def _query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(filters: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Serialize *filters* into ordered query pairs.

    Keys whose value is ``None`` or an empty string are left out;
    insertion order is kept.
    """
    if not filters:
        return []
    return [
        (key, _query_value(value))
        for key, value in filters.items()
        if value is not None and value != ""
    ]
