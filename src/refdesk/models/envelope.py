"""Response envelopes decoded once at the transport boundary.

The service answers list endpoints either with a bare JSON array or with a
paginated wrapper ``{"results": [...], "count", "next", "previous"}``.
Anything else (a single record, an empty body, a malformed wrapper) is
kept as an opaque object envelope.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class ListEnvelope(BaseModel):
    """Bare array body."""

    kind: Literal["list"] = "list"
    records: list[Any]

    def as_list(self) -> list[Any]:
        return list(self.records)


class PageEnvelope(BaseModel):
    """Paginated wrapper body."""

    kind: Literal["page"] = "page"
    results: list[Any]
    count: int | None = None
    next: Any = None
    previous: Any = None

    def as_list(self) -> list[Any]:
        return list(self.results)


class ObjectEnvelope(BaseModel):
    """Any other body, kept as decoded."""

    kind: Literal["object"] = "object"
    body: Any = None

    def as_list(self) -> list[Any]:
        return []


Envelope = Annotated[
    Union[ListEnvelope, PageEnvelope, ObjectEnvelope],
    Field(discriminator="kind"),
]


def decode_envelope(body: Any) -> ListEnvelope | PageEnvelope | ObjectEnvelope:
    """Classify a decoded JSON body into one of the known envelope shapes."""
    if isinstance(body, list):
        return ListEnvelope(records=body)
    if isinstance(body, dict) and isinstance(body.get("results"), list):
        count = body.get("count")
        return PageEnvelope(
            results=body["results"],
            count=count if isinstance(count, int) and not isinstance(count, bool) else None,
            next=body.get("next"),
            previous=body.get("previous"),
        )
    return ObjectEnvelope(body=body)
