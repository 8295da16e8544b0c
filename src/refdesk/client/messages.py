"""Extract a single human-readable message from a failed response body."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal

from refdesk.config.constants import DEFAULT_ERROR_MESSAGE

NORMALIZED_FIELDS = ("error", "detail", "message")


def _field_value(body: Any, field: str) -> str | None:
    if not isinstance(body, dict):
        return None
    value = body.get(field)
    if not value:
        return None
    return value if isinstance(value, str) else str(value)


def message_from_body(
    body: Any,
    fields: Sequence[str] = NORMALIZED_FIELDS,
    *,
    string_body: Literal["first", "last"] | None = "last",
) -> str | None:
    """Return the first non-empty message found in *body*, or ``None``.

    *fields* are looked up in order on mapping bodies. A body that is
    itself a non-empty string is tried before the fields (``"first"``),
    after them (``"last"``), or never (``None``).
    """
    is_text = isinstance(body, str) and bool(body)
    if string_body == "first" and is_text:
        return body
    for field in fields:
        value = _field_value(body, field)
        if value:
            return value
    if string_body == "last" and is_text:
        return body
    return None


def normalize_error_message(
    body: Any,
    transport_message: str | None = None,
    fallback: str = DEFAULT_ERROR_MESSAGE,
) -> str:
    """Derive the Normalized Error message.

    Priority: ``error``, ``detail``, ``message``, a string body, the
    transport-level message, then *fallback*.
    """
    return message_from_body(body) or transport_message or fallback
