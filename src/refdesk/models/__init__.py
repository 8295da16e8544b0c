"""Response envelopes and the list contract returned by the facades."""

from refdesk.models.common import ListResult, PageMeta, build_query, coerce_list
from refdesk.models.envelope import (
    Envelope,
    ListEnvelope,
    ObjectEnvelope,
    PageEnvelope,
    decode_envelope,
)

__all__ = [
    "Envelope",
    "ListEnvelope",
    "ListResult",
    "ObjectEnvelope",
    "PageEnvelope",
    "PageMeta",
    "build_query",
    "coerce_list",
    "decode_envelope",
]
