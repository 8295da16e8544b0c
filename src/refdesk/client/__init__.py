"""HTTP transport, interceptors and the bundled service client."""

from refdesk.client.api import RefdeskClient
from refdesk.client.errors import FailureKind, RefdeskError, ServiceError
from refdesk.client.session import FileSessionStore, MemorySessionStore, SessionStore

__all__ = [
    "FailureKind",
    "FileSessionStore",
    "MemorySessionStore",
    "RefdeskClient",
    "RefdeskError",
    "ServiceError",
    "SessionStore",
]
