"""Failure kinds, typed exceptions and the CLI error handling decorator."""

from __future__ import annotations

import enum
import functools
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from rich.console import Console

if TYPE_CHECKING:
    from refdesk.client.transport import Failure

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class FailureKind(str, enum.Enum):
    """Category of a failed request."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    SERVER = "server"


class RefdeskError(Exception):
    """Base exception for refdesk."""

    exit_code: int = 1


class ConfigurationError(RefdeskError):
    """Missing or invalid client configuration."""

    exit_code = 6


class ServiceError(RefdeskError):
    """A facade operation failed; ``message`` is safe to show to users."""

    kind: FailureKind | None = None

    def __init__(
        self,
        message: str,
        *,
        kind: FailureKind | None = None,
        status_code: int | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        if kind is not None:
            self.kind = kind
        super().__init__(message)

    @classmethod
    def from_failure(cls, failure: Failure, message: str) -> ServiceError:
        """Build the exception subclass matching ``failure.kind``."""
        exc_cls = _KIND_TO_ERROR.get(failure.kind, ServiceError)
        return exc_cls(message, kind=failure.kind, status_code=failure.status_code)


class ServiceConnectionError(ServiceError):
    """Cannot reach the service."""

    exit_code = 2
    kind = FailureKind.NETWORK


class RequestTimeoutError(ServiceError):
    """The request was aborted by its timeout."""

    exit_code = 2
    kind = FailureKind.TIMEOUT


class AuthenticationError(ServiceError):
    """Authentication failed (401/403)."""

    exit_code = 3
    kind = FailureKind.AUTHENTICATION


class ValidationError(ServiceError):
    """The service rejected the request (4xx)."""

    exit_code = 7
    kind = FailureKind.VALIDATION


class ServerError(ServiceError):
    """The service failed while handling the request (5xx)."""

    exit_code = 8
    kind = FailureKind.SERVER


_KIND_TO_ERROR: dict[FailureKind, type[ServiceError]] = {
    FailureKind.NETWORK: ServiceConnectionError,
    FailureKind.TIMEOUT: RequestTimeoutError,
    FailureKind.AUTHENTICATION: AuthenticationError,
    FailureKind.VALIDATION: ValidationError,
    FailureKind.SERVER: ServerError,
}


def error_handler(func: F) -> F:
    """Decorator that catches RefdeskError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except RefdeskError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
