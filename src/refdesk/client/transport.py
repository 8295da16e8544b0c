"""Single HTTP transport shared by every facade."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

import httpx

from refdesk.client.auth import SessionTokenAuth
from refdesk.client.errors import FailureKind
from refdesk.client.interceptors import SessionExpiredCallback, SessionExpiryInterceptor
from refdesk.client.session import MemorySessionStore, SessionStore
from refdesk.config.constants import DEFAULT_ERROR_MESSAGE, DEFAULT_TIMEOUT
from refdesk.models.common import QueryValue
from refdesk.models.envelope import (
    ListEnvelope,
    ObjectEnvelope,
    PageEnvelope,
    decode_envelope,
)

logger = logging.getLogger(__name__)

QueryParams = Union[Mapping[str, QueryValue], Sequence[tuple[str, QueryValue]]]


@dataclass(frozen=True)
class RequestDescriptor:
    """One outgoing call. Built fresh for every request."""

    method: str
    path: str
    params: QueryParams | None = None
    body: Mapping[str, Any] | None = None
    timeout_ms: int | None = None


@dataclass(frozen=True)
class Success:
    status_code: int
    body: Any
    envelope: ListEnvelope | PageEnvelope | ObjectEnvelope

    ok = True


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    status_code: int | None = None
    body: Any = None
    transport_message: str | None = None
    user_message: str = field(default=DEFAULT_ERROR_MESSAGE)

    ok = False


Result = Union[Success, Failure]

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


def _kind_for_status(status: int) -> FailureKind:
    if status in (401, 403):
        return FailureKind.AUTHENTICATION
    if status >= 500:
        return FailureKind.SERVER
    return FailureKind.VALIDATION


class Transport:
    """Async HTTP transport with the credential and session interceptors.

    Every call is attempted exactly once. Expected failures (error status,
    timeout, unreachable host, redirect loop) come back as :class:`Failure`
    values rather than exceptions.

    An existing ``httpx.AsyncClient`` may be passed as *client*; requests
    still go to *base_url* with the session credential attached, and the
    caller stays responsible for closing it.
    """

    def __init__(
        self,
        base_url: str,
        store: SessionStore | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        on_session_expired: SessionExpiredCallback | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.store = store if store is not None else MemorySessionStore()
        self.timeout = timeout
        self.auth = SessionTokenAuth(self.store)
        self.inbound = SessionExpiryInterceptor(self.store, on_session_expired)
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                timeout=timeout,
                follow_redirects=True,
                transport=httpx.AsyncHTTPTransport(retries=0, verify=verify_ssl),
                headers=JSON_HEADERS,
            )
        self._client = client

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Transport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def _timeout_ms(self, descriptor: RequestDescriptor) -> int:
        if descriptor.timeout_ms is not None:
            return descriptor.timeout_ms
        return int(self.timeout * 1000)

    async def send(self, descriptor: RequestDescriptor) -> Result:
        """Dispatch *descriptor* and return a :class:`Success` or :class:`Failure`."""
        timeout: Any = httpx.USE_CLIENT_DEFAULT
        if descriptor.timeout_ms is not None:
            timeout = descriptor.timeout_ms / 1000
        params = list(descriptor.params.items()) if isinstance(
            descriptor.params, Mapping,
        ) else descriptor.params
        try:
            response = await self._client.request(
                descriptor.method,
                f"{self.base_url}{descriptor.path}",
                params=params or None,
                json=dict(descriptor.body) if descriptor.body is not None else None,
                headers=JSON_HEADERS,
                auth=self.auth,
                timeout=timeout,
            )
        except httpx.TimeoutException:
            ms = self._timeout_ms(descriptor)
            logger.debug("%s %s timed out after %sms", descriptor.method, descriptor.path, ms)
            failure = Failure(
                FailureKind.TIMEOUT, transport_message=f"timeout of {ms}ms exceeded",
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.debug("%s %s failed: %s", descriptor.method, descriptor.path, exc)
            failure = Failure(
                FailureKind.NETWORK, transport_message=str(exc) or "Network Error",
            )
        else:
            body = _decode_body(response)
            logger.debug(
                "%s %s -> %s", descriptor.method, descriptor.path, response.status_code,
            )
            if response.is_success:
                return Success(response.status_code, body, decode_envelope(body))
            failure = Failure(
                _kind_for_status(response.status_code),
                status_code=response.status_code,
                body=body,
            )
        return self.inbound(failure)
