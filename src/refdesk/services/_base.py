"""Shared plumbing for the resource facades."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Literal, NoReturn

from refdesk.client.errors import ServiceError
from refdesk.client.messages import message_from_body
from refdesk.client.transport import (
    Failure,
    QueryParams,
    RequestDescriptor,
    Success,
    Transport,
)
from refdesk.models.common import ListResult, coerce_list

logger = logging.getLogger(__name__)


class BaseService:
    """A facade bound to one :class:`Transport`."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def _raise(
        self,
        failure: Failure,
        fallback: str | None = None,
        fields: Sequence[str] = ("error",),
        string_body: Literal["first", "last"] | None = None,
    ) -> NoReturn:
        """Raise a :class:`ServiceError` for *failure*.

        Without a *fallback* the interceptor's normalized message is used
        unchanged.
        """
        if fallback is None:
            message = failure.user_message
        else:
            message = message_from_body(
                failure.body, fields, string_body=string_body,
            ) or fallback
        raise ServiceError.from_failure(failure, message)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        body: Mapping[str, Any] | None = None,
        timeout_ms: int | None = None,
        fallback: str | None = None,
        fields: Sequence[str] = ("error",),
        string_body: Literal["first", "last"] | None = None,
    ) -> Success:
        result = await self.transport.send(
            RequestDescriptor(method, path, params, body, timeout_ms),
        )
        if isinstance(result, Failure):
            self._raise(result, fallback, fields, string_body)
        return result

    async def _get_body(self, path: str, **kwargs: Any) -> Any:
        return (await self._request("GET", path, **kwargs)).body

    async def _fetch_list(
        self,
        path: str,
        *,
        fallback: str,
        params: QueryParams | None = None,
    ) -> ListResult:
        """GET a collection and coerce it into a :class:`ListResult`."""
        try:
            success = await self._request("GET", path, params=params, fallback=fallback)
        except ServiceError as exc:
            logger.warning("%s: %s", fallback, exc.message)
            raise
        return coerce_list(success.envelope)
