"""Outbound credential injection for every request."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from refdesk.client.session import SessionStore


class SessionTokenAuth(httpx.Auth):
    """Set ``Authorization: Token <value>`` from the session store.

    The store is read on every request, so a login or a session teardown
    takes effect on the next call. Requests go out unchanged when no
    credential is stored.
    """

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.store.get()
        if token:
            request.headers["Authorization"] = f"Token {token}"
        yield request
