"""Tests for the transport and its interceptors."""

from __future__ import annotations

import json

import httpx
import pytest

from refdesk.client.auth import SessionTokenAuth
from refdesk.client.errors import FailureKind
from refdesk.client.interceptors import SessionExpiryInterceptor
from refdesk.client.session import MemorySessionStore
from refdesk.client.transport import Failure, RequestDescriptor, Success, Transport
from refdesk.models.envelope import ListEnvelope, PageEnvelope

BASE = "https://refs.test/api"


class TestSessionTokenAuth:
    def test_sets_token_header(self):
        auth = SessionTokenAuth(MemorySessionStore("abc"))
        request = next(auth.auth_flow(httpx.Request("GET", BASE)))
        assert request.headers["Authorization"] == "Token abc"

    def test_no_token_leaves_headers(self):
        auth = SessionTokenAuth(MemorySessionStore())
        request = next(auth.auth_flow(httpx.Request("GET", BASE)))
        assert "Authorization" not in request.headers

    def test_store_fault_propagates(self):
        class BrokenStore(MemorySessionStore):
            def get(self):
                raise OSError("disk gone")

        auth = SessionTokenAuth(BrokenStore())
        with pytest.raises(OSError, match="disk gone"):
            next(auth.auth_flow(httpx.Request("GET", BASE)))


class TestSessionExpiryInterceptor:
    def test_401_clears_and_notifies(self):
        store = MemorySessionStore("abc")
        calls = []
        interceptor = SessionExpiryInterceptor(store, lambda: calls.append(1))
        failure = interceptor(
            Failure(FailureKind.AUTHENTICATION, status_code=401, body={"detail": "Invalid token."}),
        )
        assert store.get() is None
        assert calls == [1]
        assert failure.user_message == "Invalid token."

    def test_403_keeps_session(self):
        store = MemorySessionStore("abc")
        interceptor = SessionExpiryInterceptor(store)
        interceptor(Failure(FailureKind.AUTHENTICATION, status_code=403))
        assert store.get() == "abc"

    def test_transport_message_used(self):
        interceptor = SessionExpiryInterceptor(MemorySessionStore())
        failure = interceptor(
            Failure(FailureKind.TIMEOUT, transport_message="timeout of 5000ms exceeded"),
        )
        assert failure.user_message == "timeout of 5000ms exceeded"
        assert failure.kind is FailureKind.TIMEOUT


@pytest.mark.asyncio
class TestTransport:
    async def test_success_decodes_envelope(self, api, store):
        api.get(f"{BASE}/venues/").mock(return_value=httpx.Response(200, json=[{"id": 1}]))
        async with Transport(BASE, store) as transport:
            result = await transport.send(RequestDescriptor("GET", "/venues/"))
        assert isinstance(result, Success)
        assert result.ok
        assert isinstance(result.envelope, ListEnvelope)
        assert result.body == [{"id": 1}]

    async def test_paginated_envelope(self, api, store):
        api.get(f"{BASE}/venues/").mock(
            return_value=httpx.Response(200, json={"results": [], "count": 0}),
        )
        async with Transport(BASE, store) as transport:
            result = await transport.send(RequestDescriptor("GET", "/venues/"))
        assert isinstance(result.envelope, PageEnvelope)

    async def test_headers(self, api, store):
        route = api.post(f"{BASE}/teams/").mock(return_value=httpx.Response(201, json={"id": 9}))
        async with Transport(BASE, store) as transport:
            await transport.send(RequestDescriptor("POST", "/teams/", body={"name": "U12"}))
        request = route.calls.last.request
        assert request.headers["Authorization"] == "Token abc123"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"name": "U12"}

    async def test_no_credential_no_header(self, api):
        route = api.get(f"{BASE}/teams/").mock(return_value=httpx.Response(200, json=[]))
        async with Transport(BASE, MemorySessionStore()) as transport:
            await transport.send(RequestDescriptor("GET", "/teams/"))
        assert "Authorization" not in route.calls.last.request.headers

    async def test_token_read_per_request(self, api):
        route = api.get(f"{BASE}/teams/").mock(return_value=httpx.Response(200, json=[]))
        store = MemorySessionStore()
        async with Transport(BASE, store) as transport:
            await transport.send(RequestDescriptor("GET", "/teams/"))
            store.set("fresh")
            await transport.send(RequestDescriptor("GET", "/teams/"))
        assert route.calls[1].request.headers["Authorization"] == "Token fresh"

    async def test_query_params_keep_order(self, api, store):
        route = api.get(f"{BASE}/referee/filter/").mock(return_value=httpx.Response(200, json=[]))
        async with Transport(BASE, store) as transport:
            await transport.send(
                RequestDescriptor("GET", "/referee/filter/", params=[("team", "A"), ("level", "2")]),
            )
        assert route.calls.last.request.url.query == b"team=A&level=2"

    async def test_401_tears_down_session_once(self, api, store):
        api.get(f"{BASE}/auth/current-user/").mock(
            return_value=httpx.Response(401, json={"detail": "Invalid token."}),
        )
        expired = []
        async with Transport(BASE, store, on_session_expired=lambda: expired.append(1)) as transport:
            result = await transport.send(RequestDescriptor("GET", "/auth/current-user/"))
        assert isinstance(result, Failure)
        assert result.kind is FailureKind.AUTHENTICATION
        assert result.status_code == 401
        assert store.get() is None
        assert expired == [1]
        assert result.user_message == "Invalid token."

    @pytest.mark.parametrize(
        ("status", "kind"),
        [(400, FailureKind.VALIDATION), (404, FailureKind.VALIDATION), (503, FailureKind.SERVER)],
    )
    async def test_status_kinds(self, api, store, status, kind):
        api.get(f"{BASE}/venues/9/").mock(return_value=httpx.Response(status, text="nope"))
        async with Transport(BASE, store) as transport:
            result = await transport.send(RequestDescriptor("GET", "/venues/9/"))
        assert result.kind is kind
        assert result.body == "nope"
        assert result.user_message == "nope"
        assert store.get() == "abc123"

    async def test_timeout_failure(self, api, store):
        api.get(f"{BASE}/matches/1/").mock(side_effect=httpx.ReadTimeout)
        async with Transport(BASE, store) as transport:
            result = await transport.send(
                RequestDescriptor("GET", "/matches/1/", timeout_ms=5000),
            )
        assert result.kind is FailureKind.TIMEOUT
        assert result.status_code is None
        assert result.user_message == "timeout of 5000ms exceeded"

    async def test_network_failure(self, api, store):
        api.get(f"{BASE}/matches/").mock(side_effect=httpx.ConnectError)
        async with Transport(BASE, store) as transport:
            result = await transport.send(RequestDescriptor("GET", "/matches/"))
        assert result.kind is FailureKind.NETWORK
        assert result.user_message

    async def test_per_call_timeout_override(self, api, store):
        route = api.get(f"{BASE}/matches/1/").mock(return_value=httpx.Response(200, json={}))
        async with Transport(BASE, store, timeout=30) as transport:
            await transport.send(RequestDescriptor("GET", "/matches/1/", timeout_ms=5000))
            await transport.send(RequestDescriptor("GET", "/matches/1/"))
        assert route.calls[0].request.extensions["timeout"]["read"] == 5.0
        assert route.calls[1].request.extensions["timeout"]["read"] == 30

    async def test_single_attempt(self, api, store):
        route = api.get(f"{BASE}/matches/").mock(return_value=httpx.Response(500, json={}))
        async with Transport(BASE, store) as transport:
            await transport.send(RequestDescriptor("GET", "/matches/"))
        assert route.call_count == 1

    async def test_empty_body_is_none(self, api, store):
        api.delete(f"{BASE}/teams/4/").mock(return_value=httpx.Response(204))
        async with Transport(BASE, store) as transport:
            result = await transport.send(RequestDescriptor("DELETE", "/teams/4/"))
        assert result.ok
        assert result.body is None

    async def test_redirect_loop_is_network_failure(self, api, store):
        api.get(f"{BASE}/venues/").mock(
            return_value=httpx.Response(302, headers={"Location": f"{BASE}/venues/"}),
        )
        async with Transport(BASE, store) as transport:
            result = await transport.send(RequestDescriptor("GET", "/venues/"))
        assert result.kind is FailureKind.NETWORK
        assert result.status_code is None
        assert result.user_message

    async def test_injected_client_used_and_left_open(self, api, store):
        route = api.get(f"{BASE}/teams/").mock(return_value=httpx.Response(200, json=[]))
        client = httpx.AsyncClient()
        async with Transport(BASE, store, client=client) as transport:
            result = await transport.send(RequestDescriptor("GET", "/teams/"))
        assert result.ok
        assert route.calls[0].request.headers["Authorization"] == "Token abc123"
        assert route.calls[0].request.headers["Accept"] == "application/json"
        assert not client.is_closed
        await client.aclose()

    async def test_owned_client_closed(self, store):
        transport = Transport(BASE, store)
        await transport.aclose()
        assert transport._client.is_closed
