"""Client entry point bundling the transport with every resource facade."""

from __future__ import annotations

from typing import Any

import httpx

from refdesk.client.interceptors import SessionExpiredCallback
from refdesk.client.session import SessionStore
from refdesk.client.transport import Transport
from refdesk.config.constants import DEFAULT_TIMEOUT
from refdesk.config.models import ServiceProfile
from refdesk.services.appointments import AppointmentService
from refdesk.services.auth import AuthService
from refdesk.services.availability import AvailabilityService
from refdesk.services.matches import MatchService
from refdesk.services.referees import RefereeService
from refdesk.services.teams import TeamService
from refdesk.services.venues import VenueService


class RefdeskClient:
    """Async client for the referee appointment service.

    Usage::

        async with RefdeskClient("https://refs.example.org/api", store) as client:
            page = await client.appointments.list(page=2)
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
        self.transport = Transport(
            base_url,
            store,
            timeout=timeout,
            verify_ssl=verify_ssl,
            on_session_expired=on_session_expired,
            client=client,
        )
        self.auth = AuthService(self.transport)
        self.referees = RefereeService(self.transport)
        self.appointments = AppointmentService(self.transport)
        self.availability = AvailabilityService(self.transport)
        self.venues = VenueService(self.transport)
        self.teams = TeamService(self.transport)
        self.matches = MatchService(self.transport)

    @classmethod
    def from_profile(
        cls,
        profile: ServiceProfile,
        store: SessionStore | None = None,
        *,
        on_session_expired: SessionExpiredCallback | None = None,
    ) -> RefdeskClient:
        return cls(
            profile.url,
            store,
            timeout=profile.timeout,
            verify_ssl=profile.verify_ssl,
            on_session_expired=on_session_expired,
        )

    @property
    def store(self) -> SessionStore:
        return self.transport.store

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> RefdeskClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
