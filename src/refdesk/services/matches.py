"""Match endpoints."""

from __future__ import annotations

from typing import Any

from refdesk.client.errors import FailureKind, ServiceError
from refdesk.client.transport import Failure, RequestDescriptor
from refdesk.config.constants import MATCH_DETAIL_TIMEOUT_MS, TIMEOUT_MESSAGE
from refdesk.models.common import ListResult, build_query
from refdesk.services._base import BaseService


class MatchService(BaseService):
    async def list(self) -> ListResult:
        return await self._fetch_list("/matches/", fallback="Failed to fetch matches")

    async def get(self, match_id: int | str) -> Any:
        """Fetch one match, giving up after five seconds."""
        result = await self.transport.send(
            RequestDescriptor(
                "GET", f"/matches/{match_id}/", timeout_ms=MATCH_DETAIL_TIMEOUT_MS,
            ),
        )
        if isinstance(result, Failure):
            if result.kind is FailureKind.TIMEOUT:
                raise ServiceError.from_failure(result, TIMEOUT_MESSAGE)
            self._raise(result, "Failed to fetch match details")
        return result.body

    async def available(self) -> ListResult:
        """Matches that have no appointment yet."""
        return await self._fetch_list(
            "/matches/available/", fallback="Failed to fetch available matches",
        )

    async def by_venue(self, venue_id: int | str) -> ListResult:
        return await self._fetch_list(
            f"/matches/venue/{venue_id}/", fallback="Failed to fetch venue matches",
        )

    async def by_date_range(
        self, start_date: str | None, end_date: str | None,
    ) -> ListResult:
        return await self._fetch_list(
            "/matches/",
            params=build_query({"start_date": start_date, "end_date": end_date}),
            fallback="Failed to fetch matches for date range",
        )
