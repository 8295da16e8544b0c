"""Referee endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from refdesk.models.common import ListResult, build_query
from refdesk.services._base import BaseService


class RefereeService(BaseService):
    """Referee profiles and filtered referee listings."""

    async def get(self, referee_id: int | str) -> Any:
        return await self._get_body(
            f"/referee/{referee_id}/", fallback="Failed to fetch referee profile",
        )

    async def update(self, referee_id: int | str, data: Mapping[str, Any]) -> Any:
        return (await self._request("PUT", f"/referee/{referee_id}/", body=data)).body

    async def list(self) -> ListResult:
        return await self._fetch_list("/referee/", fallback="Failed to fetch referees")

    async def filter(self, filters: Mapping[str, Any]) -> ListResult:
        """List referees matching *filters*; empty or ``None`` values are skipped."""
        return await self._fetch_list(
            "/referee/filter/",
            params=build_query(filters),
            fallback="Failed to filter referees",
        )
