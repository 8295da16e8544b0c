"""Venue endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from refdesk.models.common import ListResult
from refdesk.services._base import BaseService


class VenueService(BaseService):
    async def list(self) -> ListResult:
        return await self._fetch_list("/venues/", fallback="Failed to fetch venues")

    async def get(self, venue_id: int | str) -> Any:
        return await self._get_body(f"/venues/{venue_id}/", fallback="Failed to fetch venue")

    async def create(self, data: Mapping[str, Any]) -> Any:
        return (await self._request("POST", "/venues/", body=data)).body

    async def update(self, venue_id: int | str, data: Mapping[str, Any]) -> Any:
        return (await self._request("PUT", f"/venues/{venue_id}/", body=data)).body

    async def delete(self, venue_id: int | str) -> Any:
        return (await self._request("DELETE", f"/venues/{venue_id}/")).body
