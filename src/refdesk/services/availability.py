"""Referee availability endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from refdesk.services._base import BaseService


class AvailabilityService(BaseService):
    async def get(self, referee_id: int | str) -> Any:
        return await self._get_body("/availability/", params={"referee": referee_id})

    async def update(self, referee_id: int | str, data: Mapping[str, Any]) -> Any:
        body = {"referee": referee_id, **data}
        return (await self._request("POST", "/availability/", body=body)).body

    async def available_dates(self, referee_id: int | str) -> Any:
        return await self._get_body("/availability/dates/", params={"referee": referee_id})

    async def unavailable_dates(self, referee_id: int | str) -> Any:
        return await self._get_body(
            "/availability/unavailable/", params={"referee": referee_id},
        )
