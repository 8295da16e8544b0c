"""Team endpoints. Plain pass-throughs returning the decoded body."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from refdesk.services._base import BaseService


class TeamService(BaseService):
    async def list(self) -> Any:
        return await self._get_body("/teams/")

    async def get(self, team_id: int | str) -> Any:
        return await self._get_body(f"/teams/{team_id}/")

    async def create(self, data: Mapping[str, Any]) -> Any:
        return (await self._request("POST", "/teams/", body=data)).body

    async def update(self, team_id: int | str, data: Mapping[str, Any]) -> Any:
        return (await self._request("PUT", f"/teams/{team_id}/", body=data)).body

    async def delete(self, team_id: int | str) -> Any:
        return (await self._request("DELETE", f"/teams/{team_id}/")).body
