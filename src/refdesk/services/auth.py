"""Authentication endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from refdesk.services._base import BaseService


class AuthService(BaseService):
    """Login, registration, logout and current-user lookup.

    These return the decoded body untouched. Storing the token returned
    by :meth:`login` is left to the caller.
    """

    async def login(self, credentials: Mapping[str, Any]) -> Any:
        return (await self._request("POST", "/auth/login/", body=credentials)).body

    async def register(self, user_data: Mapping[str, Any]) -> Any:
        return (await self._request("POST", "/auth/register/", body=user_data)).body

    async def logout(self) -> Any:
        return (await self._request("POST", "/auth/logout/")).body

    async def current_user(self) -> Any:
        return await self._get_body("/auth/current-user/")
