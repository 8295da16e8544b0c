"""Appointment endpoints — paginated listing and payload formatting.

Create and update only forward the fields the service understands; any
other key supplied by the caller is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from refdesk.client.errors import ServiceError
from refdesk.config.constants import (
    APPOINTMENT_LIST_TIMEOUT_MS,
    APPOINTMENT_ORDERING,
    APPOINTMENT_PAGE_SIZE,
    DEFAULT_APPOINTMENT_TIME,
    INITIAL_APPOINTMENT_STATUS,
)
from refdesk.models.common import ListResult, page_meta
from refdesk.services._base import BaseService

logger = logging.getLogger(__name__)


def format_appointment_time(value: Any) -> str:
    """Normalize an appointment time for submission.

    ``None`` or empty becomes ``"00:00:00"``; ``"HH:MM"`` and
    ``"HH:MM:SS"`` pass through; a bare hour gets ``":00"`` appended.
    """
    if value is None or value == "":
        return DEFAULT_APPOINTMENT_TIME
    text = str(value)
    if ":" in text:
        return text
    return f"{text}:00"


def build_create_payload(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "appointment_id": data.get("appointment_id"),
        "referee": data.get("referee"),
        "venue": data.get("venue"),
        "match": data.get("match"),
        "appointment_date": data.get("appointment_date"),
        "appointment_time": format_appointment_time(data.get("appointment_time")),
        "status": INITIAL_APPOINTMENT_STATUS,
        "distance": data.get("distance") or 0,
    }


def build_update_payload(
    appointment_id: int | str, data: Mapping[str, Any],
) -> dict[str, Any]:
    # status and decline_reason go through as given, without defaults
    return {
        "appointment_id": appointment_id,
        "referee": data.get("referee"),
        "venue": data.get("venue"),
        "match": data.get("match"),
        "status": data.get("status"),
        "decline_reason": data.get("decline_reason"),
        "appointment_date": data.get("appointment_date"),
        "appointment_time": data.get("appointment_time"),
        "distance": data.get("distance") or 0,
    }


class AppointmentService(BaseService):
    """Referee appointments.

    The listing relies on server ordering (newest date first, then
    earliest time) and never re-sorts locally.
    """

    page_size = APPOINTMENT_PAGE_SIZE

    async def list(self, page: int = 1) -> ListResult:
        params = {
            "page": page,
            "page_size": self.page_size,
            "ordering": APPOINTMENT_ORDERING,
        }
        try:
            success = await self._request(
                "GET",
                "/appointments/",
                params=params,
                timeout_ms=APPOINTMENT_LIST_TIMEOUT_MS,
                fallback="Failed to fetch appointments",
            )
        except ServiceError as exc:
            logger.warning("Appointment fetch error: %s", exc.message)
            raise
        envelope = success.envelope
        return ListResult(
            data=envelope.as_list(),
            meta=page_meta(envelope, page, self.page_size),
        )

    async def get(self, appointment_id: int | str) -> Any:
        return await self._get_body(
            f"/appointments/{appointment_id}/",
            fallback="Failed to fetch appointment details",
        )

    async def create(self, data: Mapping[str, Any]) -> Any:
        payload = build_create_payload(data)
        logger.debug("Submitting formatted appointment data: %s", payload)
        try:
            success = await self._request(
                "POST",
                "/appointments/",
                body=payload,
                fallback="Failed to create appointment",
                fields=("error", "detail"),
                string_body="first",
            )
        except ServiceError as exc:
            logger.warning("Appointment creation error: %s", exc.message)
            raise
        return success.body

    async def update(self, appointment_id: int | str, data: Mapping[str, Any]) -> Any:
        payload = build_update_payload(appointment_id, data)
        logger.debug("Updating appointment %s with data: %s", appointment_id, payload)
        try:
            success = await self._request(
                "PUT",
                f"/appointments/{appointment_id}/",
                body=payload,
                fallback="An error occurred while updating the appointment",
                fields=("detail", "error"),
            )
        except ServiceError as exc:
            logger.warning("Error updating appointment: %s", exc.message)
            raise
        return success.body

    async def delete(self, appointment_id: int | str) -> None:
        await self._request(
            "DELETE",
            f"/appointments/{appointment_id}/",
            fallback="Failed to delete appointment",
        )
