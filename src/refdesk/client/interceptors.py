"""Inbound interceptor run on every failed response."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Callable

from refdesk.client.messages import normalize_error_message
from refdesk.client.session import SessionStore

if TYPE_CHECKING:
    from refdesk.client.transport import Failure

logger = logging.getLogger(__name__)

SessionExpiredCallback = Callable[[], None]


class SessionExpiryInterceptor:
    """Tear down the session on 401 and attach a user-facing message.

    The failure is always handed back to the caller; this stage only
    annotates it.
    """

    def __init__(
        self,
        store: SessionStore,
        on_session_expired: SessionExpiredCallback | None = None,
    ) -> None:
        self.store = store
        self.on_session_expired = on_session_expired

    def __call__(self, failure: Failure) -> Failure:
        if failure.status_code == 401:
            logger.warning("Session expired; clearing stored credential")
            self.store.clear()
            if self.on_session_expired is not None:
                self.on_session_expired()
        message = normalize_error_message(failure.body, failure.transport_message)
        return dataclasses.replace(failure, user_message=message)
