"""Session credential storage.

The credential lives under a single ``authToken`` key. The transport and
the inbound interceptor receive a store explicitly, so tests can swap in
:class:`MemorySessionStore` for the file-backed one.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol

from refdesk.config.constants import AUTH_TOKEN_KEY, ENV_SESSION_FILE, SESSION_FILE


class SessionStore(Protocol):
    """Read/write/delete access to the session credential."""

    def get(self) -> str | None: ...

    def set(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemorySessionStore:
    """Session store kept in process memory."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileSessionStore:
    """Session store persisted as a small JSON document on disk."""

    def __init__(self, path: Path | None = None) -> None:
        env_path = os.environ.get(ENV_SESSION_FILE)
        self.path = path or (Path(env_path) if env_path else SESSION_FILE)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp = self.path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.write(fd, json.dumps(data).encode())
        finally:
            os.close(fd)
        temp.replace(self.path)

    def get(self) -> str | None:
        token = self._read().get(AUTH_TOKEN_KEY)
        return token or None

    def set(self, token: str) -> None:
        data = self._read()
        data[AUTH_TOKEN_KEY] = token
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if data.pop(AUTH_TOKEN_KEY, None) is None:
            return
        if data:
            self._write(data)
        else:
            self.path.unlink(missing_ok=True)
