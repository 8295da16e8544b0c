"""Config file handling — service profiles and the session file location.

The file is TOML::

    default_profile = "league"
    session_file = "/home/ana/.refdesk-session.json"

    [profiles.league]
    url = "https://refs.example.org/api"
    timeout = 45.0

Only values that differ from their defaults are written back.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w

from refdesk.client.errors import ConfigurationError
from refdesk.config.constants import (
    CONFIG_FILE,
    ENV_API_URL,
    ENV_PROFILE,
    ENV_SESSION_FILE,
    SESSION_FILE,
)
from refdesk.config.models import ClientConfig, ServiceProfile

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


def _document(config: ClientConfig) -> dict[str, Any]:
    doc = config.model_dump(mode="json", exclude_defaults=True, exclude={"profiles"})
    profiles = {
        name: profile.model_dump(mode="json", exclude={"name"}, exclude_defaults=True)
        for name, profile in config.profiles.items()
    }
    if profiles:
        doc["profiles"] = profiles
    return doc


class ConfigManager:
    """Reads and updates the refdesk config file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: ClientConfig | None = None

    @property
    def config(self) -> ClientConfig:
        if self._config is None:
            self._config = self._read()
        return self._config

    def _read(self) -> ClientConfig:
        try:
            raw = self.config_path.read_bytes()
        except FileNotFoundError:
            return ClientConfig()
        data = tomllib.loads(raw.decode())
        profiles = data.pop("profiles", {})
        data["profiles"] = {
            name: {**fields, "name": name} for name, fields in profiles.items()
        }
        return ClientConfig.model_validate(data)

    def _commit(self) -> None:
        directory = self.config_path.parent
        directory.mkdir(mode=0o700, parents=True, exist_ok=True)
        temp = self.config_path.with_suffix(".tmp")
        fd = os.open(str(temp), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "wb") as fh:
            tomli_w.dump(_document(self.config), fh)
        temp.replace(self.config_path)

    # -- profiles --

    def add_profile(self, profile: ServiceProfile) -> None:
        """Add or replace *profile*; the first one added becomes the default."""
        self.config.profiles[profile.name] = profile
        self.config.default_profile = self.config.default_profile or profile.name
        self._commit()

    def remove_profile(self, name: str) -> bool:
        if self.config.profiles.pop(name, None) is None:
            return False
        if self.config.default_profile == name:
            self.config.default_profile = next(iter(self.config.profiles), None)
        self._commit()
        return True

    def set_default(self, name: str) -> bool:
        if name not in self.config.profiles:
            return False
        self.config.default_profile = name
        self._commit()
        return True

    def get_profile(self, name: str | None = None) -> ServiceProfile | None:
        """Return the named profile, or the default one when *name* is empty."""
        return self.config.profiles.get(name or self.config.default_profile or "")

    def resolve_service(
        self,
        profile_name: str | None = None,
        url: str | None = None,
    ) -> ServiceProfile:
        """Work out which service to talk to.

        The URL comes from *url*, then ``REFDESK_API_URL``, then the
        profile named by *profile_name* or ``REFDESK_PROFILE`` (or the
        default profile). Timeout and SSL verification always come from
        that profile when there is one.
        """
        name = profile_name or os.environ.get(ENV_PROFILE)
        profile = self.get_profile(name)
        if name and profile is None:
            raise ConfigurationError(f"Profile '{name}' not found.")

        resolved_url = url or os.environ.get(ENV_API_URL)
        if profile is not None:
            if resolved_url:
                return ServiceProfile(**{**profile.model_dump(), "url": resolved_url})
            return profile
        if not resolved_url:
            raise ConfigurationError(
                "No service URL configured. Use 'refdesk config add' or set "
                f"{ENV_API_URL} or pass --url."
            )
        return ServiceProfile(name="cli", url=resolved_url)

    # -- session --

    def session_file(self) -> Path:
        """Location of the session token file.

        ``REFDESK_SESSION_FILE`` wins over the configured path, which wins
        over the per-user data directory.
        """
        env_path = os.environ.get(ENV_SESSION_FILE)
        if env_path:
            return Path(env_path)
        return self.config.session_file or SESSION_FILE

    def set_session_file(self, path: Path | None) -> None:
        """Store a custom session file location; ``None`` restores the default."""
        self.config.session_file = path.expanduser() if path is not None else None
        self._commit()
