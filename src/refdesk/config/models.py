"""Pydantic models for client configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from refdesk.config.constants import DEFAULT_TIMEOUT


class ServiceProfile(BaseModel):
    """A named connection profile for the appointment service."""

    name: str
    url: str = Field(description="Service base URL, e.g. https://refs.example.org/api")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")


class ClientConfig(BaseModel):
    """Everything stored in the config file."""

    default_profile: str | None = None
    session_file: Path | None = Field(
        default=None, description="Where the session token is kept",
    )
    profiles: dict[str, ServiceProfile] = Field(default_factory=dict)
