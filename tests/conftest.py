"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
import respx

from refdesk.client.session import MemorySessionStore
from refdesk.config.manager import ConfigManager
from refdesk.config.models import ServiceProfile


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ServiceProfile:
    """Return a sample service profile for testing."""
    return ServiceProfile(name="league", url="https://refs.test/api")


@pytest.fixture
def store() -> MemorySessionStore:
    """Session store holding a valid token."""
    return MemorySessionStore("abc123")


@pytest.fixture
def api():
    """respx router for the test service; unmatched requests are errors."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def mock_appointments() -> list[dict]:
    return [
        {
            "appointment_id": 11,
            "referee": 3,
            "venue": 2,
            "match": 40,
            "appointment_date": "2024-05-04",
            "appointment_time": "10:30:00",
            "status": "upcoming",
        },
        {
            "appointment_id": 12,
            "referee": 5,
            "venue": 2,
            "match": 41,
            "appointment_date": "2024-05-04",
            "appointment_time": "12:00:00",
            "status": "accepted",
        },
    ]


@pytest.fixture
def mock_referees() -> list[dict]:
    return [
        {"id": 3, "first_name": "Ana", "last_name": "Silva", "level": "A"},
        {"id": 5, "first_name": "Tom", "last_name": "Berg", "level": "B"},
    ]


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the real config and session files."""
    monkeypatch.setattr("refdesk.config.manager.CONFIG_FILE", tmp_path / "default-config.toml")
    monkeypatch.setenv("REFDESK_SESSION_FILE", str(tmp_path / "session.json"))
    monkeypatch.delenv("REFDESK_API_URL", raising=False)
    monkeypatch.delenv("REFDESK_PROFILE", raising=False)
