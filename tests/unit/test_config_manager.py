"""Tests for config manager."""

from pathlib import Path

import pytest

from refdesk.client.errors import ConfigurationError
from refdesk.config.constants import SESSION_FILE
from refdesk.config.manager import ConfigManager
from refdesk.config.models import ServiceProfile


class TestConfigManager:
    def test_load_empty(self, config_manager: ConfigManager):
        assert config_manager.config.profiles == {}
        assert config_manager.config.default_profile is None

    def test_add_sets_first_as_default(self, config_manager: ConfigManager):
        config_manager.add_profile(ServiceProfile(name="first", url="https://first.test"))
        config_manager.add_profile(ServiceProfile(name="second", url="https://second.test"))
        assert config_manager.config.default_profile == "first"

    def test_remove_default_reassigns(self, config_manager: ConfigManager):
        config_manager.add_profile(ServiceProfile(name="a", url="https://a.test"))
        config_manager.add_profile(ServiceProfile(name="b", url="https://b.test"))
        assert config_manager.remove_profile("a") is True
        assert config_manager.config.default_profile == "b"

    def test_remove_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.remove_profile("nope") is False

    def test_set_default_nonexistent(self, config_manager: ConfigManager):
        assert config_manager.set_default("nope") is False

    def test_save_and_reload(self, config_manager: ConfigManager):
        config_manager.add_profile(
            ServiceProfile(name="slow", url="https://slow.test/api/", timeout=90, verify_ssl=False),
        )
        mgr2 = ConfigManager(config_path=config_manager.config_path)
        p = mgr2.get_profile("slow")
        assert p is not None
        assert p.url == "https://slow.test/api"
        assert p.timeout == 90
        assert p.verify_ssl is False

    def test_defaults_not_written(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        text = config_manager.config_path.read_text()
        assert "timeout" not in text
        assert "verify_ssl" not in text

    def test_resolve_from_profile(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_service()
        assert resolved.name == "league"
        assert resolved.url == "https://refs.test/api"

    def test_resolve_cli_overrides(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        resolved = config_manager.resolve_service(url="https://other.test/")
        assert resolved.url == "https://other.test"

    def test_resolve_env_url(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("REFDESK_API_URL", "https://env.test/api")
        resolved = config_manager.resolve_service()
        assert resolved.url == "https://env.test/api"
        assert resolved.name == "cli"

    def test_resolve_env_profile(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        config_manager.add_profile(ServiceProfile(name="a", url="https://a.test"))
        config_manager.add_profile(ServiceProfile(name="b", url="https://b.test"))
        monkeypatch.setenv("REFDESK_PROFILE", "b")
        assert config_manager.resolve_service().url == "https://b.test"

    def test_resolve_without_url_raises(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("REFDESK_API_URL", raising=False)
        monkeypatch.delenv("REFDESK_PROFILE", raising=False)
        with pytest.raises(ConfigurationError, match="No service URL"):
            config_manager.resolve_service()

    def test_resolve_unknown_profile_raises(self, config_manager: ConfigManager):
        with pytest.raises(ConfigurationError, match="Profile 'ghost' not found"):
            config_manager.resolve_service(profile_name="ghost", url="https://refs.test")

    def test_resolve_url_override_keeps_profile_settings(self, config_manager: ConfigManager):
        config_manager.add_profile(
            ServiceProfile(name="slow", url="https://slow.test", timeout=90, verify_ssl=False),
        )
        resolved = config_manager.resolve_service(url="https://other.test/api/")
        assert resolved.url == "https://other.test/api"
        assert resolved.timeout == 90
        assert resolved.verify_ssl is False

    def test_resolve_rejects_bad_override_url(self, config_manager: ConfigManager):
        with pytest.raises(ValueError, match="http"):
            config_manager.resolve_service(url="refs.test")

    def test_file_written_owner_only(self, config_manager: ConfigManager, sample_profile: ServiceProfile):
        config_manager.add_profile(sample_profile)
        assert config_manager.config_path.stat().st_mode & 0o777 == 0o600


class TestSessionFileLocation:
    def test_env_wins(self, config_manager: ConfigManager, tmp_path: Path):
        # REFDESK_SESSION_FILE is pointed at tmp_path by the autouse fixture
        config_manager.set_session_file(tmp_path / "configured.json")
        assert config_manager.session_file() == tmp_path / "session.json"

    def test_configured_path(
        self, config_manager: ConfigManager, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ):
        monkeypatch.delenv("REFDESK_SESSION_FILE")
        config_manager.set_session_file(tmp_path / "configured.json")
        reloaded = ConfigManager(config_path=config_manager.config_path)
        assert reloaded.session_file() == tmp_path / "configured.json"

    def test_default_path(self, config_manager: ConfigManager, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("REFDESK_SESSION_FILE")
        assert config_manager.session_file() == SESSION_FILE

    def test_reset(
        self, config_manager: ConfigManager, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ):
        monkeypatch.delenv("REFDESK_SESSION_FILE")
        config_manager.set_session_file(tmp_path / "configured.json")
        config_manager.set_session_file(None)
        assert config_manager.session_file() == SESSION_FILE
        assert "session_file" not in config_manager.config_path.read_text()
