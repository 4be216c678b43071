"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from axtract.config import AxtractSettings, get_settings, reset_settings


class TestDefaults:
    """Test default values."""

    def test_defaults(self):
        """Test the out-of-the-box configuration."""
        settings = AxtractSettings()

        assert settings.max_depth == 50
        assert settings.messaging_timeout == 1.0
        assert settings.debug_mode is False
        assert settings.log_level == "INFO"
        assert settings.structured_logging is False
        assert settings.log_file is None

    def test_effective_log_level(self):
        """Test that debug mode forces DEBUG."""
        assert AxtractSettings(log_level="WARNING").effective_log_level == "WARNING"
        assert AxtractSettings(log_level="WARNING", debug_mode=True).effective_log_level == "DEBUG"


class TestEnvironment:
    """Test environment and .env overrides."""

    def test_env_prefix(self, monkeypatch):
        """Test AXTRACT_ variables."""
        monkeypatch.setenv("AXTRACT_MAX_DEPTH", "80")
        monkeypatch.setenv("AXTRACT_MESSAGING_TIMEOUT", "0.5")
        monkeypatch.setenv("AXTRACT_DEBUG_MODE", "true")

        settings = AxtractSettings()

        assert settings.max_depth == 80
        assert settings.messaging_timeout == 0.5
        assert settings.effective_log_level == "DEBUG"

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """Test reading a .env file from the working directory."""
        (tmp_path / ".env").write_text("AXTRACT_MAX_DEPTH=7\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert AxtractSettings().max_depth == 7

    @pytest.mark.parametrize(
        "name,value",
        [
            ("AXTRACT_MAX_DEPTH", "0"),
            ("AXTRACT_MESSAGING_TIMEOUT", "0"),
            ("AXTRACT_LOG_LEVEL", "VERBOSE"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        """Test that out-of-range values are rejected."""
        monkeypatch.setenv(name, value)

        with pytest.raises(ValidationError):
            AxtractSettings()


class TestSingleton:
    """Test the cached settings instance."""

    def test_same_instance(self):
        """Test that get_settings caches."""
        assert get_settings() is get_settings()

    def test_reset(self, monkeypatch):
        """Test that reset picks up a changed environment."""
        first = get_settings()
        monkeypatch.setenv("AXTRACT_MAX_DEPTH", "12")
        reset_settings()

        second = get_settings()

        assert second is not first
        assert second.max_depth == 12
