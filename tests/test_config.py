"""Tests for settings."""

import pytest
from pydantic import ValidationError

from nickname_service.core.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default configuration values."""
        for name in ("MAX_RETRIES", "USE_NUMBER_SUFFIX", "SUFFIX_MIN", "SUFFIX_MAX", "RANDOM_SEED"):
            monkeypatch.delenv(f"NICKNAME_{name}", raising=False)
        settings = Settings(_env_file=None)

        assert settings.max_retries == 50
        assert settings.use_number_suffix is True
        assert settings.suffix_min == 10
        assert settings.suffix_max == 999
        assert settings.random_seed is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables with the NICKNAME_ prefix are read."""
        monkeypatch.setenv("NICKNAME_MAX_RETRIES", "7")
        monkeypatch.setenv("NICKNAME_USE_NUMBER_SUFFIX", "false")

        settings = Settings(_env_file=None)

        assert settings.max_retries == 7
        assert settings.use_number_suffix is False

    def test_negative_retries_rejected(self) -> None:
        """max_retries must not be negative."""
        with pytest.raises(ValidationError):
            Settings(max_retries=-1)

    def test_inverted_suffix_range_rejected(self) -> None:
        """suffix_min may not exceed suffix_max."""
        with pytest.raises(ValidationError, match="suffix_min"):
            Settings(suffix_min=500, suffix_max=100)

    def test_get_settings_is_cached(self) -> None:
        """get_settings returns the same instance until the cache is cleared."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
