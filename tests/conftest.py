"""Pytest fixtures for nickname-service tests."""

import random
from collections.abc import Generator
from typing import Any
from unittest.mock import patch

import pytest

from nickname_service.core.config import Settings, get_settings
from nickname_service.filtering.profanity_filter import ProfanityFilter, get_default_filter
from nickname_service.filtering.wordlists import KOREAN_BADWORDS
from nickname_service.nickname.registry import NicknameRegistry
from nickname_service.services.nickname import reset_nickname_service


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible generation."""
    return random.Random(42)


@pytest.fixture
def registry() -> NicknameRegistry:
    """Fresh, empty registry per test."""
    return NicknameRegistry()


@pytest.fixture
def latin_words() -> tuple[str, ...]:
    """Small Latin word list so tests do not depend on the bundled list."""
    return ("fuck", "shit")


@pytest.fixture
def profanity_filter(latin_words: tuple[str, ...]) -> ProfanityFilter:
    """Filter with the real Korean list and the small Latin list."""
    return ProfanityFilter(KOREAN_BADWORDS, latin_words)


@pytest.fixture
def settings_override() -> dict[str, Any]:
    """Override settings for tests.

    Tests can modify this dictionary to customize settings.
    """
    return {
        "max_retries": 20,
        "use_number_suffix": True,
        "random_seed": 1234,
        "use_latin_wordlist": False,
        "log_format": "text",
    }


@pytest.fixture
def test_settings(settings_override: dict[str, Any]) -> Settings:
    """Create a Settings instance with test-specific overrides."""
    return Settings(**settings_override)


@pytest.fixture
def mock_settings(test_settings: Settings) -> Generator[Settings, None, None]:
    """Make the shared default filter read the test settings.

    Clears the cached settings and filter before and after the test.
    """
    with patch(
        "nickname_service.filtering.profanity_filter.get_settings",
        return_value=test_settings,
    ):
        get_settings.cache_clear()
        get_default_filter.cache_clear()
        yield test_settings
    get_settings.cache_clear()
    get_default_filter.cache_clear()


@pytest.fixture(autouse=True)
def _reset_service_singleton() -> Generator[None, None, None]:
    """Keep the nickname service singleton from leaking between tests."""
    reset_nickname_service()
    yield
    reset_nickname_service()
