"""Core module for nickname-service.

This module provides core functionality including:
- Configuration management (Settings, get_settings)
- Custom exceptions (NicknameServiceException and subclasses)
- Protocol definitions for dependency injection
- Logging utilities
"""

from nickname_service.core.config import Settings, get_settings
from nickname_service.core.exceptions import (
    ConfigurationError,
    NicknameExhaustedError,
    NicknameServiceException,
    VocabularyError,
)
from nickname_service.core.logging import configure_default_logging, get_logger, setup_logging
from nickname_service.core.protocols import (
    NicknameRegistryProtocol,
    RandomSourceProtocol,
)

__all__ = [
    "ConfigurationError",
    "NicknameExhaustedError",
    "NicknameRegistryProtocol",
    "NicknameServiceException",
    "RandomSourceProtocol",
    "Settings",
    "VocabularyError",
    "configure_default_logging",
    "get_logger",
    "get_settings",
    "setup_logging",
]
