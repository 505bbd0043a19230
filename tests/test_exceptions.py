"""Tests for custom exception hierarchy."""

import pytest

from nickname_service.core.exceptions import (
    ConfigurationError,
    NicknameExhaustedError,
    NicknameServiceException,
    VocabularyError,
)


class TestNicknameServiceException:
    """Tests for base NicknameServiceException."""

    def test_default_message(self) -> None:
        """Test exception with default empty message."""
        exc = NicknameServiceException()
        assert exc.message == ""
        assert str(exc) == ""

    def test_custom_message(self) -> None:
        """Test exception with custom message."""
        exc = NicknameServiceException("Custom error message")
        assert exc.message == "Custom error message"
        assert str(exc) == "Custom error message"


class TestConfigurationError:
    """Tests for ConfigurationError and VocabularyError."""

    def test_default_message(self) -> None:
        """Test exception with default message."""
        assert ConfigurationError().message == "Invalid configuration"
        assert VocabularyError().message == "Vocabulary must not be empty"

    def test_inheritance(self) -> None:
        """VocabularyError is a configuration problem."""
        exc = VocabularyError()
        assert isinstance(exc, ConfigurationError)
        assert isinstance(exc, NicknameServiceException)

    def test_can_be_raised_and_caught(self) -> None:
        """Test that the exception can be caught as its base class."""
        with pytest.raises(ConfigurationError, match="empty"):
            raise VocabularyError()


class TestNicknameExhaustedError:
    """Tests for NicknameExhaustedError."""

    def test_attempts(self) -> None:
        """The number of attempts is kept on the exception."""
        exc = NicknameExhaustedError("gave up", attempts=30)
        assert exc.message == "gave up"
        assert exc.attempts == 30

    def test_inheritance(self) -> None:
        """Exhaustion is not a configuration problem."""
        exc = NicknameExhaustedError()
        assert isinstance(exc, NicknameServiceException)
        assert not isinstance(exc, ConfigurationError)
