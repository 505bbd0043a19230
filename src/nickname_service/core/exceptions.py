"""Custom exception hierarchy for nickname-service.

Expected outcomes such as a rejected nickname or an exhausted generator are
returned as values. The exceptions here cover programming errors in the
static inputs and callers that explicitly ask for an exception on exhaustion.
"""


class NicknameServiceException(Exception):  # noqa: N818
    """Base exception for nickname-service.

    All custom exceptions in nickname-service inherit from this class, so
    callers can catch every service-specific error with a single clause.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message


class ConfigurationError(NicknameServiceException):
    """Configuration is invalid.

    Raised when static tables or settings are malformed.
    """

    def __init__(self, message: str = "Invalid configuration") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)


class VocabularyError(ConfigurationError):
    """Adjective or noun vocabulary is unusable.

    Raised when a generator is built from an empty vocabulary.
    """

    def __init__(self, message: str = "Vocabulary must not be empty") -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)


class NicknameExhaustedError(NicknameServiceException):
    """No valid, unique nickname was found within the retry budget."""

    def __init__(self, message: str = "Nickname generation exhausted", attempts: int = 0) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            attempts: Number of attempts made before giving up.
        """
        super().__init__(message)
        self.attempts = attempts
