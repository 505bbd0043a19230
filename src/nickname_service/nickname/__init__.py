"""Nickname generation and validation."""

from nickname_service.nickname.generator import (
    NicknameGenerator,
    generate_nickname,
    is_allowed_generated_charset,
)
from nickname_service.nickname.registry import NicknameRegistry, get_default_registry
from nickname_service.nickname.validator import (
    MAX_NICKNAME_LENGTH,
    ValidationReason,
    ValidationResult,
    is_allowed_user_charset,
    validate_user_nickname,
)
from nickname_service.nickname.vocabulary import ADJECTIVES, NOUNS

__all__ = [
    "ADJECTIVES",
    "MAX_NICKNAME_LENGTH",
    "NOUNS",
    "NicknameGenerator",
    "NicknameRegistry",
    "ValidationReason",
    "ValidationResult",
    "generate_nickname",
    "get_default_registry",
    "is_allowed_generated_charset",
    "is_allowed_user_charset",
    "validate_user_nickname",
]
