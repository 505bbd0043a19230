"""Nickname generation and profanity-aware validation for Korean users."""

from nickname_service.hangul.hangul_utils import extract_initials
from nickname_service.nickname.generator import generate_nickname
from nickname_service.nickname.validator import ValidationResult, validate_user_nickname

__version__ = "0.1.0"

__all__ = [
    "ValidationResult",
    "__version__",
    "extract_initials",
    "generate_nickname",
    "validate_user_nickname",
]
