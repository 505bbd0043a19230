"""Validation of user-submitted nicknames.

Users may type Hangul syllables, lone jamo (consonants and vowels), ASCII
letters and digits. Generated nicknames follow a stricter rule, see
``nickname_service.nickname.generator.is_allowed_generated_charset``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from nickname_service.filtering.profanity_filter import ProfanityFilter, get_default_filter
from nickname_service.hangul.hangul_utils import (
    is_consonant_jamo,
    is_hangul_syllable,
    is_vowel_jamo,
)

MAX_NICKNAME_LENGTH = 20

_WHITESPACE_RE = re.compile(r"\s")


class ValidationReason(str, Enum):
    """Why a user nickname was rejected."""

    EMPTY = "empty nickname"
    TOO_LONG = f"exceeds {MAX_NICKNAME_LENGTH} characters"
    WHITESPACE = "whitespace not allowed"
    SPECIAL_CHARACTERS = "special characters not allowed"
    INAPPROPRIATE = "contains inappropriate word"

    @property
    def message_ko(self) -> str:
        """Korean message shown to end users."""
        return _KOREAN_MESSAGES[self]


_KOREAN_MESSAGES = {
    ValidationReason.EMPTY: "닉네임이 비어 있습니다.",
    ValidationReason.TOO_LONG: f"닉네임은 {MAX_NICKNAME_LENGTH}자 이내여야 합니다.",
    ValidationReason.WHITESPACE: "닉네임에 공백을 포함할 수 없습니다.",
    ValidationReason.SPECIAL_CHARACTERS: "닉네임에 특수문자는 사용할 수 없습니다.",
    ValidationReason.INAPPROPRIATE: "부적절한 단어가 포함되어 있습니다.",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a nickname."""

    is_valid: bool
    reason: ValidationReason | None = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: ValidationReason) -> "ValidationResult":
        return cls(is_valid=False, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        """Serialize as ``{"isValid": ..., "reason": ...}``, omitting a missing reason."""
        data: dict[str, Any] = {"isValid": self.is_valid}
        if self.reason is not None:
            data["reason"] = self.reason.value
        return data


def _is_user_char(char: str) -> bool:
    return (
        is_hangul_syllable(char)
        or is_consonant_jamo(char)
        or is_vowel_jamo(char)
        or (char.isascii() and char.isalnum())
    )


def is_allowed_user_charset(text: str) -> bool:
    """Check that every character is a syllable, a jamo, an ASCII letter or digit."""
    return all(_is_user_char(char) for char in text)


def validate_user_nickname(
    candidate: str,
    profanity_filter: ProfanityFilter | None = None,
) -> ValidationResult:
    """Validate a nickname typed by a user.

    Rules are checked in order and the first failure wins: empty after
    trimming, longer than 20 characters, interior whitespace, characters
    outside the allowed set, banned content.

    Args:
        candidate: Raw nickname as submitted.
        profanity_filter: Filter to use instead of the shared default.

    Returns:
        ValidationResult describing the outcome. Never raises for invalid
        input.
    """
    trimmed = candidate.strip()

    if not trimmed:
        return ValidationResult.invalid(ValidationReason.EMPTY)

    if len(trimmed) > MAX_NICKNAME_LENGTH:
        return ValidationResult.invalid(ValidationReason.TOO_LONG)

    if _WHITESPACE_RE.search(trimmed):
        return ValidationResult.invalid(ValidationReason.WHITESPACE)

    if not is_allowed_user_charset(trimmed):
        return ValidationResult.invalid(ValidationReason.SPECIAL_CHARACTERS)

    active_filter = profanity_filter or get_default_filter()
    if active_filter.contains_profanity(trimmed):
        return ValidationResult.invalid(ValidationReason.INAPPROPRIATE)

    return ValidationResult.valid()
