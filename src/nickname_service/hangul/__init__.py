"""Hangul decomposition and character classification."""

from nickname_service.hangul.hangul_utils import (
    CHOSEONG,
    decompose_syllable,
    extract_initials,
    is_consonant_jamo,
    is_hangul_syllable,
    is_vowel_jamo,
)

__all__ = [
    "CHOSEONG",
    "decompose_syllable",
    "extract_initials",
    "is_consonant_jamo",
    "is_hangul_syllable",
    "is_vowel_jamo",
]
