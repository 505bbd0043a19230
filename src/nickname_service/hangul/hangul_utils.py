"""Korean Hangul utility functions for text processing.

한글 유니코드 처리를 위한 유틸리티 함수들:
- 한글 음절 분해
- 초성 추출 (초성 약어 욕설 탐지용)
- 문자 종류 판별 (완성형 음절, 자음, 모음)
"""

from __future__ import annotations

from nickname_service.core.exceptions import ConfigurationError

# =============================================================================
# Korean Unicode Constants
# =============================================================================

# 한글 음절 범위: 가(0xAC00) ~ 힣(0xD7A3)
HANGUL_START = 0xAC00
HANGUL_END = 0xD7A3

# 호환용 자모 범위: 자음 ㄱ(0x3131) ~ ㅎ(0x314E), 모음 ㅏ(0x314F) ~ ㅣ(0x3163)
JAMO_CONSONANT_START = 0x3131
JAMO_CONSONANT_END = 0x314E
JAMO_VOWEL_START = 0x314F
JAMO_VOWEL_END = 0x3163

# 초성 (Initial consonants) - 19개
CHOSEONG = (
    'ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ', 'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
)

# 중성 (Medial vowels) - 21개
JUNGSEONG = (
    'ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ', 'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ',
    'ㅙ', 'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ', 'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ', 'ㅣ'
)

# 종성 (Final consonants) - 28개 (첫번째는 종성 없음)
JONGSEONG = (
    '', 'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ', 'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ',
    'ㄻ', 'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ', 'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ',
    'ㅆ', 'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ'
)

NUM_JUNGSEONG = 21
NUM_JONGSEONG = 28


def _check_tables() -> None:
    if len(CHOSEONG) != 19 or len(set(CHOSEONG)) != 19:
        raise ConfigurationError("CHOSEONG table must hold 19 distinct consonants")
    if len(JUNGSEONG) != NUM_JUNGSEONG or len(JONGSEONG) != NUM_JONGSEONG:
        raise ConfigurationError("JUNGSEONG/JONGSEONG tables have the wrong size")
    if not all(is_consonant_jamo(c) for c in CHOSEONG):
        raise ConfigurationError("CHOSEONG table contains a non-consonant character")


# =============================================================================
# Helper Functions
# =============================================================================

def is_hangul_syllable(char: str) -> bool:
    """Check if character is a complete Hangul syllable (가-힣)."""
    if len(char) != 1:
        return False
    code = ord(char)
    return HANGUL_START <= code <= HANGUL_END


def is_consonant_jamo(char: str) -> bool:
    """Check if character is a standalone consonant jamo (ㄱ-ㅎ)."""
    if len(char) != 1:
        return False
    return JAMO_CONSONANT_START <= ord(char) <= JAMO_CONSONANT_END


def is_vowel_jamo(char: str) -> bool:
    """Check if character is a standalone vowel jamo (ㅏ-ㅣ)."""
    if len(char) != 1:
        return False
    return JAMO_VOWEL_START <= ord(char) <= JAMO_VOWEL_END


def decompose_syllable(char: str) -> tuple[str, str, str] | None:
    """Decompose a Hangul syllable into (초성, 중성, 종성).

    Example: 한 → (ㅎ, ㅏ, ㄴ)
    """
    if not is_hangul_syllable(char):
        return None

    code = ord(char) - HANGUL_START
    cho_idx = code // (NUM_JUNGSEONG * NUM_JONGSEONG)
    jung_idx = (code % (NUM_JUNGSEONG * NUM_JONGSEONG)) // NUM_JONGSEONG
    jong_idx = code % NUM_JONGSEONG

    return (CHOSEONG[cho_idx], JUNGSEONG[jung_idx], JONGSEONG[jong_idx])


def extract_initials(text: str) -> str:
    """Extract the 초성 of every syllable, keeping standalone consonants.

    Everything else (Latin letters, digits, vowels, punctuation, whitespace)
    is dropped.

    Example: 시발 → ㅅㅂ, ㅅㅂ → ㅅㅂ, 테스트123 → ㅌㅅㅌ
    """
    result = []
    for char in text:
        decomposed = decompose_syllable(char)
        if decomposed:
            result.append(decomposed[0])
        elif is_consonant_jamo(char):
            result.append(char)
    return ''.join(result)


_check_tables()
