"""Static profanity word lists.

한국어 비속어 목록과 영어 비속어 목록 로더.
영어 목록은 better-profanity 배포본에 포함된 단어 목록을 그대로 읽어 씁니다.
"""

from __future__ import annotations

from functools import lru_cache

from better_profanity.utils import get_complete_path_of_file, read_wordlist

# =============================================================================
# 한국어 비속어 (원문 + 초성 약어)
# =============================================================================

KOREAN_BADWORDS: tuple[str, ...] = (
    "씨발", "ㅅㅂ", "ㅁㅊ", "좆", "섹스", "10새", "애미", "자살",
)

# better-profanity 패키지에 포함된 영어 단어 목록 파일명
LATIN_WORDLIST_FILENAME = "profanity_wordlist.txt"


@lru_cache
def load_latin_badwords() -> tuple[str, ...]:
    """영어 비속어 목록 반환 (소문자, 최초 1회만 읽음)."""
    path = get_complete_path_of_file(LATIN_WORDLIST_FILENAME)
    return tuple(word.lower() for word in read_wordlist(path))
