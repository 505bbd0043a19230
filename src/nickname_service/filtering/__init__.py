"""Profanity filtering for Korean and Latin text."""

from nickname_service.filtering.profanity_filter import (
    MatchKind,
    ProfanityFilter,
    ProfanityMatch,
    contains_profanity,
    get_default_filter,
)
from nickname_service.filtering.wordlists import KOREAN_BADWORDS, load_latin_badwords

__all__ = [
    "KOREAN_BADWORDS",
    "MatchKind",
    "ProfanityFilter",
    "ProfanityMatch",
    "contains_profanity",
    "get_default_filter",
    "load_latin_badwords",
]
