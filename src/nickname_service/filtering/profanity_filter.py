"""Layered profanity filter for nicknames.

Three independent exact-substring checks, any hit rejects the text:

1. Korean literal terms (case-insensitive).
2. Initial-consonant projection of the text against the projection of each
   Korean term, which catches abbreviations such as ``ㅅㅂ``.
3. Latin terms from the bundled English word list (case-insensitive).

Initials matching tolerates false positives: an innocent word whose
initials collide with a banned term's initials is rejected too.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from nickname_service.core.config import get_settings
from nickname_service.core.logging import get_logger
from nickname_service.filtering.wordlists import KOREAN_BADWORDS, load_latin_badwords
from nickname_service.hangul.hangul_utils import extract_initials

logger = get_logger(__name__)


class MatchKind(str, Enum):
    """Which check rejected the text."""

    KOREAN_LITERAL = "korean_literal"
    KOREAN_INITIALS = "korean_initials"
    LATIN_LITERAL = "latin_literal"


@dataclass(frozen=True)
class ProfanityMatch:
    """The first banned term found in a text."""

    kind: MatchKind
    term: str


class ProfanityFilter:
    """Substring-based profanity filter over Korean and Latin word lists."""

    def __init__(
        self,
        korean_words: Iterable[str] = KOREAN_BADWORDS,
        latin_words: Iterable[str] = (),
    ) -> None:
        """Initialize the filter.

        Args:
            korean_words: Korean literal terms. Their initial-consonant
                projections are precomputed here.
            latin_words: Latin literal terms.
        """
        self.korean_words: tuple[str, ...] = tuple(w.lower() for w in korean_words)
        self.latin_words: tuple[str, ...] = tuple(w.lower() for w in latin_words)
        # Parallel to korean_words, not deduplicated
        self.bad_initials: tuple[str, ...] = tuple(extract_initials(w) for w in self.korean_words)

    def find_match(self, text: str) -> ProfanityMatch | None:
        """Return the first banned term contained in the text, if any."""
        lower = text.lower()

        for word in self.korean_words:
            if word and word in lower:
                return ProfanityMatch(MatchKind.KOREAN_LITERAL, word)

        initials = extract_initials(lower)
        for bad in self.bad_initials:
            # A term without Hangul projects to "" and would match everything
            if bad and bad in initials:
                return ProfanityMatch(MatchKind.KOREAN_INITIALS, bad)

        for word in self.latin_words:
            if word and word in lower:
                return ProfanityMatch(MatchKind.LATIN_LITERAL, word)

        return None

    def contains_profanity(self, text: str) -> bool:
        """Check whether the text should be rejected as profane."""
        match = self.find_match(text)
        if match is not None:
            logger.debug("profanity_detected", kind=match.kind.value, text_length=len(text))
            return True
        return False


@lru_cache
def get_default_filter() -> ProfanityFilter:
    """Get the shared filter built from the bundled word lists."""
    settings = get_settings()
    latin_words = load_latin_badwords() if settings.use_latin_wordlist else ()
    profanity_filter = ProfanityFilter(KOREAN_BADWORDS, latin_words)
    logger.info(
        "profanity_filter_loaded",
        korean_terms=len(profanity_filter.korean_words),
        latin_terms=len(profanity_filter.latin_words),
    )
    return profanity_filter


def contains_profanity(text: str) -> bool:
    """Check the text against the shared default filter."""
    return get_default_filter().contains_profanity(text)
