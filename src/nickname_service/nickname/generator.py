"""Random nickname generation with uniqueness enforcement.

A nickname is ``adjective + noun`` with an optional numeric suffix, e.g.
``행복한호랑이123``. Candidates are drawn up to ``max_retries`` times; the
first one that passes the generated-nickname rules and has not been issued
before is recorded in the registry and returned.
"""

import random
import re
import threading
from collections.abc import Sequence

from nickname_service.core.config import get_settings
from nickname_service.core.exceptions import VocabularyError
from nickname_service.core.logging import get_logger
from nickname_service.core.protocols import NicknameRegistryProtocol, RandomSourceProtocol
from nickname_service.filtering.profanity_filter import ProfanityFilter, get_default_filter
from nickname_service.hangul.hangul_utils import is_hangul_syllable
from nickname_service.nickname.registry import get_default_registry

logger = get_logger(__name__)

SUFFIX_MIN = 10
SUFFIX_MAX = 999
DEFAULT_MAX_RETRIES = 50

_WHITESPACE_RE = re.compile(r"\s")


def is_allowed_generated_charset(text: str) -> bool:
    """Check that every character is a Hangul syllable or an ASCII digit.

    Stricter than the user rule: generated nicknames never contain Latin
    letters or lone jamo.
    """
    return all(is_hangul_syllable(char) or char in "0123456789" for char in text)


class NicknameGenerator:
    """Draws adjective/noun nicknames and records the ones it issues."""

    def __init__(
        self,
        registry: NicknameRegistryProtocol | None = None,
        rng: RandomSourceProtocol | None = None,
        profanity_filter: ProfanityFilter | None = None,
        suffix_min: int = SUFFIX_MIN,
        suffix_max: int = SUFFIX_MAX,
    ) -> None:
        """Initialize the generator.

        Args:
            registry: Registry of issued nicknames. Defaults to the
                process-wide registry.
            rng: Random source, e.g. a seeded ``random.Random``.
            profanity_filter: Filter to use instead of the shared default.
            suffix_min: Smallest numeric suffix (inclusive).
            suffix_max: Largest numeric suffix (inclusive).
        """
        if suffix_min > suffix_max:
            raise ValueError(f"suffix_min ({suffix_min}) must not exceed suffix_max ({suffix_max})")
        self.registry = registry if registry is not None else get_default_registry()
        self.rng = rng if rng is not None else random.Random()
        self.profanity_filter = profanity_filter or get_default_filter()
        self.suffix_min = suffix_min
        self.suffix_max = suffix_max

    def build_candidate(
        self, adjectives: Sequence[str], nouns: Sequence[str], use_number_suffix: bool
    ) -> str:
        """Draw one candidate without checking it."""
        adjective = self.rng.choice(adjectives)
        noun = self.rng.choice(nouns)
        if use_number_suffix:
            number = self.rng.randint(self.suffix_min, self.suffix_max)
            return f"{adjective}{noun}{number}"
        return f"{adjective}{noun}"

    def is_valid_candidate(self, candidate: str) -> bool:
        """Apply the generated-nickname rules (whitespace, charset, content)."""
        if _WHITESPACE_RE.search(candidate):
            return False
        if not is_allowed_generated_charset(candidate):
            return False
        return not self.profanity_filter.contains_profanity(candidate)

    def generate(
        self,
        adjectives: Sequence[str],
        nouns: Sequence[str],
        use_number_suffix: bool = True,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> str | None:
        """Generate a fresh nickname.

        Args:
            adjectives: Adjective vocabulary.
            nouns: Noun vocabulary.
            use_number_suffix: Append a random number in the suffix range.
            max_retries: Number of candidates to try.

        Returns:
            The issued nickname, or None if every attempt was rejected.

        Raises:
            VocabularyError: If either vocabulary is empty.
            ValueError: If max_retries is negative.
        """
        if not adjectives or not nouns:
            raise VocabularyError(
                f"Vocabulary must not be empty (adjectives={len(adjectives)}, nouns={len(nouns)})"
            )
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")

        rejected = 0
        duplicates = 0
        for attempt in range(1, max_retries + 1):
            candidate = self.build_candidate(adjectives, nouns, use_number_suffix)
            if not self.is_valid_candidate(candidate):
                rejected += 1
                continue
            if not self.registry.claim(candidate):
                duplicates += 1
                continue

            logger.debug("nickname_generated", attempts=attempt)
            return candidate

        logger.warning(
            "nickname_generation_exhausted",
            max_retries=max_retries,
            rejected=rejected,
            duplicates=duplicates,
        )
        return None


_default_rng: random.Random | None = None
_default_rng_lock = threading.Lock()


def get_default_rng() -> random.Random:
    """Get the shared random source, seeded from settings when configured."""
    global _default_rng
    if _default_rng is None:
        with _default_rng_lock:
            if _default_rng is None:
                _default_rng = random.Random(get_settings().random_seed)
    return _default_rng


def generate_nickname(
    adjectives: Sequence[str],
    nouns: Sequence[str],
    use_number_suffix: bool = True,
    max_retries: int = DEFAULT_MAX_RETRIES,
    *,
    registry: NicknameRegistryProtocol | None = None,
    rng: RandomSourceProtocol | None = None,
    profanity_filter: ProfanityFilter | None = None,
) -> str | None:
    """Generate a nickname with a one-off generator.

    Uses the process-wide registry and random source unless others are given.
    The suffix range comes from ``Settings.suffix_min`` and ``suffix_max``.
    """
    settings = get_settings()
    generator = NicknameGenerator(
        registry=registry,
        rng=rng if rng is not None else get_default_rng(),
        profanity_filter=profanity_filter,
        suffix_min=settings.suffix_min,
        suffix_max=settings.suffix_max,
    )
    return generator.generate(adjectives, nouns, use_number_suffix, max_retries)
