"""Nickname service used by the presentation layer."""

import random
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from nickname_service.core.config import Settings, get_settings
from nickname_service.core.exceptions import NicknameExhaustedError
from nickname_service.core.logging import get_logger
from nickname_service.core.protocols import NicknameRegistryProtocol, RandomSourceProtocol
from nickname_service.filtering.profanity_filter import ProfanityFilter, get_default_filter
from nickname_service.nickname.generator import NicknameGenerator
from nickname_service.nickname.registry import get_default_registry
from nickname_service.nickname.validator import ValidationResult, validate_user_nickname
from nickname_service.nickname.vocabulary import ADJECTIVES, NOUNS

logger = get_logger(__name__)

EXHAUSTED_REASON = "generation exhausted"


class NicknameService:
    """Bundles the vocabulary, the generator and the validator."""

    def __init__(
        self,
        settings: Settings | None = None,
        registry: NicknameRegistryProtocol | None = None,
        rng: RandomSourceProtocol | None = None,
        profanity_filter: ProfanityFilter | None = None,
        adjectives: Sequence[str] = ADJECTIVES,
        nouns: Sequence[str] = NOUNS,
    ) -> None:
        """Initialize the nickname service.

        Args:
            settings: Settings to use instead of the cached ones.
            registry: Registry of issued nicknames. Defaults to the
                process-wide registry.
            rng: Random source. Defaults to ``random.Random`` seeded with
                ``settings.random_seed``.
            profanity_filter: Filter to use instead of the shared default.
            adjectives: Adjective vocabulary.
            nouns: Noun vocabulary.
        """
        self._settings = settings or get_settings()
        self.adjectives = tuple(adjectives)
        self.nouns = tuple(nouns)
        self.profanity_filter = profanity_filter or get_default_filter()
        self.registry = registry if registry is not None else get_default_registry()
        self._generator = NicknameGenerator(
            registry=self.registry,
            rng=rng if rng is not None else random.Random(self._settings.random_seed),
            profanity_filter=self.profanity_filter,
            suffix_min=self._settings.suffix_min,
            suffix_max=self._settings.suffix_max,
        )

    @property
    def issued_count(self) -> int:
        """Number of nicknames issued through the registry."""
        return len(self.registry)

    def generate(
        self,
        use_number_suffix: bool | None = None,
        max_retries: int | None = None,
    ) -> str | None:
        """Generate a nickname from the service vocabulary.

        Args:
            use_number_suffix: Overrides ``settings.use_number_suffix``.
            max_retries: Overrides ``settings.max_retries``.

        Returns:
            The issued nickname, or None when the retry budget ran out.
        """
        if use_number_suffix is None:
            use_number_suffix = self._settings.use_number_suffix
        if max_retries is None:
            max_retries = self._settings.max_retries
        return self._generator.generate(self.adjectives, self.nouns, use_number_suffix, max_retries)

    def generate_or_raise(
        self,
        use_number_suffix: bool | None = None,
        max_retries: int | None = None,
    ) -> str:
        """Like ``generate`` but raise instead of returning None.

        Raises:
            NicknameExhaustedError: If no nickname could be issued.
        """
        nickname = self.generate(use_number_suffix, max_retries)
        if nickname is None:
            attempts = self._settings.max_retries if max_retries is None else max_retries
            raise NicknameExhaustedError(
                f"No unique nickname found in {attempts} attempts", attempts=attempts
            )
        return nickname

    def validate(self, candidate: str) -> ValidationResult:
        """Validate a user-submitted nickname."""
        return validate_user_nickname(candidate, profanity_filter=self.profanity_filter)


@dataclass
class GenerationStats:
    """Outcome of a batch of generate-then-validate rounds."""

    total: int = 0
    success: int = 0
    fail: int = 0
    reasons: Counter[str] = field(default_factory=Counter)
    failures: list[tuple[str | None, str]] = field(default_factory=list)

    def record_failure(self, nickname: str | None, reason: str) -> None:
        self.fail += 1
        self.reasons[reason] += 1
        self.failures.append((nickname, reason))


def collect_generation_stats(
    service: NicknameService,
    total: int,
    max_retries: int | None = None,
) -> GenerationStats:
    """Generate ``total`` nicknames and validate each with the user rules.

    A generated nickname should always pass validation, so any failure
    other than exhaustion points at drift between the two rule sets.
    """
    stats = GenerationStats()
    for _ in range(total):
        stats.total += 1
        nickname = service.generate(use_number_suffix=True, max_retries=max_retries)
        if nickname is None:
            stats.record_failure(None, EXHAUSTED_REASON)
            continue

        result = service.validate(nickname)
        if result.is_valid:
            stats.success += 1
        else:
            stats.record_failure(nickname, result.reason.value if result.reason else "unknown")

    logger.info(
        "generation_stats_collected",
        total=stats.total,
        success=stats.success,
        fail=stats.fail,
    )
    return stats


# Singleton instance
_nickname_service: NicknameService | None = None


def get_nickname_service() -> NicknameService:
    """Get the singleton nickname service instance."""
    global _nickname_service
    if _nickname_service is None:
        _nickname_service = NicknameService()
    return _nickname_service


def reset_nickname_service() -> None:
    """Drop the singleton so the next call builds a fresh one."""
    global _nickname_service
    _nickname_service = None
