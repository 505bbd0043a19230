"""In-memory registry of issued nicknames."""

import threading
from collections.abc import Iterator

from nickname_service.core.logging import get_logger

logger = get_logger(__name__)


class NicknameRegistry:
    """Append-only set of nicknames issued by the generator.

    The registry lives as long as its owner and is never persisted. A
    nickname enters it only through ``claim``, which checks and inserts
    under one lock, so concurrent generators cannot both issue the same
    nickname.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._issued: set[str] = set()
        self._lock = threading.Lock()

    def claim(self, nickname: str) -> bool:
        """Record the nickname if it has not been issued yet.

        Args:
            nickname: Candidate nickname.

        Returns:
            True if newly recorded, False if already issued.
        """
        with self._lock:
            if nickname in self._issued:
                return False
            self._issued.add(nickname)
            return True

    def __contains__(self, nickname: object) -> bool:
        with self._lock:
            return nickname in self._issued

    def __len__(self) -> int:
        with self._lock:
            return len(self._issued)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def snapshot(self) -> frozenset[str]:
        """Return an immutable copy of all issued nicknames."""
        with self._lock:
            return frozenset(self._issued)

    def reset(self) -> None:
        """Forget every issued nickname (service restart or test isolation)."""
        with self._lock:
            count = len(self._issued)
            self._issued.clear()
        logger.info("nickname_registry_reset", cleared=count)


# Process-wide instance, created at import
_default_registry = NicknameRegistry()


def get_default_registry() -> NicknameRegistry:
    """Get the process-wide registry instance."""
    return _default_registry
