"""Protocol definitions for nickname-service.

This module defines the interfaces the generator depends on, so that the
random source and the issued-nickname registry can be injected and swapped
(a seeded ``random.Random`` in tests, an external store in a deployment that
needs durability).
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSourceProtocol(Protocol):
    """Source of randomness used by the nickname generator.

    ``random.Random`` satisfies this protocol, which makes any seeded
    instance a valid, reproducible source.
    """

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        ...

    def randint(self, a: int, b: int) -> int:
        """Return a uniformly chosen integer N such that a <= N <= b."""
        ...


class NicknameRegistryProtocol(Protocol):
    """Registry of nicknames that have already been issued.

    Implementations must make ``claim`` atomic: two concurrent claims of the
    same nickname must not both succeed.
    """

    def claim(self, nickname: str) -> bool:
        """Record the nickname as issued if it is not already.

        Args:
            nickname: Candidate nickname.

        Returns:
            True if the nickname was newly recorded, False if it was
            already issued.
        """
        ...

    def __contains__(self, nickname: object) -> bool:
        """Check whether a nickname has already been issued."""
        ...

    def __len__(self) -> int:
        """Return the number of issued nicknames."""
        ...
