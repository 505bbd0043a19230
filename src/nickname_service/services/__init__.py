"""Service layer for nickname-service."""

from nickname_service.services.nickname import (
    GenerationStats,
    NicknameService,
    collect_generation_stats,
    get_nickname_service,
    reset_nickname_service,
)

__all__ = [
    "GenerationStats",
    "NicknameService",
    "collect_generation_stats",
    "get_nickname_service",
    "reset_nickname_service",
]
