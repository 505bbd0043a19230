#!/usr/bin/env python3
"""Interactively validate a typed nickname or a freshly generated one.

Usage:
    python scripts/try_nickname.py
    python scripts/try_nickname.py --nickname 해피호랑이123
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from nickname_service.core.exceptions import NicknameExhaustedError
from nickname_service.core.logging import setup_logging
from nickname_service.services.nickname import NicknameService, get_nickname_service

# Generation rounds before giving up; each round uses the configured retry budget
MAX_GENERATION_ROUNDS = 5


def get_safe_nickname(service: NicknameService, rounds: int = MAX_GENERATION_ROUNDS) -> str:
    """Generate a nickname, retrying a bounded number of rounds.

    Raises:
        NicknameExhaustedError: If every round is exhausted.
    """
    for _ in range(rounds):
        nickname = service.generate(use_number_suffix=True)
        if nickname is not None:
            return nickname
    raise NicknameExhaustedError(f"No nickname after {rounds} generation rounds")


def run_validation(service: NicknameService, nickname: str) -> bool:
    """Validate and print the verdict."""
    result = service.validate(nickname)
    print(f"\n입력된 닉네임: {nickname}")
    if result.is_valid:
        print("✅ 유효한 닉네임입니다.")
        return True

    print("❌ 유효하지 않은 닉네임입니다.")
    if result.reason is not None:
        print(f"   이유: {result.reason.message_ko} ({result.reason.value})")
    return False


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Validate or generate a nickname")
    parser.add_argument("--nickname", default=None, help="Nickname to validate (skips the prompt)")
    parser.add_argument("--generate", action="store_true", help="Validate a generated nickname")
    args = parser.parse_args()

    setup_logging()
    service = get_nickname_service()

    if args.nickname is not None:
        nickname = args.nickname
    elif args.generate:
        nickname = get_safe_nickname(service)
    else:
        answer = input("닉네임을 직접 입력하시겠습니까? (y/n): ").strip().lower()
        if answer == "y":
            nickname = input("\n닉네임을 입력하세요: ")
        else:
            nickname = get_safe_nickname(service)

    return 0 if run_validation(service, nickname.strip()) else 1


if __name__ == "__main__":
    sys.exit(main())
