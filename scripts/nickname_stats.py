#!/usr/bin/env python3
"""Generate a batch of nicknames and report how many pass validation.

Every generated nickname is re-checked with the user validation rules, so a
non-zero failure count (other than exhaustion) means the generation rules
and the user rules have drifted apart.

Usage:
    python scripts/nickname_stats.py [--count N] [--max-retries N] [--seed N] [--json]
"""

import argparse
import json
import random
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from nickname_service.core.logging import setup_logging
from nickname_service.nickname.registry import NicknameRegistry
from nickname_service.services.nickname import (
    GenerationStats,
    NicknameService,
    collect_generation_stats,
)


def print_report(stats: GenerationStats) -> None:
    """Print a human-readable summary."""
    print("=" * 60)
    print(f"NICKNAME GENERATION STATS ({stats.total} attempts)")
    print("=" * 60)
    print(f"Success:  {stats.success}")
    print(f"Fail:     {stats.fail}")

    if stats.reasons:
        print("\nFailure reasons:")
        for reason, count in stats.reasons.most_common():
            print(f"  - {reason}: {count}")

    if stats.failures:
        print("\nFailed nicknames:")
        for nickname, reason in stats.failures:
            print(f"  - {nickname or '(none)'} -> {reason}")


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Nickname generation statistics")
    parser.add_argument("--count", type=int, default=100, help="Nicknames to generate")
    parser.add_argument("--max-retries", type=int, default=30, help="Attempts per nickname")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args()

    setup_logging()

    service = NicknameService(registry=NicknameRegistry(), rng=random.Random(args.seed))
    stats = collect_generation_stats(service, args.count, max_retries=args.max_retries)

    if args.json:
        print(
            json.dumps(
                {
                    "total": stats.total,
                    "success": stats.success,
                    "fail": stats.fail,
                    "reasons": dict(stats.reasons),
                    "failures": [{"nickname": n, "reason": r} for n, r in stats.failures],
                },
                ensure_ascii=False,
                indent=2,
            )
        )
    else:
        print_report(stats)

    return 0 if stats.fail == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
