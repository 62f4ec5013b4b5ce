#!/usr/bin/env python3
"""
Time each password check.

Loads the common password corpus up front so the timings cover only the
checks themselves.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --number 5000 --repeat 7
"""
import statistics
import sys
import timeit

import structlog

from passablewords import (
    check_entropy,
    check_length,
    check_password,
    check_uniqueness,
    init_corpus,
)
from passablewords.core.logging import setup_logging

logger = structlog.get_logger()

CASES = [
    ("check_length", check_length, "short"),
    ("check_uniqueness", check_uniqueness, "password"),
    ("check_entropy", check_entropy, "Not Too Random"),
    ("check_password", check_password, "Th1s iS a Sup3rR4ndom PassW0rd!"),
]


def run(number: int, repeat: int) -> list[dict]:
    """Run every case and return per-call timings in microseconds."""
    results = []
    for name, check, password in CASES:
        timings = timeit.repeat(lambda: check(password), number=number, repeat=repeat)
        per_call = [t / number * 1_000_000 for t in timings]
        results.append({
            "check": name,
            "password": password,
            "best_us": round(min(per_call), 3),
            "median_us": round(statistics.median(per_call), 3),
        })
    return results


def main() -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark the password checks")
    parser.add_argument(
        "--number",
        type=int,
        default=1000,
        help="Calls per timing run (default: 1000)",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=5,
        help="Timing runs per check (default: 5)",
    )
    args = parser.parse_args()

    setup_logging()
    corpus = init_corpus()
    logger.info("Starting benchmark", corpus_size=len(corpus), number=args.number)

    for row in run(args.number, args.repeat):
        print(
            f"{row['check']:<18} {row['password']!r:<36} "
            f"best {row['best_us']:>10.3f} us   median {row['median_us']:>10.3f} us"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
