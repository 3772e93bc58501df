"""Listing primes with the sieve of Eratosthenes."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from itertools import compress

DEFAULT_LIMIT = 10**8
DEFAULT_STEP = 100


def primes_up_to(limit: int) -> list[int]:
    """All primes not greater than ``limit``, in increasing order."""
    if limit < 2:
        return []
    marks = bytearray([1]) * (limit + 1)
    marks[0] = marks[1] = 0
    marks[4::2] = bytes(len(range(4, limit + 1, 2)))
    for number in range(3, math.isqrt(limit) + 1, 2):
        if marks[number]:
            start = number * number
            marks[start :: 2 * number] = bytes(len(range(start, limit + 1, 2 * number)))
    return list(compress(range(limit + 1), marks))


def every_nth(primes: Sequence[int], step: int) -> list[int]:
    """The first item and every ``step``-th item after it."""
    if step <= 0:
        raise ValueError("step must be positive")
    return list(primes[::step])


def main(argv: list[str] | None = None) -> int:
    """Print every hundredth prime up to the limit, one per line."""
    parser = argparse.ArgumentParser(prog="sieve")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    parser.add_argument("--step", type=int, default=DEFAULT_STEP)
    args = parser.parse_args(argv)
    if args.step <= 0:
        parser.error("--step must be positive")
    for prime in every_nth(primes_up_to(args.limit), args.step):
        print(prime)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())