"""Constant-time range sums over a fixed list of numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from itertools import accumulate


class PrefixSums:
    """Running totals of a list, answering inclusive 1-based range sums."""

    def __init__(self, values: Iterable[int]) -> None:
        self._totals = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._totals) - 1

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the items from position ``left`` to ``right``, counting from 1."""
        if not 1 <= left <= right <= len(self):
            raise IndexError(f"range {left}..{right} is outside 1..{len(self)}")
        return self._totals[right] - self._totals[left - 1]


def main(argv: list[str] | None = None) -> int:
    """Read n, q, n numbers and q ranges from stdin; print each range's sum."""
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        print("expected whole numbers only", file=sys.stderr)
        return 1
    if len(numbers) < 2:
        return 0
    count, queries = numbers[0], numbers[1]
    values = numbers[2 : 2 + count]
    sums = PrefixSums(values)
    bounds = numbers[2 + count :]
    for left, right in list(zip(bounds[::2], bounds[1::2]))[: max(queries, 0)]:
        try:
            print(sums.range_sum(left, right))
        except IndexError as error:
            print(error, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())