"""Priority-queue exercises: ticket sales, merges, orderings and a deque."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable
from itertools import accumulate


def max_ticket_revenue(seats: Iterable[int], tickets: int) -> int:
    """Revenue from selling tickets one by one, each from the fullest row.

    A ticket costs as many units as the row has empty seats at the moment
    it is sold; selling it leaves that row with one seat fewer.
    """
    if tickets < 0:
        raise ValueError("tickets must not be negative")
    heap = [-count for count in seats]
    heapq.heapify(heap)
    if tickets and not heap:
        raise ValueError("no rows to sell tickets from")
    total = 0
    for _ in range(tickets):
        top = -heap[0]
        total += top
        heapq.heapreplace(heap, -(top - 1))
    return total


def sorted_prefix_sums(values: Iterable[int]) -> list[int]:
    """The running sums of the values, smallest first."""
    return sorted(accumulate(values))


def minimum_merge_cost(values: Iterable[int]) -> int:
    """Least total cost of merging all values into one, two at a time.

    Merging two values costs their sum, and the sum takes their place.
    """
    heap = list(values)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


def order_by_first_desc_second_asc(
    pairs: Iterable[tuple[int, int]],
) -> list[tuple[int, int]]:
    """Pairs by first item, largest first; ties by second item, smallest first."""
    return sorted(pairs, key=lambda pair: (-pair[0], pair[1]))


def order_by_first_asc_second_desc(
    pairs: Iterable[tuple[int, int]],
) -> list[tuple[int, int]]:
    """Pairs by first item, smallest first; ties by second item, largest first."""
    heap = [(first, -second) for first, second in pairs]
    heapq.heapify(heap)
    ordered = []
    while heap:
        first, negated = heapq.heappop(heap)
        ordered.append((first, -negated))
    return ordered


def deque_demo() -> tuple[list[int], list[int]]:
    """Fill a deque from both ends, then drop one item from each end.

    Returns the contents before and after the two removals.
    """
    items: deque[int] = deque()
    items.appendleft(1)
    items.append(3)
    items.appendleft(2)
    items.appendleft(4)
    before = list(items)
    items.popleft()
    items.pop()
    return before, list(items)