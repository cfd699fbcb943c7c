"""Dynamic-programming and greedy-heap exercises."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence
from math import isqrt


def rob(values: Sequence[int]) -> int:
    """Return the largest total from items with no two adjacent ones taken."""
    if not values:
        return 0
    before_previous, previous = 0, values[0]
    for value in values[1:]:
        before_previous, previous = previous, max(before_previous + value, previous)
    return previous


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Return the cheapest cover of ascending travel ``days`` by 1-, 7- and 30-day passes."""
    if len(costs) != 3:
        raise ValueError("costs must hold the prices of the 1, 7 and 30 day passes")
    day_pass, week_pass, month_pass = costs
    best = [0] * (len(days) + 1)
    for i in reversed(range(len(days))):
        after_week = bisect_left(days, days[i] + 7, lo=i)
        after_month = bisect_left(days, days[i] + 30, lo=i)
        best[i] = min(
            day_pass + best[i + 1],
            week_pass + best[after_week],
            month_pass + best[after_month],
        )
    return best[0]


def num_squares(n: int) -> int:
    """Return the fewest perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    best = [0] * (n + 1)
    for m in range(1, n + 1):
        best[m] = 1 + min(best[m - r * r] for r in range(1, isqrt(m) + 1))
    return best[n]


def min_sum_of_squares(text: str, k: int) -> int:
    """Return the least sum of squared character counts after ``k`` deletions."""
    heap = [-count for count in Counter(text).values()]
    heapq.heapify(heap)
    for _ in range(max(k, 0)):
        if not heap:
            break
        left = -heapq.heappop(heap) - 1
        if left:
            heapq.heappush(heap, -left)
    return sum(count * count for count in heap)