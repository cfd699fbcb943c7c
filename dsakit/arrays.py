"""Array puzzles: sliding windows, two pointers, prefix maps and simple greedy passes."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterator, Sequence

INT_MAX = 2**31 - 1


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Return the index of the student who runs out of chalk first.

    Students take ``chalk[i]`` pieces in turn, round after round, from a
    supply of ``k`` pieces.
    """
    total = sum(chalk)
    if total <= 0:
        raise ValueError("chalk must hold a positive total")
    remaining = k % total
    for index, need in enumerate(chalk):
        if need > remaining:
            return index
        remaining -= need
    return 0


def longest_balanced_subarray(values: Sequence[int]) -> int:
    """Return the length of the longest run with as many 1s as other values."""
    first_seen = {0: -1}
    balance = 0
    best = 0
    for index, value in enumerate(values):
        balance += 1 if value == 1 else -1
        if balance in first_seen:
            best = max(best, index - first_seen[balance])
        else:
            first_seen[balance] = index
    return best


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the ascending merge of two ascending sequences."""
    return list(heapq.merge(first, second))


def check_possibility(nums: Sequence[int]) -> bool:
    """Return True if changing at most one item makes ``nums`` non-decreasing."""
    items = list(nums)
    changes = 0
    for i in range(len(items) - 1):
        if items[i] <= items[i + 1]:
            continue
        changes += 1
        if changes > 1:
            return False
        if i == 0 or items[i - 1] <= items[i + 1]:
            items[i] = items[i + 1]
        else:
            items[i + 1] = items[i]
    return True


def swap_pairs(values: Sequence[int]) -> list[int]:
    """Return a copy with each adjacent pair swapped; an odd last item stays."""
    items = list(values)
    evens = items[0::2]
    odds = items[1::2]
    items[1::2] = evens[: len(odds)]
    items[0 : 2 * len(odds) : 2] = odds
    return items


def _prefixes(value: int) -> Iterator[str]:
    digits = str(value)
    for end in range(1, len(digits) + 1):
        yield digits[:end]


def longest_common_prefix(first: Sequence[int], second: Sequence[int]) -> int:
    """Return the longest decimal prefix shared by a number of each sequence."""
    known = {prefix for value in first for prefix in _prefixes(value)}
    return max(
        (len(prefix) for value in second for prefix in _prefixes(value) if prefix in known),
        default=0,
    )


def max_k_sum_pairs(values: Sequence[int], k: int) -> int:
    """Return how many disjoint pairs summing to ``k`` can be removed."""
    waiting: Counter[int] = Counter()
    pairs = 0
    for value in values:
        complement = k - value
        if waiting[complement] > 0:
            pairs += 1
            waiting[complement] -= 1
        else:
            waiting[value] += 1
    return pairs


def content_children(cookies: Sequence[int], greed: Sequence[int]) -> int:
    """Return how many children get a cookie at least as large as their greed."""
    wanting = sorted(greed)
    fed = 0
    for size in sorted(cookies):
        if fed < len(wanting) and size >= wanting[fed]:
            fed += 1
    return fed


def max_area(heights: Sequence[int]) -> int:
    """Return the most water held between two of the vertical lines."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def total_fruit(fruits: Sequence[int]) -> int:
    """Return the longest run holding at most two kinds of fruit."""
    window: Counter[int] = Counter()
    left = 0
    best = 0
    for right, fruit in enumerate(fruits):
        window[fruit] += 1
        while len(window) > 2:
            gone = fruits[left]
            window[gone] -= 1
            if not window[gone]:
                del window[gone]
            left += 1
        best = max(best, right - left + 1)
    return best


def count_at_most_k_distinct(values: Sequence[int], k: int) -> int:
    """Return the number of subarrays holding at most ``k`` distinct values."""
    if k <= 0:
        return 0
    window: Counter[int] = Counter()
    left = 0
    count = 0
    for right, value in enumerate(values):
        window[value] += 1
        while len(window) > k:
            gone = values[left]
            window[gone] -= 1
            if not window[gone]:
                del window[gone]
            left += 1
        count += right - left + 1
    return count


def count_exactly_k_distinct(values: Sequence[int], k: int) -> int:
    """Return the number of subarrays holding exactly ``k`` distinct values."""
    return count_at_most_k_distinct(values, k) - count_at_most_k_distinct(values, k - 1)


def divide_players(skills: Sequence[int]) -> int:
    """Pair weakest with strongest; return the sum of pair products, or -1 if totals differ."""
    if not skills:
        raise ValueError("skills must not be empty")
    ordered = sorted(skills)
    target = ordered[0] + ordered[-1]
    chemistry = 0
    i, j = 0, len(ordered) - 1
    while i < j:
        if ordered[i] + ordered[j] != target:
            return -1
        chemistry += ordered[i] * ordered[j]
        i += 1
        j -= 1
    return chemistry


def product_except_self(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other item."""
    result = [1] * len(values)
    running = 1
    for index, value in enumerate(values):
        result[index] = running
        running *= value
    running = 1
    for index in reversed(range(len(values))):
        result[index] *= running
        running *= values[index]
    return result


def reverse_integer(n: int) -> int:
    """Return ``n`` with its digits reversed, or 0 if that leaves the 32-bit range."""
    magnitude = int(str(abs(n))[::-1])
    if magnitude > INT_MAX:
        return 0
    return -magnitude if n < 0 else magnitude


def three_sum(values: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of items summing to zero."""
    ordered = sorted(values)
    n = len(ordered)
    found: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                found.append([first, ordered[j], ordered[k]])
                j += 1
                k -= 1
                while j < k and ordered[j] == ordered[j - 1]:
                    j += 1
                while j < k and ordered[k] == ordered[k + 1]:
                    k -= 1
    return found


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, of two items summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(values):
        wanted = target - value
        if wanted in seen:
            return seen[wanted], index
        seen[value] = index
    return None