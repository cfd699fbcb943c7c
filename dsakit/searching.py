"""Binary-search based lookups over sorted, rotated and unimodal sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def first_occurrence(values: Sequence[int], key: int) -> int:
    """Return the lowest index of ``key`` in sorted ``values``, or -1."""
    index = bisect_left(values, key)
    if index < len(values) and values[index] == key:
        return index
    return -1


def last_occurrence(values: Sequence[int], key: int) -> int:
    """Return the highest index of ``key`` in sorted ``values``, or -1."""
    index = bisect_right(values, key) - 1
    if index >= 0 and values[index] == key:
        return index
    return -1


def peak_index(values: Sequence[int]) -> int:
    """Return the index of a peak: an item not smaller than its neighbours."""
    if not values:
        raise ValueError("cannot find a peak in an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = (start + end) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def pivot_index(values: Sequence[int]) -> int:
    """Return the index where a rotated ascending sequence restarts.

    For a sequence that was never rotated this is the last index.
    """
    if not values:
        raise ValueError("cannot find a pivot in an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = (start + end) // 2
        if values[mid] >= values[0]:
            start = mid + 1
        else:
            end = mid
    return start


def binary_search(values: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``values``, or -1 if absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def hours_needed(piles: Sequence[int], speed: int) -> int:
    """Return the hours needed to finish every pile eating ``speed`` per hour."""
    if speed <= 0:
        raise ValueError("speed must be positive")
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Return the smallest speed that finishes all ``piles`` within ``hours``."""
    if not piles:
        raise ValueError("piles must not be empty")
    if hours < len(piles):
        raise ValueError("not enough hours to visit every pile")
    low, high = 1, max(piles)
    while low < high:
        mid = (low + high) // 2
        if hours_needed(piles, mid) <= hours:
            high = mid
        else:
            low = mid + 1
    return low


def can_split(nums: Sequence[int], k: int, limit: int) -> bool:
    """Return True if ``nums`` splits into at most ``k`` runs each summing to at most ``limit``."""
    count = 1
    running = 0
    for value in nums:
        if value > limit:
            return False
        if running + value <= limit:
            running += value
        else:
            count += 1
            running = value
            if count > k:
                return False
    return True


def split_array_min_largest(nums: Sequence[int], k: int) -> int:
    """Return the smallest possible largest run sum when splitting ``nums`` into ``k`` runs."""
    if k < 1:
        raise ValueError("k must be at least 1")
    start = max(nums, default=0)
    end = sum(nums)
    answer = 0
    while start <= end:
        mid = (start + end) // 2
        if can_split(nums, k, mid):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer