"""Small recursive exercises: sorting, searching, arithmetic and string checks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Sequence[T]) -> list[T]:
    """Return a new list with the items sorted ascending by bubble sort.

    Each pass bubbles the largest remaining item to the end, then the
    unsorted prefix shrinks by one.
    """
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def ends_match(text: str) -> bool:
    """Return True when the first and last characters of ``text`` are equal.

    An empty string has no ends and gives False.
    """
    if not text:
        return False
    return text[0] == text[-1]


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 up to ``n`` in ascending order."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(1, n + 1))


def contains(values: Sequence[T], key: T) -> bool:
    """Return True if ``key`` appears anywhere in ``values``."""
    return any(item == key for item in values)


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    if exponent % 2 == 0:
        return half * half
    return base * half * half


def recursive_sum(values: Sequence[int]) -> int:
    """Return the sum of ``values``; an empty sequence sums to 0."""
    total = 0
    for item in values:
        total += item
    return total


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    chars = list(text)
    i, j = 0, len(chars) - 1
    while i < j:
        chars[i], chars[j] = chars[j], chars[i]
        i += 1
        j -= 1
    return "".join(chars)


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same forwards and backwards."""
    return text == reverse_string(text)