"""String exercises: reversal, character counts, palindromes and prefix-function tricks."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

_VOWELS = frozenset("aeiouAEIOU")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class CharacterCounts:
    """How many vowels, other characters, digits and spaces a text holds."""

    vowels: int = 0
    consonants: int = 0
    digits: int = 0
    spaces: int = 0

    @property
    def total(self) -> int:
        return self.vowels + self.consonants + self.digits + self.spaces


def reverse_with_stack(text: str) -> str:
    """Return ``text`` reversed by pushing every character and popping them back."""
    stack = list(text)
    reversed_chars = []
    while stack:
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)


def reverse_vowels(text: str) -> str:
    """Return ``text`` with its vowels in reverse order and everything else in place."""
    vowels = [ch for ch in text if ch in _VOWELS]
    return "".join(vowels.pop() if ch in _VOWELS else ch for ch in text)


def digit_sum_after_transforms(text: str, k: int) -> int:
    """Replace each letter by its alphabet position, then sum the digits ``k`` times.

    ``text`` must hold lower-case ASCII letters only.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if any(not "a" <= ch <= "z" for ch in text):
        raise ValueError("text must hold lower-case letters a-z only")
    digits = "".join(str(ord(ch) - ord("a") + 1) for ch in text)
    total = 0
    for _ in range(k):
        total = sum(int(d) for d in digits)
        digits = str(total)
    return total


def count_characters(text: str) -> CharacterCounts:
    """Count vowels, digits and spaces; every other character counts as a consonant."""
    vowels = consonants = digits = spaces = 0
    for ch in text:
        if ch == " ":
            spaces += 1
        elif ch in _VOWELS:
            vowels += 1
        elif ch in _DIGITS:
            digits += 1
        else:
            consonants += 1
    return CharacterCounts(vowels=vowels, consonants=consonants, digits=digits, spaces=spaces)


def count_substrings_with_abc(text: str) -> int:
    """Return how many substrings hold at least one each of 'a', 'b' and 'c'."""
    window: Counter[str] = Counter()
    n = len(text)
    left = 0
    count = 0
    for right, ch in enumerate(text):
        window[ch] += 1
        while window["a"] and window["b"] and window["c"]:
            count += n - right
            window[text[left]] -= 1
            left += 1
    return count


def longest_palindrome(text: str) -> str:
    """Return the longest palindromic substring, the leftmost one on a tie."""
    best_start, best_len = 0, 0
    n = len(text)
    for center in range(2 * n - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < n and text[lo] == text[hi]:
            lo -= 1
            hi += 1
        start, size = lo + 1, hi - lo - 1
        if size > best_len or (size == best_len and start < best_start):
            best_start, best_len = start, size
    return text[best_start : best_start + best_len]


def check_inclusion(pattern: str, text: str) -> bool:
    """Return True if some permutation of ``pattern`` is a substring of ``text``."""
    k = len(pattern)
    if k == 0:
        return True
    if k > len(text):
        return False
    need = Counter(pattern)
    window = Counter(text[:k])
    if window == need:
        return True
    for i in range(k, len(text)):
        window[text[i]] += 1
        gone = text[i - k]
        window[gone] -= 1
        if not window[gone]:
            del window[gone]
        if window == need:
            return True
    return False


def prefix_function(text: str) -> list[int]:
    """Return, for each prefix, the length of its longest proper border."""
    lps = [0] * len(text)
    length = 0
    for i in range(1, len(text)):
        while length and text[i] != text[length]:
            length = lps[length - 1]
        if text[i] == text[length]:
            length += 1
        lps[i] = length
    return lps


def repeated_substring_pattern(text: str) -> bool:
    """Return True if ``text`` is a shorter string repeated two or more times."""
    n = len(text)
    if n == 0:
        return False
    border = prefix_function(text)[-1]
    return border > 0 and n % (n - border) == 0


def shortest_palindrome(text: str) -> str:
    """Return the shortest palindrome made by adding characters in front of ``text``."""
    combined = text + "#" + text[::-1]
    border = prefix_function(combined)[-1]
    return text[border:][::-1] + text