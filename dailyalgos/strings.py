"""String algorithms: anagrams, prefixes, palindromes and bracket matching."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cmp_to_key

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def is_anagram_sorted(first: str, second: str) -> bool:
    """True when the two strings hold the same characters, compared by sorting."""
    return len(first) == len(second) and sorted(first) == sorted(second)


def is_anagram(first: str, second: str) -> bool:
    """True when the two strings hold the same characters, compared by counting."""
    return Counter(first) == Counter(second)


def first_non_repeating(text: str) -> str | None:
    """The first character that occurs exactly once, or None if every one repeats."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def longest_common_prefix(words: Sequence[str]) -> str | None:
    """Longest prefix shared by all the words, or None when they share none."""
    if not words:
        return None
    ordered = sorted(words)
    first, last = ordered[0], ordered[-1]
    length = 0
    for left, right in zip(first, last):
        if left != right:
            break
        length += 1
    return first[:length] or None


def longest_palindrome(text: str) -> str:
    """The first longest palindromic substring; empty for empty text."""
    if not text:
        return ""
    size = len(text)
    start, best = 0, 1
    for centre, char in enumerate(text):
        low, high = centre - 1, centre + 1
        while high < size and text[high] == char:
            high += 1
        while low >= 0 and text[low] == char:
            low -= 1
        while low >= 0 and high < size and text[low] == text[high]:
            low -= 1
            high += 1
        length = high - low - 1
        if length > best:
            start, best = low + 1, length
    return text[start:start + best]


def _concatenation_order(left: str, right: str) -> int:
    if left + right > right + left:
        return -1
    if left + right < right + left:
        return 1
    return 0


def largest_number(numbers: Iterable[str | int]) -> str:
    """The largest number formed by concatenating all the given numbers."""
    parts = sorted((str(number) for number in numbers), key=cmp_to_key(_concatenation_order))
    if not parts:
        raise ValueError("largest_number() needs at least one number")
    if parts[0] == "0":
        return "0"
    return "".join(parts)


def is_valid_brackets(text: str) -> bool:
    """True when (), [] and {} are properly nested and nothing else appears."""
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _CLOSERS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def is_balanced_count(text: str) -> bool:
    """Balance check by counting; every character other than '(' closes one."""
    depth = 0
    for char in text:
        depth += 1 if char == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def is_balanced_stack(text: str) -> bool:
    """Balance check with a stack; every character other than '(' closes one."""
    stack: list[str] = []
    for char in text:
        if char == "(":
            stack.append(char)
        elif stack:
            stack.pop()
        else:
            return False
    return not stack


def has_equal_parens(text: str) -> bool:
    """True when '(' makes up exactly half of the characters, ignoring order."""
    opening = text.count("(")
    return opening == len(text) - opening