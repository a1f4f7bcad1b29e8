"""String problems: Roman numerals, prefixes, searching and comparisons."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import zip_longest

ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters count as 0."""
    total = 0
    for current, following in zip_longest(s, s[1:]):
        value = ROMAN_VALUES.get(current, 0)
        if following is not None and value < ROMAN_VALUES.get(following, 0):
            total -= value
        else:
            total += value
    return total


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all strings ("" for no strings)."""
    if not strs:
        return ""
    length = 0
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        length += 1
    return strs[0][:length]


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of needle, or -1."""
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t is a rearrangement of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)