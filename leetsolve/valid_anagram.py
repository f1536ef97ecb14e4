"""Check whether two strings are anagrams."""

from collections import Counter


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)