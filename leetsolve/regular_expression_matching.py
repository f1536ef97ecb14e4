"""Matching of patterns made of literals, '.' and '*'."""

from functools import cache


def is_match(text: str, pattern: str) -> bool:
    """Whole-text match with memoised recursion over positions."""
    if not pattern:
        return not text

    @cache
    def dfs(i: int, j: int) -> bool:
        if i >= len(text) and j >= len(pattern):
            return True
        if j >= len(pattern):
            return False
        first_match = i < len(text) and pattern[j] in (".", text[i])
        if j + 1 < len(pattern) and pattern[j + 1] == "*":
            return dfs(i, j + 2) or (first_match and dfs(i + 1, j))
        return first_match and dfs(i + 1, j + 1)

    return dfs(0, 0)


def is_match_brute(text: str, pattern: str) -> bool:
    """Consume the first pattern token and match the rest with is_match."""
    if not pattern:
        return not text
    first_match = bool(text) and pattern[0] in (".", text[0])
    if len(pattern) >= 2 and pattern[1] == "*":
        return is_match(text, pattern[2:]) or (
            first_match and is_match(text[1:], pattern)
        )
    return first_match and is_match(text[1:], pattern[1:])