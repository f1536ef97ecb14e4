"""Palindrome checks that ignore case and non-alphanumeric characters."""

from leetsolve.string_utils import remove_non_alphanumeric


def _ascii_lower(c: str) -> str:
    return c.lower() if c.isascii() else c


def is_palindrome_str_clone(s: str) -> bool:
    """Compare the cleaned, lower-cased string with its reverse."""
    cleaned = remove_non_alphanumeric(s.lower())
    return cleaned == cleaned[::-1]


def is_palindrome(s: str) -> bool:
    """Two-pointer check skipping non-alphanumeric characters."""
    if not s:
        raise ValueError("s must not be empty")
    left, right = 0, len(s) - 1
    while left < right:
        while left < right and not s[left].isalnum():
            left += 1
        while left < right and not s[right].isalnum():
            right = max(right - 1, 0)
        if _ascii_lower(s[left]) != _ascii_lower(s[right]):
            return False
        left += 1
        right = max(right - 1, 0)
    return True