"""Length of the longest run of consecutive integers."""

from collections.abc import Iterable


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest consecutive sequence in ``nums``."""
    values = set(nums)
    longest = 0
    for n in values:
        if n - 1 in values:
            continue
        length = 1
        while n + length in values:
            length += 1
        longest = max(longest, length)
    return longest