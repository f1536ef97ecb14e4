"""Detect repeated values."""

from collections.abc import Iterable


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True as soon as any value appears twice."""
    seen = set()
    for item in nums:
        if item in seen:
            return True
        seen.add(item)
    return False