"""Most frequent values in a list."""

from collections import Counter


def top_k_frequent(nums: list[int], k: int) -> list[int]:
    """Return the ``k`` values that occur most often, most frequent first."""
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError(f"k must be between 0 and {len(counts)}, got {k}")
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [value for value, _ in ranked[:k]]