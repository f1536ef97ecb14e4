"""Unique triples of numbers summing to zero."""


def three_sum(nums: list[int]) -> list[list[int]]:
    """Return the distinct zero-sum triples, each in ascending order."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, len(values) - 1
        while j < k:
            total = first + values[j] + values[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                while values[j] == values[j - 1] and j < k:
                    j += 1
    return result