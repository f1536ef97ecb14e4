"""Products of all elements except the one at each position."""

import math
from itertools import accumulate
from operator import mul


def product_except_self(nums: list[int]) -> list[int]:
    """Prefix and suffix products combined in a single result list."""
    result = []
    prefix = 1
    for value in nums:
        result.append(prefix)
        prefix *= value
    postfix = 1
    for position in range(len(nums) - 1, -1, -1):
        result[position] *= postfix
        postfix *= nums[position]
    return result


def product_except_self_on(nums: list[int]) -> list[int]:
    """Build separate left and right product tables, then combine them.

    The outermost positions take their value from one table only; a
    single-element input yields ``[0]``.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    left = [0, *accumulate(nums[:-1], mul)]
    right = [*reversed(list(accumulate(reversed(nums[1:]), mul))), 0]
    if len(nums) == 1:
        return [right[0]]
    middle = [a * b for a, b in zip(left[1:-1], right[1:-1])]
    return [right[0], *middle, left[-1]]


def product_except_self_on2(nums: list[int]) -> list[int]:
    """Multiply the other elements for every position; no others gives 0."""

    def others_product(position: int) -> int:
        others = nums[:position] + nums[position + 1 :]
        return math.prod(others) if others else 0

    return [others_product(position) for position in range(len(nums))]