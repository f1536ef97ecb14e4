"""Indices of two numbers adding up to a target."""


def two_sum_brute_force(nums: list[int], target: int) -> list[int]:
    """Try every pair; return ``[0, 0]`` when none matches."""
    for i, a in enumerate(nums):
        for j, b in enumerate(nums[i + 1 :], start=i + 1):
            if a + b == target:
                return [i, j]
    return [0, 0]


def two_sum_two_pass_hashmap(nums: list[int], target: int) -> list[int]:
    """Index all values first, then look up complements; ``[]`` if none."""
    positions = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        other = positions.get(target - value)
        if other is not None and other != index:
            return [index, other]
    return []


def two_sum(nums: list[int], target: int) -> list[int]:
    """Single pass, looking up each complement among earlier values."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []