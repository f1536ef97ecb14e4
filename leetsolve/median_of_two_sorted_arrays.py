"""Median of the union of two sorted lists."""

import math


def _require_values(nums1: list[int], nums2: list[int]) -> None:
    if not nums1 and not nums2:
        raise ValueError("at least one list must be non-empty")


def find_median_sorted_arrays(nums1: list[int], nums2: list[int]) -> float:
    """Merge both lists and take the middle of the result."""
    _require_values(nums1, nums2)
    merged = sorted(nums1 + nums2)
    mid = len(merged) // 2
    if len(merged) % 2 == 0:
        return (merged[mid - 1] + merged[mid]) / 2
    return float(merged[mid])


def _kth(a: list[int], b: list[int], k: int) -> float:
    a_lo, a_hi = 0, len(a) - 1
    b_lo, b_hi = 0, len(b) - 1
    while True:
        if a_lo > a_hi:
            return float(b[k - a_lo])
        if b_lo > b_hi:
            return float(a[k - b_lo])
        a_index = (a_lo + a_hi) // 2
        b_index = (b_lo + b_hi) // 2
        a_value, b_value = a[a_index], b[b_index]
        if a_index + b_index < k:
            if a_value > b_value:
                b_lo = b_index + 1
            else:
                a_lo = a_index + 1
        elif a_value > b_value:
            a_hi = a_index - 1
        else:
            b_hi = b_index - 1


def find_median_sorted_arrays_binary_search(nums1: list[int], nums2: list[int]) -> float:
    """Locate the middle element(s) by a k-th smallest search."""
    _require_values(nums1, nums2)
    n = len(nums1) + len(nums2)
    if n % 2:
        return _kth(nums1, nums2, n // 2)
    return (_kth(nums1, nums2, n // 2 - 1) + _kth(nums1, nums2, n // 2)) / 2


def find_median_sorted_arrays_better_binary_search(
    nums1: list[int], nums2: list[int]
) -> float:
    """Binary search for a partition of the shorter list."""
    _require_values(nums1, nums2)
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    m, n = len(nums1), len(nums2)
    left, right = 0, m
    while left <= right:
        partition_a = (left + right) // 2
        partition_b = (m + n + 1) // 2 - partition_a
        a_left = nums1[partition_a - 1] if partition_a > 0 else -math.inf
        a_right = nums1[partition_a] if partition_a < m else math.inf
        b_left = nums2[partition_b - 1] if partition_b > 0 else -math.inf
        b_right = nums2[partition_b] if partition_b < n else math.inf
        if a_left <= b_right and b_left <= a_right:
            if (m + n) % 2 == 0:
                return (max(a_left, b_left) + min(a_right, b_right)) / 2
            return float(max(a_left, b_left))
        if a_left > b_left:
            right = partition_a - 1
        elif b_left > a_left:
            left = partition_a + 1
    return 0.0