"""Largest water area between two vertical lines."""


def max_area(height: list[int]) -> int:
    """Two-pointer search for the largest container area."""
    if not height:
        raise ValueError("height must not be empty")
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        lowest = min(height[left], height[right])
        best = max(best, lowest * (right - left))
        if lowest == height[left]:
            left += 1
        else:
            right -= 1
    return best


def max_area_brute_force(height: list[int]) -> int:
    """Check every pair of lines for the largest container area."""
    return max(
        (
            min(a, b) * (j - i)
            for i, a in enumerate(height)
            for j, b in enumerate(height[i + 1 :], start=i + 1)
        ),
        default=0,
    )