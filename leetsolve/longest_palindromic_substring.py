"""Several ways to find the longest palindromic substring."""


def _require_text(s: str) -> None:
    if not s:
        raise ValueError("s must not be empty")


def longest_palindrome_check_all(s: str) -> str:
    """Try every substring, longest first; the leftmost longest wins."""
    _require_text(s)
    for length in range(len(s), 0, -1):
        for start in range(len(s) - length + 1):
            candidate = s[start : start + length]
            if candidate == candidate[::-1]:
                return candidate
    return ""


def longest_palindrome_dynamic(s: str) -> str:
    """Table of palindromic ranges; the rightmost longest wins."""
    _require_text(s)
    n = len(s)
    is_pal = [[False] * n for _ in range(n)]
    for i in range(n):
        is_pal[i][i] = True
    best = (0, 0)
    for i in range(n - 1):
        if s[i] == s[i + 1]:
            is_pal[i][i + 1] = True
            best = (i, i + 1)
    for diff in range(2, n):
        for i in range(n - diff):
            j = i + diff
            if s[i] == s[j] and is_pal[i + 1][j - 1]:
                is_pal[i][j] = True
                best = (i, j)
    start, end = best
    return s[start : end + 1]


def _expand(s: str, left: int, right: int) -> int:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome_center_expand(s: str) -> str:
    """Grow a palindrome around every centre, odd and even."""
    _require_text(s)
    start = end = 0
    for i in range(len(s)):
        odd = _expand(s, i, i)
        if odd > end - start + 1:
            dist = odd // 2
            start, end = i - dist, i + dist
        even = _expand(s, i, i + 1)
        if even > end - start + 1:
            dist = even // 2 - 1
            start, end = i - dist, i + 1 + dist
    return s[start : end + 1]


def longest_palindrome_manachers(s: str) -> str:
    """Linear-time search on the '#'-interleaved string; '' for ''."""
    padded = "".join(f"#{c}" for c in s) + "#"
    n = len(padded)
    radii = [0] * n
    center = radius = 0
    for i in range(n):
        if i < radius:
            radii[i] = min(radius - i, radii[2 * center - i])
        while (
            i + 1 + radii[i] < n
            and i - 1 - radii[i] >= 0
            and padded[i + 1 + radii[i]] == padded[i - 1 - radii[i]]
        ):
            radii[i] += 1
        if i + radii[i] > radius:
            center, radius = i, i + radii[i]
    longest = max(radii)
    start = (radii.index(longest) - longest) // 2
    return s[start : start + longest]