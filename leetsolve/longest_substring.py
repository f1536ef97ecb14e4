"""Length of the longest substring without repeated characters."""


def length_of_longest_substring(s: str) -> int:
    """Grow a window of distinct characters, restarting after each repeat."""
    longest = 0
    window: set[str] = set()
    i = 0
    while i < len(s):
        c = s[i]
        if c in window:
            i = s.rindex(c, 0, i) + 1
            longest = max(longest, len(window))
            window = {s[i]}
        else:
            window.add(c)
        i += 1
    return max(longest, len(window))