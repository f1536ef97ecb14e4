"""Conversion of Roman numerals to integers."""

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_to_int(s: str) -> int:
    """Return the value of Roman numeral ``s``; unknown letters count as -1."""
    values = iter([_VALUES.get(c, -1) for c in s])
    total = 0
    current = next(values, None)
    while current is not None:
        following = next(values, None)
        if following is None:
            total += current
            break
        if current >= following:
            total += current
            current = following
        else:
            total += following - current
            current = next(values, None)
    return total