"""Parse a leading integer out of a string, clamped to 32 bits."""

from itertools import takewhile

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_i32(text: str) -> int:
    negative = text.startswith("-")
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits:
        return 0
    value = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            return 0
        value = value * 10 + int(ch)
        if negative and -value < _INT_MIN:
            return _INT_MIN
        if not negative and value > _INT_MAX:
            return _INT_MAX
    return -value if negative else value


def my_atoi(s: str) -> int:
    """Read an optional sign and digits after leading whitespace.

    Anything that does not form a number yields 0; out-of-range values
    are clamped to the 32-bit signed range.
    """
    trimmed = s.strip()
    first = trimmed[:1] or "0"
    rest = "".join(takewhile(str.isnumeric, trimmed[1:]))
    return _parse_i32(first + rest)