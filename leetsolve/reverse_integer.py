"""Reverse the digits of a 32-bit signed integer."""

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def reverse(x: int) -> int:
    """Return ``x`` with its digits reversed, or 0 if that overflows 32 bits."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT_MIN <= result <= _INT_MAX:
        return 0
    return result