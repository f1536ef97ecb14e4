"""Check whether an integer reads the same backwards."""


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` form a palindrome."""
    if x < 0:
        return False
    if x <= 9:
        return True
    reversed_value = 0
    n = x
    while n:
        n, digit = divmod(n, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == x