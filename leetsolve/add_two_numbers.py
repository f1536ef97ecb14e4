"""Add two numbers stored as reversed digit lists."""

from itertools import zip_longest

from leetsolve.listnode import ListNode, to_list, to_vector


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Return the digit-wise sum of two little-endian digit lists."""
    digits = []
    carry = 0
    for a, b in zip_longest(to_vector(l1), to_vector(l2), fillvalue=0):
        carry += a + b
        digits.append(carry % 10)
        carry //= 10
    while carry:
        digits.append(carry % 10)
        carry //= 10
    return to_list(digits)