import pytest

from leetsolve.valid_palindrome import is_palindrome, is_palindrome_str_clone

CASES = [
    ("A man, a plan, a canal: Panama", True),
    ("race a car", False),
    (" ", True),
    ("a.", True),
]


@pytest.mark.parametrize("s, expected", CASES)
def test_is_palindrome(s, expected):
    assert is_palindrome(s) is expected


@pytest.mark.parametrize("s, expected", CASES)
def test_is_palindrome_str_clone(s, expected):
    assert is_palindrome_str_clone(s) is expected


def test_is_palindrome_empty_raises():
    with pytest.raises(ValueError):
        is_palindrome("")