import pytest

from leetsolve.zigzag_conversion import convert, convert_pretty_but_inefficient

CASES = [
    ("PAYPALISHIRING", 3, "PAHNAPLSIIGYIR"),
    ("PAYPALISHIRING", 4, "PINALSIGYAHRPI"),
    ("A", 1, "A"),
    ("ABAB", 2, "AABB"),
]


@pytest.mark.parametrize("s, num_rows, expected", CASES)
def test_convert(s, num_rows, expected):
    assert convert(s, num_rows) == expected


@pytest.mark.parametrize("s, num_rows, expected", CASES)
def test_convert_pretty_but_inefficient(s, num_rows, expected):
    assert convert_pretty_but_inefficient(s, num_rows) == expected


@pytest.mark.parametrize("num_rows", [2, 3, 5, 7])
def test_output_is_permutation(num_rows):
    s = "PAYPALISHIRING"
    assert sorted(convert(s, num_rows)) == sorted(s)


def test_zero_rows_raises():
    with pytest.raises(ValueError):
        convert("ABC", 0)