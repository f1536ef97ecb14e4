import pytest

from leetsolve.product_of_array_except_self import (
    product_except_self,
    product_except_self_on,
    product_except_self_on2,
)

CASES = [
    ([1, 2, 3, 4], [24, 12, 8, 6]),
    ([-1, 1, 0, -3, 3], [0, 0, 9, 0, 0]),
]


@pytest.mark.parametrize("nums, expected", CASES)
def test_product_except_self_on2(nums, expected):
    assert product_except_self_on2(nums) == expected


@pytest.mark.parametrize("nums, expected", CASES)
def test_product_except_self(nums, expected):
    assert product_except_self(nums) == expected


@pytest.mark.parametrize("nums, expected", CASES)
def test_product_except_self_on(nums, expected):
    assert product_except_self_on(nums) == expected


def test_on_single_element_is_zero():
    assert product_except_self_on([5]) == [0]
    assert product_except_self_on2([5]) == [0]


def test_on_empty_raises():
    with pytest.raises(ValueError):
        product_except_self_on([])