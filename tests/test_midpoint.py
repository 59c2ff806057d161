import pytest

from order_keys.errors import OrderViolation, TrailingZero
from order_keys.midpoint import midpoint


@pytest.mark.parametrize(
    "low,high,expected",
    [
        ("", None, "V"),
        ("V", None, "l"),
        ("", "V", "G"),
        ("1", "3", "2"),
        ("1", "2", "1V"),
        ("1", "23", "2"),
        ("", "01", "00V"),
        ("z", None, "zV"),
        ("abc", "abd", "abcV"),
    ],
)
def test_midpoint(low, high, expected):
    result = midpoint(low, high)
    assert result == expected
    assert low < result
    if high is not None:
        assert result < high


@pytest.mark.parametrize("low,high", [("V", "V"), ("W", "V"), ("V1", "V")])
def test_midpoint_order_violation(low, high):
    with pytest.raises(OrderViolation):
        midpoint(low, high)


@pytest.mark.parametrize("low,high", [("10", None), ("", "10"), ("0", "1")])
def test_midpoint_trailing_zero(low, high):
    with pytest.raises(TrailingZero):
        midpoint(low, high)


def test_midpoint_custom_digits():
    assert midpoint("", None, "0123456789") == "5"
    assert midpoint("1", "2", "0123456789") == "15"
