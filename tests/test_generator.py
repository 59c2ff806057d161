import random

import pytest

from order_keys.errors import (
    InvalidHead,
    KeyspaceExhausted,
    OrderViolation,
    TrailingZero,
)
from order_keys.generator import key_between, keys_between
from order_keys.integer import validate_order_key


@pytest.mark.parametrize(
    "low,high,expected",
    [
        (None, None, "a0"),
        ("a0", None, "a1"),
        (None, "a0", "Zz"),
        ("a0", "a1", "a0V"),
        (None, "a0V", "a0"),
        ("a1", "a2", "a1V"),
        ("az", None, "b00"),
        ("Zz", None, "a0"),
        ("a0", "a0V", "a0G"),
        ("a0V", "a1", "a0l"),
        ("a0", "a1V", "a1"),
        ("a0", "b00", "a1"),
    ],
)
def test_key_between(low, high, expected):
    assert key_between(low, high) == expected


def test_increment_equal_to_high_falls_back_to_fraction():
    # incremented integer part "a1" equals high, so it cannot be used
    assert key_between("a0V", "a1") == "a0l"
    assert key_between("a0zz", "a1") == "a0zzV"


@pytest.mark.parametrize("low,high", [("a1", "a0"), ("a0", "a0")])
def test_key_between_order_violation(low, high):
    with pytest.raises(OrderViolation):
        key_between(low, high)


def test_key_between_rejects_malformed_bounds():
    with pytest.raises(TrailingZero):
        key_between("a0V0", None)
    with pytest.raises(TrailingZero):
        key_between(None, "a1V0")
    with pytest.raises(InvalidHead):
        key_between("!", None)


def test_keyspace_exhausted_below_smallest_key():
    with pytest.raises(KeyspaceExhausted):
        key_between(None, "A" + "0" * 26)


def test_largest_integer_grows_fraction():
    largest = "z" * 27
    assert key_between(largest, None) == largest + "V"


def test_keys_between_open_both_sides():
    assert keys_between(None, None, 3) == ["a0", "a1", "a2"]


def test_keys_between_open_below():
    assert keys_between(None, "a0", 2) == ["Zy", "Zz"]


def test_keys_between_bounded():
    assert keys_between("a0", "a1", 3) == ["a0G", "a0V", "a0l"]


def test_keys_between_small_counts():
    assert keys_between("a0", "a1", 0) == []
    assert keys_between("a0", "a1", 1) == ["a0V"]
    with pytest.raises(ValueError):
        keys_between(None, None, -1)


@pytest.mark.parametrize(
    "low,high",
    [(None, None), ("a0", None), (None, "a0"), ("a0", "a1"), ("Zz", "a0V")],
)
def test_keys_between_monotone(low, high):
    keys = keys_between(low, high, 50)
    assert len(keys) == 50
    assert keys == sorted(keys)
    assert len(set(keys)) == 50
    for key in keys:
        validate_order_key(key)
        assert low is None or low < key
        assert high is None or key < high


def test_repeated_insertion_never_runs_out():
    rng = random.Random(42)
    keys: list[str] = []
    for _ in range(500):
        i = rng.randint(0, len(keys))
        low = keys[i - 1] if i > 0 else None
        high = keys[i] if i < len(keys) else None
        key = key_between(low, high)
        validate_order_key(key)
        keys.insert(i, key)
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)


def test_custom_digits():
    assert key_between(None, None, "0123456789") == "a0"
    assert key_between("a0", "a1", "0123456789") == "a05"
