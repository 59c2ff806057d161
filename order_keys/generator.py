from __future__ import annotations

from typing import List, Optional, Union

from .digits import BASE_62_DIGITS, Digits, get_digits
from .errors import KeyspaceExhausted, OrderViolation
from .integer import (
    SMALLEST_POSITIVE_HEAD,
    decrement_integer,
    increment_integer,
    validate_order_key,
)
from .midpoint import midpoint


def key_between(
    low: Optional[str],
    high: Optional[str],
    digits: Union[str, Digits] = BASE_62_DIGITS,
) -> str:
    """Return the deterministic order key strictly between ``low`` and ``high``.

    ``None`` on either side means unbounded. Adjusting the integer part is
    tried before growing the fractional part, which keeps keys short when
    items keep getting appended or prepended.
    """
    d = get_digits(digits)
    if low is not None and high is not None and low >= high:
        raise OrderViolation(low, high)

    if low is None:
        if high is None:
            return SMALLEST_POSITIVE_HEAD + d.zero
        int_high, frac_high = validate_order_key(high, d)
        if frac_high:
            return int_high
        res = decrement_integer(int_high, d)
        if res is None:
            raise KeyspaceExhausted(int_high, "decrement")
        return res

    int_low, frac_low = validate_order_key(low, d)

    if high is None:
        res = increment_integer(int_low, d)
        if res is not None:
            return res
        return int_low + midpoint(frac_low, None, d)

    int_high, frac_high = validate_order_key(high, d)
    if int_low == int_high:
        return int_low + midpoint(frac_low, frac_high, d)
    res = increment_integer(int_low, d)
    if res is None:
        raise KeyspaceExhausted(int_low, "increment")
    # compare against the full key: high may be exactly the incremented integer
    if res < high:
        return res
    return int_low + midpoint(frac_low, None, d)


def keys_between(
    low: Optional[str],
    high: Optional[str],
    n: int,
    digits: Union[str, Digits] = BASE_62_DIGITS,
) -> List[str]:
    """Return ``n`` increasing deterministic keys strictly between ``low`` and ``high``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    d = get_digits(digits)
    if n == 0:
        return []
    if n == 1:
        return [key_between(low, high, d)]

    if high is None:
        key = key_between(low, high, d)
        out = [key]
        for _ in range(n - 1):
            key = key_between(key, high, d)
            out.append(key)
        return out

    if low is None:
        key = key_between(low, high, d)
        out = [key]
        for _ in range(n - 1):
            key = key_between(low, key, d)
            out.append(key)
        out.reverse()
        return out

    mid = n // 2
    key = key_between(low, high, d)
    return [
        *keys_between(low, key, mid, d),
        key,
        *keys_between(key, high, n - mid - 1, d),
    ]
