"""Integer part of an order key.

The head character declares sign and width: ``a`` is followed by one digit,
``b`` by two, up to ``z`` with 26; ``Z`` is followed by one digit, ``Y`` by
two, down to ``A`` with 26. Because the head alone fixes the width, integer
parts with different heads already compare correctly before any digit is
looked at.
"""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

from .digits import BASE_62_DIGITS, Digits, get_digits
from .errors import InvalidHead, MalformedKey, TrailingZero

SMALLEST_POSITIVE_HEAD = "a"
LARGEST_POSITIVE_HEAD = "z"
SMALLEST_NEGATIVE_HEAD = "A"
LARGEST_NEGATIVE_HEAD = "Z"


def integer_length(head: str) -> int:
    """Return the total length (head included) of an integer part starting with ``head``."""
    if "a" <= head <= "z":
        return ord(head) - ord("a") + 2
    if "A" <= head <= "Z":
        return ord("Z") - ord(head) + 2
    raise InvalidHead(head)


def split_integer_part(key: str) -> Tuple[str, str]:
    if not key:
        raise MalformedKey(key, "empty")
    length = integer_length(key[0])
    if length > len(key):
        raise MalformedKey(key)
    return key[:length], key[length:]


def validate_order_key(key: str, digits: Union[str, Digits] = BASE_62_DIGITS) -> Tuple[str, str]:
    """Check ``key`` against the order key grammar and return its two parts."""
    d = get_digits(digits)
    integer_part, fraction = split_integer_part(key)
    for ch in key[1:]:
        if ch not in d:
            raise MalformedKey(key, f"{ch!r} is not a digit")
    if fraction.endswith(d.zero):
        raise TrailingZero(key)
    return integer_part, fraction


def _digit_buffer(integer_part: str, d: Digits) -> Tuple[str, List[int]]:
    return integer_part[0], [d.value(ch) for ch in integer_part[1:]]


def _join(head: str, buf: List[int], d: Digits) -> str:
    return head + "".join(d.char(i) for i in buf)


def increment_integer(integer_part: str, digits: Union[str, Digits] = BASE_62_DIGITS) -> Optional[str]:
    """Add one to ``integer_part``; ``None`` when it is already the largest value."""
    d = get_digits(digits)
    head, buf = _digit_buffer(integer_part, d)
    carry = True
    i = len(buf) - 1
    while carry and i >= 0:
        if buf[i] + 1 == d.base:
            buf[i] = 0
        else:
            buf[i] += 1
            carry = False
        i -= 1
    if not carry:
        return _join(head, buf, d)

    if head == LARGEST_NEGATIVE_HEAD:
        return SMALLEST_POSITIVE_HEAD + d.zero
    if head == LARGEST_POSITIVE_HEAD:
        return None
    new_head = chr(ord(head) + 1)
    if new_head > SMALLEST_POSITIVE_HEAD:
        buf.append(0)
    else:
        buf.pop()
    return _join(new_head, buf, d)


def decrement_integer(integer_part: str, digits: Union[str, Digits] = BASE_62_DIGITS) -> Optional[str]:
    """Subtract one from ``integer_part``; ``None`` when it is already the smallest value."""
    d = get_digits(digits)
    head, buf = _digit_buffer(integer_part, d)
    borrow = True
    i = len(buf) - 1
    while borrow and i >= 0:
        if buf[i] == 0:
            buf[i] = d.base - 1
        else:
            buf[i] -= 1
            borrow = False
        i -= 1
    if not borrow:
        return _join(head, buf, d)

    if head == SMALLEST_POSITIVE_HEAD:
        return LARGEST_NEGATIVE_HEAD + d.last
    if head == SMALLEST_NEGATIVE_HEAD:
        return None
    new_head = chr(ord(head) - 1)
    if new_head < LARGEST_NEGATIVE_HEAD:
        buf.append(d.base - 1)
    else:
        buf.pop()
    return _join(new_head, buf, d)
