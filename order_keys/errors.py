from __future__ import annotations


class OrderKeyError(ValueError):
    """Base class for every failure raised while generating order keys."""

    code = "order_key_error"


class OrderViolation(OrderKeyError):
    code = "order_violation"

    def __init__(self, low: str, high: str) -> None:
        super().__init__(f"{low!r} >= {high!r}")
        self.low = low
        self.high = high


class TrailingZero(OrderKeyError):
    code = "trailing_zero"

    def __init__(self, value: str) -> None:
        super().__init__(f"trailing zero digit: {value!r}")
        self.value = value


class InvalidHead(OrderKeyError):
    code = "invalid_head"

    def __init__(self, head: str) -> None:
        super().__init__(f"invalid order key head: {head!r}")
        self.head = head


class MalformedKey(OrderKeyError):
    code = "malformed_key"

    def __init__(self, key: str, reason: str = "too short") -> None:
        super().__init__(f"invalid order key {key!r}: {reason}")
        self.key = key
        self.reason = reason


class KeyspaceExhausted(OrderKeyError):
    """Increment or decrement ran past the representable integer range."""

    code = "keyspace_exhausted"

    def __init__(self, integer_part: str, direction: str) -> None:
        super().__init__(f"cannot {direction} {integer_part!r}")
        self.integer_part = integer_part
        self.direction = direction


class InvalidDigits(OrderKeyError):
    code = "invalid_digits"

    def __init__(self, digits: str, reason: str) -> None:
        super().__init__(f"invalid digits {digits!r}: {reason}")
        self.digits = digits
        self.reason = reason
