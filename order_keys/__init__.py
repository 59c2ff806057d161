"""Fractional indexing: short string keys whose lexicographic order is the item order."""

__version__ = "1.0.0"

from .digits import BASE_62_DIGITS, Digits, get_digits
from .errors import (
    InvalidDigits,
    InvalidHead,
    KeyspaceExhausted,
    MalformedKey,
    OrderKeyError,
    OrderViolation,
    TrailingZero,
)
from .generator import key_between, keys_between
from .integer import (
    decrement_integer,
    increment_integer,
    integer_length,
    split_integer_part,
    validate_order_key,
)
from .jitter import (
    DEFAULT_JITTER_BITS,
    KeyGenerator,
    default_random_bit,
    generate_key_between,
    generate_n_keys_between,
)
from .midpoint import midpoint

__all__ = [
    "BASE_62_DIGITS",
    "DEFAULT_JITTER_BITS",
    "Digits",
    "InvalidDigits",
    "InvalidHead",
    "KeyGenerator",
    "KeyspaceExhausted",
    "MalformedKey",
    "OrderKeyError",
    "OrderViolation",
    "TrailingZero",
    "decrement_integer",
    "default_random_bit",
    "generate_key_between",
    "generate_n_keys_between",
    "get_digits",
    "increment_integer",
    "integer_length",
    "key_between",
    "keys_between",
    "midpoint",
    "split_integer_part",
    "validate_order_key",
]
