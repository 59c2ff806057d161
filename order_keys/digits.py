from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Union

from .errors import InvalidDigits, MalformedKey

# Sorted by code point: 0-9 (48-57), A-Z (65-90), a-z (97-122)
BASE_62_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class Digits:
    """Ordered digit set used for every numeric part of an order key.

    Index order must equal code point order so that comparing two digit
    strings as plain strings agrees with comparing their values.
    """

    chars: str
    _a2i: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.chars) < 2:
            raise InvalidDigits(self.chars, "need at least 2 digits")
        for prev, cur in zip(self.chars, self.chars[1:]):
            if prev >= cur:
                raise InvalidDigits(self.chars, f"{cur!r} does not sort after {prev!r}")
        object.__setattr__(self, "_a2i", {ch: i for i, ch in enumerate(self.chars)})

    @property
    def base(self) -> int:
        return len(self.chars)

    @property
    def zero(self) -> str:
        return self.chars[0]

    @property
    def last(self) -> str:
        return self.chars[-1]

    def value(self, ch: str) -> int:
        try:
            return self._a2i[ch]
        except KeyError:
            raise MalformedKey(ch, "not a digit") from None

    def char(self, index: int) -> str:
        return self.chars[index]

    def __contains__(self, ch: str) -> bool:
        return ch in self._a2i


@lru_cache(maxsize=32)
def _digits_for(chars: str) -> Digits:
    return Digits(chars)


def get_digits(digits: Union[str, Digits] = BASE_62_DIGITS) -> Digits:
    """Return a ``Digits`` for ``digits``, building lookup tables once per alphabet."""
    if isinstance(digits, Digits):
        return digits
    return _digits_for(digits)
