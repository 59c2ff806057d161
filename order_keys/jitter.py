"""Public key generation entry points.

Independent writers inserting into the same gap would all compute the same
deterministic midpoint. Each jitter round narrows the gap to a random half
before taking the midpoint again, so two writers agree on the final key with
probability of about ``2 ** -jitter_bits``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from .digits import BASE_62_DIGITS, Digits, get_digits
from .generator import key_between, keys_between

DEFAULT_JITTER_BITS = 30

RandomBit = Callable[[], bool]


def default_random_bit() -> bool:
    return random.random() < 0.5


def generate_key_between(
    low: Optional[str],
    high: Optional[str],
    *,
    digits: Union[str, Digits] = BASE_62_DIGITS,
    jitter_bits: int = DEFAULT_JITTER_BITS,
    random_bit: RandomBit = default_random_bit,
) -> str:
    if jitter_bits < 0:
        raise ValueError(f"jitter_bits must be non-negative, got {jitter_bits}")
    d = get_digits(digits)
    mid = key_between(low, high, d)
    for _ in range(jitter_bits):
        if random_bit():
            low = mid
        else:
            high = mid
        mid = key_between(low, high, d)
    return mid


def generate_n_keys_between(
    low: Optional[str],
    high: Optional[str],
    n: int,
    *,
    digits: Union[str, Digits] = BASE_62_DIGITS,
    jitter_bits: int = DEFAULT_JITTER_BITS,
    random_bit: RandomBit = default_random_bit,
) -> List[str]:
    """Return ``n`` increasing keys between ``low`` and ``high``.

    Every returned key is jittered inside its own slot between two
    deterministic boundary keys, so the sequence stays strictly increasing.
    """
    if jitter_bits < 0:
        raise ValueError(f"jitter_bits must be non-negative, got {jitter_bits}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    d = get_digits(digits)
    if n == 0:
        return []
    if jitter_bits == 0:
        return keys_between(low, high, n, d)

    bounds = keys_between(low, high, n + 1, d)
    return [
        generate_key_between(
            bounds[i],
            bounds[i + 1],
            digits=d,
            jitter_bits=jitter_bits,
            random_bit=random_bit,
        )
        for i in range(n)
    ]


@dataclass(frozen=True)
class KeyGenerator:
    """Bundle of generation options, handy for callers that always use the same ones."""

    digits: Digits = field(default_factory=get_digits)
    jitter_bits: int = DEFAULT_JITTER_BITS
    random_bit: RandomBit = default_random_bit

    def __post_init__(self) -> None:
        object.__setattr__(self, "digits", get_digits(self.digits))
        if self.jitter_bits < 0:
            raise ValueError(f"jitter_bits must be non-negative, got {self.jitter_bits}")

    @classmethod
    def seeded(
        cls,
        seed: Union[int, str, bytes],
        digits: Union[str, Digits] = BASE_62_DIGITS,
        jitter_bits: int = DEFAULT_JITTER_BITS,
    ) -> "KeyGenerator":
        rng = random.Random(seed)
        return cls(
            digits=get_digits(digits),
            jitter_bits=jitter_bits,
            random_bit=lambda: rng.random() < 0.5,
        )

    def between(self, low: Optional[str], high: Optional[str]) -> str:
        return generate_key_between(
            low,
            high,
            digits=self.digits,
            jitter_bits=self.jitter_bits,
            random_bit=self.random_bit,
        )

    def n_between(self, low: Optional[str], high: Optional[str], n: int) -> List[str]:
        return generate_n_keys_between(
            low,
            high,
            n,
            digits=self.digits,
            jitter_bits=self.jitter_bits,
            random_bit=self.random_bit,
        )
