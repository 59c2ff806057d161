from __future__ import annotations

from typing import Optional, Union

from .digits import BASE_62_DIGITS, Digits, get_digits
from .errors import OrderViolation, TrailingZero


def midpoint(
    low: str,
    high: Optional[str],
    digits: Union[str, Digits] = BASE_62_DIGITS,
) -> str:
    """Return a digit string strictly between ``low`` and ``high``.

    Both arguments are fractional parts, not full keys. ``high`` may be
    ``None`` to indicate unbounded above; ``low`` is ``""`` when unbounded
    below. The result is as short as the gap allows and never ends in the
    zero digit.
    """
    d = get_digits(digits)
    if high is not None and low >= high:
        raise OrderViolation(low, high)
    if low.endswith(d.zero):
        raise TrailingZero(low)
    if high is not None and high.endswith(d.zero):
        raise TrailingZero(high)

    out: list[str] = []
    if high is not None:
        # shared prefix, reading past the end of low as zero digits
        n = 0
        while n < len(high) and (low[n] if n < len(low) else d.zero) == high[n]:
            n += 1
        out.append(high[:n])
        low = low[n:]
        high = high[n:]

    while True:
        da = d.value(low[0]) if low else 0
        db = d.value(high[0]) if high is not None else d.base
        if db - da > 1:
            # halves round up
            out.append(d.char((da + db + 1) // 2))
            return "".join(out)
        if high is not None and len(high) > 1:
            out.append(high[0])
            return "".join(out)
        out.append(d.char(da))
        low = low[1:]
        high = None
