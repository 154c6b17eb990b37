"""
Integer square root and logarithms under a `Rounding` policy.

Every function returns the floor result first and then moves up by one when the
policy rounds up and the floor result is not exact.

Convention: the logarithm of zero is 0 for every rounding mode (not an error).
Callers that need to reject zero must check for it themselves.
"""

from __future__ import annotations

from .types import Rounding, unsigned_rounds_up
from .words import require_rounding, require_word

# Probe tables. The largest probe of each stays below 2^256.
_LOG2_SHIFTS = (128, 64, 32, 16, 8, 4, 2, 1)
_LOG10_EXPONENTS = (64, 32, 16, 8, 4, 2, 1)
_LOG10_POWERS = tuple((e, 10**e) for e in _LOG10_EXPONENTS)
_LOG256_BYTE_SHIFTS = (16, 8, 4, 2, 1)


def sqrt(value: int, rounding: Rounding = Rounding.FLOOR) -> int:
    """
    Integer square root.

    Newton's iteration ``x' = (x + value // x) // 2`` started above the root
    decreases monotonically and stops at the floor root.
    """
    require_word("value", value)
    require_rounding(rounding)
    if value <= 1:
        return value

    x = 1 << ((value.bit_length() + 1) // 2)
    while True:
        y = (x + value // x) >> 1
        if y >= x:
            break
        x = y

    if not (x * x <= value < (x + 1) * (x + 1)):
        raise AssertionError("internal error: sqrt did not converge to the floor root")

    if unsigned_rounds_up(rounding) and x * x < value:
        return x + 1
    return x


def log2(value: int, rounding: Rounding = Rounding.FLOOR) -> int:
    """Base-2 logarithm; ``log2(0) == 0``."""
    require_word("value", value)
    require_rounding(rounding)
    if value == 0:
        return 0

    x = value
    result = 0
    for shift in _LOG2_SHIFTS:
        if x >> shift:
            x >>= shift
            result += shift

    if unsigned_rounds_up(rounding) and (1 << result) < value:
        return result + 1
    return result


def log10(value: int, rounding: Rounding = Rounding.FLOOR) -> int:
    """Base-10 logarithm; ``log10(0) == 0``."""
    require_word("value", value)
    require_rounding(rounding)
    if value == 0:
        return 0

    x = value
    result = 0
    for exponent, power in _LOG10_POWERS:
        if x >= power:
            x //= power
            result += exponent

    if unsigned_rounds_up(rounding) and 10**result < value:
        return result + 1
    return result


def log256(value: int, rounding: Rounding = Rounding.FLOOR) -> int:
    """Base-256 logarithm (index of the most significant non-zero byte); ``log256(0) == 0``."""
    require_word("value", value)
    require_rounding(rounding)
    if value == 0:
        return 0

    x = value
    result = 0
    for byte_shift in _LOG256_BYTE_SHIFTS:
        if x >> (byte_shift * 8):
            x >>= byte_shift * 8
            result += byte_shift

    if unsigned_rounds_up(rounding) and (1 << (result * 8)) < value:
        return result + 1
    return result
