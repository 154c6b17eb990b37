"""
Double-width (512-bit) addition and multiplication.

Both functions are total: every pair of words has an exact `WideWord` result.
The multiplication is written as an explicit schoolbook split into 128-bit limbs
so the carry structure matches a fixed-width implementation; the result is the
exact product either way.
"""

from __future__ import annotations

from .types import HALF_MASK, HALF_WORD_BITS, MAX_UINT256, WideWord
from .words import require_words


def add512(a: int, b: int) -> WideWord:
    """
    Exact sum of two words.

    ``high`` is the carry out of the low word and is therefore always 0 or 1.
    """
    require_words(("a", a), ("b", b))
    low = (a + b) & MAX_UINT256
    carry = 1 if low < a else 0
    return WideWord(high=carry, low=low)


def mul512(a: int, b: int) -> WideWord:
    """
    Exact product of two words.

    With ``a = a1*2^128 + a0`` and ``b = b1*2^128 + b0``:

        a*b = a1*b1*2^256 + (a1*b0 + a0*b1)*2^128 + a0*b0

    The middle column collects the upper half of ``a0*b0`` and the lower halves of
    the cross products; its carry moves into the high word.
    """
    require_words(("a", a), ("b", b))
    a0, a1 = a & HALF_MASK, a >> HALF_WORD_BITS
    b0, b1 = b & HALF_MASK, b >> HALF_WORD_BITS

    p00 = a0 * b0
    p01 = a0 * b1
    p10 = a1 * b0
    p11 = a1 * b1

    mid = (p00 >> HALF_WORD_BITS) + (p01 & HALF_MASK) + (p10 & HALF_MASK)
    low = (p00 & HALF_MASK) | ((mid & HALF_MASK) << HALF_WORD_BITS)
    high = p11 + (p01 >> HALF_WORD_BITS) + (p10 >> HALF_WORD_BITS) + (mid >> HALF_WORD_BITS)

    if high > MAX_UINT256:
        raise AssertionError("internal error: 512-bit product high word out of range")
    return WideWord(high=high, low=low)
