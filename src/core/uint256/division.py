"""
Rounding-aware division kernels.

`mul_div` and `mul_shr` form the full 512-bit product first (via `mul512`) and
divide/shift the double-width value, so ``x * y`` never loses its upper word.
Strict forms raise; `try_mul_div` reports the same failures as ``(False, 0)``.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .errors import Uint256DivisionByZeroError, Uint256OverflowError, WordRangeError
from .types import MAX_UINT256, WORD_BITS, Rounding, unsigned_rounds_up
from .wide import mul512
from .words import require_rounding, require_words


def ceil_div(a: int, b: int) -> int:
    """
    Ceiling of ``a / b``.

    Written as ``(a - 1) // b + 1`` for ``a > 0`` so the numerator never exceeds
    the word (``a + b - 1`` could).
    """
    require_words(("a", a), ("b", b))
    if b == 0:
        raise Uint256DivisionByZeroError("ceil_div by zero")
    if a == 0:
        return 0
    return (a - 1) // b + 1


def _mul_div_word(x: int, y: int, d: int, rounding: Rounding) -> Optional[int]:
    """
    ``x * y / d`` rounded per *rounding*, or None when the result exceeds a word.

    Preconditions: operands are words, ``d > 0``.
    """
    product = mul512(x, y)
    # floor(product / d) < 2^256  <=>  product.high < d
    if d <= product.high:
        return None

    q, r = divmod(product.value, d)
    if product.value != q * d + r:
        raise AssertionError("internal error: 512-bit division identity violated")

    if r != 0 and unsigned_rounds_up(rounding):
        q += 1
        if q > MAX_UINT256:
            return None
    return q


def mul_div(x: int, y: int, d: int, rounding: Rounding = Rounding.FLOOR) -> int:
    """
    Full-precision ``x * y / d``.

    Raises:
        Uint256DivisionByZeroError: if ``d == 0``.
        Uint256OverflowError: if the rounded quotient does not fit in 256 bits.
    """
    require_words(("x", x), ("y", y), ("d", d))
    require_rounding(rounding)
    if d == 0:
        raise Uint256DivisionByZeroError("mul_div by zero")
    q = _mul_div_word(x, y, d, rounding)
    if q is None:
        raise Uint256OverflowError("mul_div quotient overflows uint256")
    return q


def try_mul_div(x: int, y: int, d: int, rounding: Rounding = Rounding.FLOOR) -> Tuple[bool, int]:
    """Non-raising `mul_div`: ``(False, 0)`` on a zero divisor or quotient overflow."""
    require_words(("x", x), ("y", y), ("d", d))
    require_rounding(rounding)
    if d == 0:
        return False, 0
    q = _mul_div_word(x, y, d, rounding)
    if q is None:
        return False, 0
    return True, q


def mul_shr(x: int, y: int, n: int, rounding: Rounding = Rounding.FLOOR) -> int:
    """
    ``x * y >> n`` over the full 512-bit product, for ``0 <= n < 256``.

    Rounding up adds one when any shifted-out bit was set.
    """
    require_words(("x", x), ("y", y))
    require_rounding(rounding)
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n must be an int")
    if n < 0 or n >= WORD_BITS:
        raise WordRangeError(f"shift must be in [0, {WORD_BITS - 1}]: {n}")

    product = mul512(x, y)
    if product.high >> n != 0:
        raise Uint256OverflowError("mul_shr result overflows uint256")

    result = product.value >> n
    dropped = product.value & ((1 << n) - 1)
    if dropped != 0 and unsigned_rounds_up(rounding):
        result += 1
        if result > MAX_UINT256:
            raise Uint256OverflowError("mul_shr result overflows uint256")
    return result


def average(a: int, b: int) -> int:
    """Floor of ``(a + b) / 2`` without forming the (possibly 257-bit) sum."""
    require_words(("a", a), ("b", b))
    return (a & b) + ((a ^ b) >> 1)
