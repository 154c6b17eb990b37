"""Checked and saturating word arithmetic.

The ``try_*`` functions never raise for overflow or a zero divisor; they return
``(False, 0)`` instead. The ``saturating_*`` functions clamp to the word range.
"""

from __future__ import annotations

from typing import Tuple

from .types import MAX_UINT256
from .wide import add512, mul512
from .words import require_words


def try_add(a: int, b: int) -> Tuple[bool, int]:
    """``(True, a + b)``, or ``(False, 0)`` when the sum needs more than 256 bits."""
    wide = add512(a, b)
    if not wide.fits_word:
        return False, 0
    return True, wide.low


def try_sub(a: int, b: int) -> Tuple[bool, int]:
    """``(True, a - b)``, or ``(False, 0)`` on underflow."""
    require_words(("a", a), ("b", b))
    if b > a:
        return False, 0
    return True, a - b


def try_mul(a: int, b: int) -> Tuple[bool, int]:
    """``(True, a * b)``, or ``(False, 0)`` when the product needs more than 256 bits."""
    wide = mul512(a, b)
    if not wide.fits_word:
        return False, 0
    return True, wide.low


def try_div(a: int, b: int) -> Tuple[bool, int]:
    require_words(("a", a), ("b", b))
    if b == 0:
        return False, 0
    return True, a // b


def try_mod(a: int, b: int) -> Tuple[bool, int]:
    require_words(("a", a), ("b", b))
    if b == 0:
        return False, 0
    return True, a % b


def saturating_add(a: int, b: int) -> int:
    """``min(a + b, MAX_UINT256)``."""
    ok, result = try_add(a, b)
    return result if ok else MAX_UINT256


def saturating_sub(a: int, b: int) -> int:
    """``max(a - b, 0)``."""
    ok, result = try_sub(a, b)
    return result if ok else 0


def saturating_mul(a: int, b: int) -> int:
    """``min(a * b, MAX_UINT256)``."""
    ok, result = try_mul(a, b)
    return result if ok else MAX_UINT256
