"""Bit-level helpers over 256-bit words."""

from __future__ import annotations

from .types import WORD_BITS
from .words import require_word


def clz(x: int) -> int:
    """Count of leading zero bits in the 256-bit word *x*; ``clz(0) == 256``."""
    require_word("x", x)
    return WORD_BITS - x.bit_length()
