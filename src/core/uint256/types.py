"""Value types for the `uint256` kernels.

Units/conventions:
- A *word* is a plain Python int in ``[0, MAX_UINT256]``.
- A `WideWord` is a 512-bit value split into two words: ``high * 2**256 + low``.
- `Rounding` is a closed set of four policies. For unsigned operands `CEIL` and
  `EXPAND` behave the same, as do `FLOOR` and `TRUNC`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

from .errors import RoundingDomainError, WordRangeError

# Word geometry
WORD_BITS: int = 256
WORD_BYTES: int = WORD_BITS // 8
HALF_WORD_BITS: int = WORD_BITS // 2
MAX_UINT256: int = (1 << WORD_BITS) - 1
HALF_MASK: int = (1 << HALF_WORD_BITS) - 1


@unique
class Rounding(Enum):
    """Which neighbour a non-exact integer result is reported as."""
    FLOOR = "floor"
    CEIL = "ceil"
    TRUNC = "trunc"
    EXPAND = "expand"


def unsigned_rounds_up(rounding: Rounding) -> bool:
    """True when *rounding* moves a non-exact unsigned result up (away from zero)."""
    if rounding is Rounding.FLOOR:
        return False
    if rounding is Rounding.CEIL:
        return True
    if rounding is Rounding.TRUNC:
        return False
    if rounding is Rounding.EXPAND:
        return True
    raise RoundingDomainError(f"unknown rounding mode: {rounding!r}")


@dataclass(frozen=True)
class WideWord:
    """Double-width unsigned integer (``high * 2**256 + low``)."""

    high: int
    low: int

    def __post_init__(self) -> None:
        for name in ("high", "low"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0 or v > MAX_UINT256:
                raise WordRangeError(f"{name} out of uint256 range: {v}")

    @property
    def value(self) -> int:
        return (self.high << WORD_BITS) | self.low

    @property
    def fits_word(self) -> bool:
        """True when the value is representable in a single word."""
        return self.high == 0
