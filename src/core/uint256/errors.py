"""Exception types for the `uint256` kernels.

Raised by the strict entry points (``ceil_div``, ``mul_div``, ``mod_exp`` ...).
The ``try_*`` entry points report the same conditions as ``(False, placeholder)``
instead of raising.
"""

from __future__ import annotations


class Uint256Error(Exception):
    """Base class for errors raised on purpose by this package."""


class Uint256DivisionByZeroError(Uint256Error, ZeroDivisionError):
    """Raised when a divisor or modulus is zero where strict division is required."""


class Uint256OverflowError(Uint256Error, OverflowError):
    """Raised when a checked result does not fit in a 256-bit word."""


class RoundingDomainError(Uint256Error, ValueError):
    """Raised when a rounding value is not one of the four `Rounding` members."""


class WordRangeError(Uint256Error, ValueError):
    """Raised when an operand lies outside its unsigned domain."""
