"""Operand guards shared by the `uint256` kernels."""

from __future__ import annotations

from .errors import RoundingDomainError, WordRangeError
from .types import MAX_UINT256, Rounding


def require_word(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0 or value > MAX_UINT256:
        raise WordRangeError(f"{name} out of uint256 range: {value}")


def require_words(*pairs: tuple[str, int]) -> None:
    for name, value in pairs:
        require_word(name, value)


def require_rounding(rounding: Rounding) -> None:
    if not isinstance(rounding, Rounding):
        raise RoundingDomainError(f"unknown rounding mode: {rounding!r}")
