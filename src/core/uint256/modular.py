"""
Modular arithmetic over 256-bit words.

- `inv_mod`: extended Euclid; a missing inverse is reported as 0, never raised.
- `inv_mod_prime`: Fermat inverse for prime moduli.
- `mod_exp` / `try_mod_exp`: right-to-left square-and-multiply.

Products are reduced through `mul_mod`, which works on the exact 512-bit product.
"""

from __future__ import annotations

from typing import Tuple

from .errors import Uint256DivisionByZeroError
from .types import MAX_UINT256
from .wide import mul512
from .words import require_words


def mul_mod(a: int, b: int, modulus: int) -> int:
    """``(a * b) % modulus`` without truncating the intermediate product."""
    require_words(("a", a), ("b", b), ("modulus", modulus))
    if modulus == 0:
        raise Uint256DivisionByZeroError("mul_mod by zero modulus")
    return mul512(a, b).value % modulus


def inv_mod(value: int, modulus: int) -> int:
    """
    Multiplicative inverse of *value* modulo *modulus*.

    Returns ``x`` with ``0 <= x < modulus`` and ``value * x % modulus == 1``, or 0
    when ``gcd(value, modulus) != 1`` (which includes ``modulus <= 1``).

    Invariant of the loop: ``x * value ≡ gcd`` and ``y * value ≡ remainder``
    (mod modulus).
    """
    require_words(("value", value), ("modulus", modulus))
    if modulus == 0:
        return 0

    gcd = modulus
    remainder = value % modulus
    x, y = 0, 1
    while remainder != 0:
        quotient = gcd // remainder
        gcd, remainder = remainder, gcd - remainder * quotient
        x, y = y, x - y * quotient

    if gcd != 1:
        return 0
    return x % modulus


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    ``base ** exponent % modulus``.

    Raises:
        Uint256DivisionByZeroError: if ``modulus == 0``.
    """
    require_words(("base", base), ("exponent", exponent), ("modulus", modulus))
    if modulus == 0:
        raise Uint256DivisionByZeroError("mod_exp with zero modulus")
    return _square_and_multiply(base, exponent, modulus)


def try_mod_exp(base: int, exponent: int, modulus: int) -> Tuple[bool, int]:
    """Non-raising `mod_exp`: ``(False, 0)`` when ``modulus == 0``."""
    require_words(("base", base), ("exponent", exponent), ("modulus", modulus))
    if modulus == 0:
        return False, 0
    return True, _square_and_multiply(base, exponent, modulus)


def inv_mod_prime(value: int, p: int) -> int:
    """
    Fermat inverse ``value ** (p - 2) % p`` for a prime *p*.

    The exponent wraps modulo 2^256, so ``p == 1`` yields 0 and ``p == 0`` raises
    `Uint256DivisionByZeroError`. The result is meaningless for composite *p*.
    """
    require_words(("value", value), ("p", p))
    return mod_exp(value, (p - 2) & MAX_UINT256, p)


def _square_and_multiply(base: int, exponent: int, modulus: int) -> int:
    if modulus == 1:
        return 0

    result = 1
    square = base % modulus
    e = exponent
    while e:
        if e & 1:
            result = mul_mod(result, square, modulus)
        square = mul_mod(square, square, modulus)
        e >>= 1

    if not (0 <= result < modulus):
        raise AssertionError("internal error: mod_exp result not reduced")
    return result
