"""
Modular exponentiation over big-endian byte strings of any length.

The arithmetic is delegated to a *provider*: a callable taking
``(base, exponent, modulus)`` byte strings and returning ``(ok, result)``.

Provider contract:
- ``(False, b"")`` when the modulus encodes zero (an empty modulus included),
- otherwise ``(True, result)`` where ``result`` is the big-endian residue
  zero-padded to exactly ``len(modulus)`` bytes.

Two providers ship here: `builtin_pow_provider` (the interpreter's
three-argument ``pow``) and `square_and_multiply_provider` (a pure
left-to-right binary exponentiation). They are interchangeable.
"""

from __future__ import annotations

from typing import Callable, Tuple

from .errors import Uint256DivisionByZeroError

ModExpProvider = Callable[[bytes, bytes, bytes], Tuple[bool, bytes]]


def _require_bytes(name: str, value: bytes) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like")
    return bytes(value)


def _decode(data: bytes) -> int:
    return int.from_bytes(data, "big")


def _encode(value: int, length: int) -> bytes:
    return value.to_bytes(length, "big")


def builtin_pow_provider(base: bytes, exponent: bytes, modulus: bytes) -> Tuple[bool, bytes]:
    m = _decode(modulus)
    if m == 0:
        return False, b""
    return True, _encode(pow(_decode(base), _decode(exponent), m), len(modulus))


def square_and_multiply_provider(base: bytes, exponent: bytes, modulus: bytes) -> Tuple[bool, bytes]:
    """
    Pure fallback: scan exponent bits from the most significant byte down,
    squaring the accumulator for every bit and multiplying by the base on set bits.
    """
    m = _decode(modulus)
    if m == 0:
        return False, b""

    b = _decode(base) % m
    acc = 1 % m
    for byte in exponent:
        for bit in range(7, -1, -1):
            acc = (acc * acc) % m
            if (byte >> bit) & 1:
                acc = (acc * b) % m
    return True, _encode(acc, len(modulus))


def try_mod_exp_bytes(
    base: bytes,
    exponent: bytes,
    modulus: bytes,
    *,
    provider: ModExpProvider = builtin_pow_provider,
) -> Tuple[bool, bytes]:
    """
    ``base ** exponent % modulus`` over byte strings, never raising for a zero modulus.

    Returns ``(False, b"")`` when the modulus is zero, else ``(True, result)`` with
    ``len(result) == len(modulus)``.
    """
    base = _require_bytes("base", base)
    exponent = _require_bytes("exponent", exponent)
    modulus = _require_bytes("modulus", modulus)

    ok, result = provider(base, exponent, modulus)
    if not ok:
        if _decode(modulus) != 0:
            raise AssertionError("internal error: provider failed on a non-zero modulus")
        return False, b""
    if _decode(modulus) == 0:
        raise AssertionError("internal error: provider accepted a zero modulus")
    if len(result) != len(modulus):
        raise AssertionError(
            f"internal error: provider returned {len(result)} bytes, expected {len(modulus)}"
        )
    return True, bytes(result)


def mod_exp_bytes(
    base: bytes,
    exponent: bytes,
    modulus: bytes,
    *,
    provider: ModExpProvider = builtin_pow_provider,
) -> bytes:
    """
    ``base ** exponent % modulus`` over byte strings.

    Raises:
        Uint256DivisionByZeroError: if the modulus encodes zero.
    """
    ok, result = try_mod_exp_bytes(base, exponent, modulus, provider=provider)
    if not ok:
        raise Uint256DivisionByZeroError("mod_exp_bytes with zero modulus")
    return result
