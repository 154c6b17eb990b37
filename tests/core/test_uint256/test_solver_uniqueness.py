"""Solver-based checks: the kernel's answer is the *only* answer.

For concrete operands, Z3 is asked for a different value satisfying the defining
bracket/identity of the operation; ``unsat`` proves the kernel's result unique.
Skipped when z3-solver is not installed.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("z3") is None:  # pragma: no cover
    pytest.skip("z3-solver not installed", allow_module_level=True)

import z3

from src.core.uint256 import MAX_UINT256, Rounding, inv_mod, mul_div, sqrt
from tests.uint256_reference import modular_inverse

SECP256K1_P = 2**256 - 2**32 - 977


def _unsat(*constraints) -> bool:
    solver = z3.Solver()
    solver.set("timeout", 20_000)
    solver.add(*constraints)
    result = solver.check()
    assert result != z3.unknown, f"solver gave no answer: {solver.reason_unknown()}"
    return result == z3.unsat


# ---------------------------------------------------------------------------
# sqrt
# ---------------------------------------------------------------------------

class TestSqrtUnique:
    @pytest.mark.parametrize("value", [10, 2**200 + 3, MAX_UINT256, (2**128 - 1) ** 2])
    def test_floor_root_unique(self, value: int):
        r = sqrt(value, Rounding.FLOOR)
        other = z3.Int("other")
        assert _unsat(
            other >= 0,
            other <= 2**128,
            other * other <= value,
            (other + 1) * (other + 1) > value,
            other != r,
        )

    @pytest.mark.parametrize("value", [10, 2**200 + 3, MAX_UINT256])
    def test_ceil_root_unique(self, value: int):
        r = sqrt(value, Rounding.CEIL)
        other = z3.Int("other")
        assert _unsat(
            other >= 1,
            other <= 2**128,
            (other - 1) * (other - 1) < value,
            other * other >= value,
            other != r,
        )


# ---------------------------------------------------------------------------
# mul_div
# ---------------------------------------------------------------------------

class TestMulDivUnique:
    @pytest.mark.parametrize(
        "x,y,d",
        [
            (6, 7, 4),
            (MAX_UINT256, MAX_UINT256, MAX_UINT256),
            (2**255 + 17, 2**200 + 3, 2**201 + 1),
            (2**129 - 1, 2**129 + 1, 4),
        ],
    )
    def test_floor_quotient_unique(self, x: int, y: int, d: int):
        q = mul_div(x, y, d)
        q2, r2 = z3.Ints("q2 r2")
        assert _unsat(q2 * d + r2 == x * y, r2 >= 0, r2 < d, q2 != q)

    @pytest.mark.parametrize("x,y,d", [(6, 7, 4), (2**255 + 17, 2**200 + 3, 2**201 + 1)])
    def test_ceil_quotient_unique(self, x: int, y: int, d: int):
        q = mul_div(x, y, d, Rounding.CEIL)
        q2 = z3.Int("q2")
        assert _unsat((q2 - 1) * d < x * y, x * y <= q2 * d, q2 != q)


# ---------------------------------------------------------------------------
# inv_mod
# ---------------------------------------------------------------------------

class TestInvModSolver:
    # Integer arithmetic cannot settle 256-bit moduli within the timeout; those are
    # checked against the reference inverse instead.
    @pytest.mark.parametrize("value,modulus", [(3, 7), (17, 3120), (65537, 1_000_003), (2**20 + 1, 2**31)])
    def test_inverse_unique(self, value: int, modulus: int):
        x = inv_mod(value, modulus)
        other, k = z3.Ints("other k")
        assert _unsat(other >= 0, other < modulus, value * other - k * modulus == 1, other != x)

    @pytest.mark.parametrize("value,modulus", [(12345, SECP256K1_P), (2**200 + 1, 2**255)])
    def test_wide_modulus_inverse_matches_reference(self, value: int, modulus: int):
        x = inv_mod(value, modulus)
        assert x == modular_inverse(value, modulus)
        assert 0 < x < modulus
        assert (value * x) % modulus == 1

    @pytest.mark.parametrize("value,modulus", [(4, 10), (6, MAX_UINT256), (2**100, 2**255)])
    def test_no_inverse_means_none_exists(self, value: int, modulus: int):
        assert inv_mod(value, modulus) == 0
        other, k = z3.Ints("other k")
        assert _unsat(value * other - k * modulus == 1)
