"""Tests for src/core/uint256/checked.py."""

import pytest

from src.core.uint256 import (
    MAX_UINT256,
    WordRangeError,
    saturating_add,
    saturating_mul,
    saturating_sub,
    try_add,
    try_div,
    try_mod,
    try_mul,
    try_sub,
)


class TestTryAdd:
    def test_fits(self):
        assert try_add(2, 3) == (True, 5)

    def test_exact_max(self):
        assert try_add(MAX_UINT256 - 1, 1) == (True, MAX_UINT256)

    def test_overflow(self):
        assert try_add(MAX_UINT256, 1) == (False, 0)


class TestTrySub:
    def test_fits(self):
        assert try_sub(5, 3) == (True, 2)

    def test_equal(self):
        assert try_sub(7, 7) == (True, 0)

    def test_underflow(self):
        assert try_sub(3, 5) == (False, 0)


class TestTryMul:
    def test_fits(self):
        assert try_mul(6, 7) == (True, 42)

    def test_zero_operand(self):
        assert try_mul(0, MAX_UINT256) == (True, 0)

    def test_largest_square(self):
        r = (1 << 128) - 1
        assert try_mul(r, r) == (True, r * r)

    def test_overflow(self):
        assert try_mul(1 << 128, 1 << 128) == (False, 0)


class TestTryDivMod:
    def test_div(self):
        assert try_div(10, 3) == (True, 3)

    def test_div_by_zero(self):
        assert try_div(10, 0) == (False, 0)

    def test_mod(self):
        assert try_mod(10, 3) == (True, 1)

    def test_mod_by_zero(self):
        assert try_mod(10, 0) == (False, 0)


class TestSaturating:
    def test_add_clamps(self):
        assert saturating_add(MAX_UINT256, 5) == MAX_UINT256

    def test_add_exact(self):
        assert saturating_add(1, 2) == 3

    def test_sub_clamps(self):
        assert saturating_sub(1, 2) == 0

    def test_sub_exact(self):
        assert saturating_sub(5, 2) == 3

    def test_mul_clamps(self):
        assert saturating_mul(1 << 200, 1 << 100) == MAX_UINT256

    def test_mul_exact(self):
        assert saturating_mul(3, 4) == 12


class TestContractViolations:
    @pytest.mark.parametrize("fn", [try_add, try_sub, try_mul, try_div, try_mod])
    def test_try_forms_still_reject_out_of_range(self, fn):
        with pytest.raises(WordRangeError):
            fn(-1, 1)

    @pytest.mark.parametrize("fn", [try_add, try_sub, try_mul, try_div, try_mod])
    def test_try_forms_reject_bool(self, fn):
        with pytest.raises(TypeError):
            fn(True, 1)
