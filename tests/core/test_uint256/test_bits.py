"""Tests for src/core/uint256/bits.py."""

import pytest

from src.core.uint256 import MAX_UINT256, WORD_BITS, WordRangeError, clz


def test_clz_of_zero_is_word_width() -> None:
    assert clz(0) == WORD_BITS


def test_clz_of_one() -> None:
    assert clz(1) == 255


def test_clz_of_max() -> None:
    assert clz(MAX_UINT256) == 0


@pytest.mark.parametrize("bit", [0, 1, 7, 8, 127, 128, 200, 255])
def test_clz_single_bit(bit: int) -> None:
    assert clz(1 << bit) == 255 - bit


@pytest.mark.parametrize("x", [3, 0xFF, (1 << 130) + 17, (1 << 255) | 1])
def test_clz_highest_set_bit(x: int) -> None:
    top = WORD_BITS - 1 - clz(x)
    assert (x >> top) & 1 == 1
    assert x >> (top + 1) == 0


def test_clz_rejects_out_of_range() -> None:
    with pytest.raises(WordRangeError):
        clz(1 << 256)
