"""
Core integer kernels
"""

from .uint256 import (
    MAX_UINT256,
    WORD_BITS,
    Rounding,
    WideWord,
    add512,
    ceil_div,
    clz,
    inv_mod,
    log2,
    log10,
    log256,
    mod_exp,
    mod_exp_bytes,
    mul512,
    mul_div,
    sqrt,
    try_add,
    try_mod_exp,
    try_mod_exp_bytes,
    try_mul,
    unsigned_rounds_up,
)

__all__ = [
    "MAX_UINT256",
    "WORD_BITS",
    "Rounding",
    "WideWord",
    "add512",
    "mul512",
    "try_add",
    "try_mul",
    "ceil_div",
    "mul_div",
    "sqrt",
    "log2",
    "log10",
    "log256",
    "unsigned_rounds_up",
    "clz",
    "inv_mod",
    "mod_exp",
    "try_mod_exp",
    "mod_exp_bytes",
    "try_mod_exp_bytes",
]
