"""`uint256`: deterministic, overflow-safe unsigned 256-bit integer kernels.

- integer-only, exact results (512-bit intermediates where a product is involved),
- strict entry points raise; ``try_*`` entry points return ``(ok, placeholder)``,
- every rounding-aware function takes a `Rounding` (default `Rounding.FLOOR`).

Public API:
- `add512`, `mul512` -> `WideWord`
- `try_add`, `try_sub`, `try_mul`, `try_div`, `try_mod`, `saturating_*`
- `ceil_div`, `mul_div`, `try_mul_div`, `mul_shr`, `average`
- `sqrt`, `log2`, `log10`, `log256`, `unsigned_rounds_up`
- `clz`
- `mul_mod`, `inv_mod`, `inv_mod_prime`, `mod_exp`, `try_mod_exp`
- `mod_exp_bytes`, `try_mod_exp_bytes` (+ providers)
"""

from .bits import clz
from .checked import (
    saturating_add,
    saturating_mul,
    saturating_sub,
    try_add,
    try_div,
    try_mod,
    try_mul,
    try_sub,
)
from .division import average, ceil_div, mul_div, mul_shr, try_mul_div
from .errors import (
    RoundingDomainError,
    Uint256DivisionByZeroError,
    Uint256Error,
    Uint256OverflowError,
    WordRangeError,
)
from .modexp import (
    ModExpProvider,
    builtin_pow_provider,
    mod_exp_bytes,
    square_and_multiply_provider,
    try_mod_exp_bytes,
)
from .modular import inv_mod, inv_mod_prime, mod_exp, mul_mod, try_mod_exp
from .roots import log2, log10, log256, sqrt
from .types import (
    HALF_WORD_BITS,
    MAX_UINT256,
    WORD_BITS,
    WORD_BYTES,
    Rounding,
    WideWord,
    unsigned_rounds_up,
)
from .wide import add512, mul512

__all__ = [
    "WORD_BITS",
    "WORD_BYTES",
    "HALF_WORD_BITS",
    "MAX_UINT256",
    "Rounding",
    "WideWord",
    "unsigned_rounds_up",
    "add512",
    "mul512",
    "try_add",
    "try_sub",
    "try_mul",
    "try_div",
    "try_mod",
    "saturating_add",
    "saturating_sub",
    "saturating_mul",
    "ceil_div",
    "mul_div",
    "try_mul_div",
    "mul_shr",
    "average",
    "sqrt",
    "log2",
    "log10",
    "log256",
    "clz",
    "mul_mod",
    "inv_mod",
    "inv_mod_prime",
    "mod_exp",
    "try_mod_exp",
    "ModExpProvider",
    "builtin_pow_provider",
    "square_and_multiply_provider",
    "mod_exp_bytes",
    "try_mod_exp_bytes",
    "Uint256Error",
    "Uint256DivisionByZeroError",
    "Uint256OverflowError",
    "RoundingDomainError",
    "WordRangeError",
]
