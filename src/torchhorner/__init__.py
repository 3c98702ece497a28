"""torchhorner: Horner's rule polynomial evaluation on fused multiply-add."""

from . import polynomial
from ._fused_multiply_add import fused_multiply_add
from ._numeric import (
    FLOATING_DTYPES,
    INTEGER_DTYPES,
    is_supported_dtype,
    promote,
    supports_fused_multiply_add,
)
from .polynomial import horner, horner_loop, horner_unrolled

__all__ = [
    "FLOATING_DTYPES",
    "INTEGER_DTYPES",
    "fused_multiply_add",
    "horner",
    "horner_loop",
    "horner_unrolled",
    "is_supported_dtype",
    "polynomial",
    "promote",
    "supports_fused_multiply_add",
]

__version__ = "0.1.0"
