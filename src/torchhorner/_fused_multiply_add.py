import decimal
import fractions
import functools
import math
from typing import Any, Tuple

import torch
from torch import Tensor

from ._numeric import is_supported_dtype, promote

# 2**27 + 1, splits a float64 significand into two 26-bit halves.
_SPLITTER = 134217729.0

_INTEGER_VIEWS = {
    torch.float32: torch.int32,
    torch.float64: torch.int64,
}


def fused_multiply_add(x: Any, a: Any, b: Any) -> Any:
    """Compute ``x * a + b`` as a single operation.

    Floating-point operands are rounded once, not once after the multiply
    and again after the add. Integer and rational operands give the exact
    result.

    Parameters
    ----------
    x : Any
        Multiplicand.
    a : Any
        Multiplier.
    b : Any
        Addend.

    Returns
    -------
    Any
        ``x * a + b`` in the promoted type of the operands.

    Raises
    ------
    TypeError
        If the operands have no common type with a fused multiply-add.

    Notes
    -----
    Operands are unified by :func:`torchhorner._numeric.promote` and then
    dispatched on their common type, so ``fused_multiply_add(2, 2.5, 1)``
    is a float operation and never an integer one. New types are added
    with ``fused_multiply_add.register``:

    >>> @fused_multiply_add.register(MyNumber)
    ... def _(x, a, b):
    ...     return x.mul_add(a, b)

    PyTorch has no fused multiply-add operator. Rounding per tensor dtype:

    * float32, float16, bfloat16: correctly rounded, computed in float64
      with round-to-odd before the cast to the working dtype;
    * float64: compensated with error-free transformations, within one ulp
      of the correctly rounded value and nearly always equal to it;
    * integer dtypes: exact, wrapping at the dtype width.

    Python floats use ``math.fma`` and are always correctly rounded.

    Examples
    --------
    >>> fused_multiply_add(7.0, 2.0, 3.0)
    17.0
    >>> fused_multiply_add(torch.tensor([1, 2]), 3, 4)
    tensor([ 7, 10])
    """
    return _fused_multiply_add(*promote(x, a, b))


@functools.singledispatch
def _fused_multiply_add(x, a, b):
    raise TypeError(
        f"fused_multiply_add is not implemented for {type(x).__name__}"
    )


fused_multiply_add.register = _fused_multiply_add.register
fused_multiply_add.dispatch = _fused_multiply_add.dispatch


@_fused_multiply_add.register(int)
@_fused_multiply_add.register(fractions.Fraction)
def _(x, a, b):
    return x * a + b


@_fused_multiply_add.register(float)
def _(x, a, b):
    return math.fma(x, a, b)


@_fused_multiply_add.register(decimal.Decimal)
def _(x, a, b):
    return x.fma(a, b)


@_fused_multiply_add.register(Tensor)
def _(x: Tensor, a: Tensor, b: Tensor) -> Tensor:
    if not is_supported_dtype(x.dtype):
        raise TypeError(f"fused_multiply_add is not defined for {x.dtype}")

    if not x.is_floating_point():
        return x * a + b

    if x.dtype == torch.float64:
        return _compensated_fused_multiply_add(x, a, b)

    return _round_to_odd_fused_multiply_add(x, a, b)


def _split(v: Tensor) -> Tuple[Tensor, Tensor]:
    c = _SPLITTER * v

    high = c - (c - v)

    return high, v - high


def _two_product(x: Tensor, a: Tensor) -> Tuple[Tensor, Tensor]:
    p = x * a

    x_high, x_low = _split(x)
    a_high, a_low = _split(a)

    error = x_low * a_low - (
        ((p - x_high * a_high) - x_low * a_high) - x_high * a_low
    )

    return p, error


def _two_sum(p: Tensor, b: Tensor) -> Tuple[Tensor, Tensor]:
    s = p + b

    z = s - p

    error = (p - (s - z)) + (b - z)

    return s, error


def _round_to_odd(s: Tensor, error: Tensor) -> Tensor:
    # s is the nearest value to s + error; pick the neighbour with an odd
    # last bit wherever s + error is not exactly s.
    inexact = torch.isfinite(error) & (error != 0)

    even = (s.view(_INTEGER_VIEWS[s.dtype]) & 1) == 0

    toward = torch.copysign(torch.full_like(error, math.inf), error)

    return torch.where(
        inexact & even, torch.nextafter(s, toward.to(s.dtype)), s
    )


def _round_to_odd_fused_multiply_add(
    x: Tensor, a: Tensor, b: Tensor
) -> Tensor:
    """Narrow-float multiply-add through float64 rounded to odd.

    The product of two float32, float16 or bfloat16 values is exact in
    float64 and TwoSum gives the exact error of adding ``b``, so the sum can
    be rounded to odd with 53 bits. A value rounded to odd with at least two
    more bits than the working dtype rounds correctly to it. Torch casts
    float64 to float16 and bfloat16 through float32, so for those the value
    is rounded to odd again at 24 bits before the last cast.
    """
    s, error = _two_sum(
        x.to(torch.float64) * a.to(torch.float64), b.to(torch.float64)
    )

    s = _round_to_odd(s, error)

    if x.dtype != torch.float32:
        narrow = s.to(torch.float32)

        s = _round_to_odd(narrow, s - narrow.to(torch.float64))

    return s.to(x.dtype)


def _compensated_fused_multiply_add(x: Tensor, a: Tensor, b: Tensor) -> Tensor:
    """float64 multiply-add from error-free transformations.

    ``x * a == p + e_p`` and ``p + b == s + e_s`` hold exactly, so
    ``s + (e_p + e_s)`` is ``x * a + b`` up to the final rounding and the
    rounding of the (tiny) error sum.

    The split overflows for magnitudes near the float64 limit, and the error
    terms of an infinite or NaN operand are NaN. Wherever the compensated
    value is not finite the plain expression is used, which gives the IEEE
    result for those inputs.
    """
    p, product_error = _two_product(x, a)

    s, sum_error = _two_sum(p, b)

    result = s + (product_error + sum_error)

    return torch.where(torch.isfinite(result), result, x * a + b)
