"""Numeric types that support a fused multiply-add."""

import decimal
import fractions
import numbers
from typing import Any, Tuple

import torch
from torch import Tensor

INTEGER_DTYPES = (
    torch.uint8,
    torch.int8,
    torch.int16,
    torch.int32,
    torch.int64,
)

FLOATING_DTYPES = (
    torch.float16,
    torch.bfloat16,
    torch.float32,
    torch.float64,
)


def is_supported_dtype(dtype: torch.dtype) -> bool:
    """Whether tensors of ``dtype`` have a fused multiply-add."""
    return dtype in INTEGER_DTYPES or dtype in FLOATING_DTYPES


def supports_fused_multiply_add(value: Any) -> bool:
    """Whether ``value`` can be an operand of ``fused_multiply_add``.

    Parameters
    ----------
    value : Any
        Candidate operand.

    Returns
    -------
    bool
        True for supported Python numbers, tensors of a supported dtype and
        instances of types registered with ``fused_multiply_add.register``.

    Examples
    --------
    >>> supports_fused_multiply_add(2.0)
    True
    >>> supports_fused_multiply_add(torch.tensor([True]))
    False
    """
    from ._fused_multiply_add import fused_multiply_add

    if isinstance(value, Tensor):
        return is_supported_dtype(value.dtype)

    if isinstance(value, complex):
        return False

    implementation = fused_multiply_add.dispatch(type(value))

    return implementation is not fused_multiply_add.dispatch(object)


def _tensor_dtype(operands: Tuple[Any, ...]) -> torch.dtype:
    tensors = [operand for operand in operands if isinstance(operand, Tensor)]

    dtype = tensors[0].dtype
    for tensor in tensors[1:]:
        dtype = torch.promote_types(dtype, tensor.dtype)

    # Python scalars rank below tensors of the same category, so an int
    # does not widen a uint8 tensor but a float does turn an int tensor
    # floating.
    for operand in operands:
        if not isinstance(operand, Tensor):
            dtype = torch.result_type(torch.empty((), dtype=dtype), operand)

    return dtype


def promote(x: Any, a: Any, b: Any) -> Tuple[Any, Any, Any]:
    """Convert three operands to a single numeric type.

    Parameters
    ----------
    x, a, b : Any
        Operands of ``x * a + b``.

    Returns
    -------
    tuple
        The operands, all of one type (one dtype and device for tensors).

    Raises
    ------
    TypeError
        If the operands cannot be unified, e.g. a ``Decimal`` with a
        ``float``, or a ``complex`` operand.

    Notes
    -----
    Rules, in order:

    1. any tensor: every operand becomes a tensor of the promoted dtype on
       the device of the first tensor operand;
    2. any ``Decimal``: the others must be integers;
    3. any ``float``: every operand becomes a ``float``;
    4. any non-integer rational: every operand becomes a ``Fraction``;
    5. all integral: unchanged;
    6. three operands of one identical type: unchanged.
    """
    operands = (x, a, b)

    if any(isinstance(operand, complex) for operand in operands):
        raise TypeError(
            "fused_multiply_add does not support complex operands"
        )

    if any(isinstance(operand, Tensor) for operand in operands):
        dtype = _tensor_dtype(operands)

        device = next(
            operand.device
            for operand in operands
            if isinstance(operand, Tensor)
        )

        x, a, b = (
            operand.to(dtype=dtype, device=device)
            if isinstance(operand, Tensor)
            else torch.as_tensor(operand, dtype=dtype, device=device)
            for operand in operands
        )

        return x, a, b

    if any(isinstance(operand, decimal.Decimal) for operand in operands):
        if not all(
            isinstance(operand, (decimal.Decimal, numbers.Integral))
            for operand in operands
        ):
            raise TypeError(
                f"cannot mix Decimal with "
                f"{', '.join(sorted({type(o).__name__ for o in operands}))}"
            )

        x, a, b = (decimal.Decimal(operand) for operand in operands)

        return x, a, b

    if all(isinstance(operand, numbers.Real) for operand in operands):
        if any(isinstance(operand, float) for operand in operands):
            x, a, b = (float(operand) for operand in operands)

            return x, a, b

        if all(isinstance(operand, numbers.Integral) for operand in operands):
            return x, a, b

        if all(isinstance(operand, numbers.Rational) for operand in operands):
            x, a, b = (fractions.Fraction(operand) for operand in operands)

            return x, a, b

    if type(x) is type(a) is type(b):
        return x, a, b

    raise TypeError(
        f"cannot unify operands of types "
        f"{type(x).__name__}, {type(a).__name__}, {type(b).__name__}"
    )
