from typing import Any, Sequence, Union

from torch import Tensor

from torchhorner._fused_multiply_add import fused_multiply_add
from torchhorner.polynomial._empty_coefficients_error import (
    EmptyCoefficientsError,
)


def horner_loop(x: Any, coefficients: Union[Sequence[Any], Tensor]) -> Any:
    """Evaluate a polynomial whose coefficient count is known only at runtime.

    Seeds the accumulator with the leading coefficient and folds the rest in
    from the second-highest power down to the constant term, one fused
    multiply-add each.

    Parameters
    ----------
    x : Any
        Evaluation point.
    coefficients : Sequence or Tensor
        Coefficients in ascending order of power, length ``n >= 1``. A
        tensor holds them in its last dimension, shape (...batch, n), and
        its batch dimensions broadcast with ``x``. The coefficients are only
        read.

    Returns
    -------
    Any
        The polynomial's value at ``x``. With a single coefficient this is
        that coefficient, with no arithmetic performed, whatever ``x`` is.

    Raises
    ------
    EmptyCoefficientsError
        If ``coefficients`` is empty.
    TypeError
        If ``coefficients`` is a zero-dimensional tensor.

    Examples
    --------
    >>> horner_loop(2.0, [1.0, 2.0, 3.0])
    17.0
    >>> x = torch.tensor([0.0, 1.0, 2.0])
    >>> horner_loop(x, torch.tensor([1.0, 2.0, 3.0]))
    tensor([ 1.,  6., 17.])
    """
    if isinstance(coefficients, Tensor):
        if coefficients.dim() == 0:
            raise TypeError(
                "coefficients must have at least one dimension, got a "
                "zero-dimensional tensor"
            )

        n = coefficients.shape[-1]

        coefficients = coefficients.unbind(-1)
    else:
        n = len(coefficients)

    if n < 1:
        raise EmptyCoefficientsError(
            f"coefficients length must be greater than or equal to 1, got {n}"
        )

    result = coefficients[n - 1]

    for i in range(n - 2, -1, -1):
        result = fused_multiply_add(result, x, coefficients[i])

    return result
