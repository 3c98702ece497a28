from typing import Any

from torchhorner._fused_multiply_add import fused_multiply_add


def horner(x: Any, a0: Any, *coefficients: Any) -> Any:
    """Evaluate a polynomial with a fixed number of coefficients.

    Computes ``a0 + a1*x + ... + an*x^n`` as the nested expression
    ``(...(an*x + an-1)*x + ... + a1)*x + a0``, one fused multiply-add per
    coefficient after the first. The nest is folded from the inside out, so
    there is no recursion and no limit on the number of coefficients.

    Parameters
    ----------
    x : Any
        Evaluation point. Python evaluates it once, before the call, however
        many coefficients follow.
    a0 : Any
        Constant coefficient.
    *coefficients : Any
        ``a1, ..., an`` in ascending order of power.

    Returns
    -------
    Any
        The polynomial's value at ``x``. With only ``a0`` this is ``a0``
        itself, with no arithmetic performed.

    Examples
    --------
    >>> horner(2.0, 1.0, 2.0, 3.0)  # 1 + 2x + 3x^2
    17.0
    >>> horner(2, 1, 3, 0, 5, 0, 1)
    79
    >>> horner(torch.tensor([0.0, 1.0, 2.0]), 1.0, 2.0, 3.0)
    tensor([ 1.,  6., 17.])
    """
    if not coefficients:
        return a0

    # Innermost multiply-add of the nested form first, so the order matches
    # horner_loop and horner_unrolled exactly.
    result = coefficients[-1]
    for coefficient in reversed(coefficients[:-1]):
        result = fused_multiply_add(result, x, coefficient)

    return fused_multiply_add(result, x, a0)
