import functools
import logging
import numbers
from typing import Any, Callable

from torchhorner._fused_multiply_add import fused_multiply_add
from torchhorner.polynomial._degree_error import DegreeError

logger = logging.getLogger(__name__)


def _unrolled_body(n: int) -> str:
    # For n = 3:
    #     r = fused_multiply_add(a2, x, a1)
    #     r = fused_multiply_add(r, x, a0)
    #     return r
    if n == 1:
        return "    return a0\n"

    lines = [f"    r = fused_multiply_add(a{n - 1}, x, a{n - 2})"]
    for i in range(n - 3, -1, -1):
        lines.append(f"    r = fused_multiply_add(r, x, a{i})")
    lines.append("    return r")

    return "\n".join(lines) + "\n"


@functools.lru_cache(maxsize=None, typed=True)
def horner_unrolled(n: int) -> Callable[..., Any]:
    """Build a Horner evaluator for exactly ``n`` coefficients.

    The returned function takes ``(x, a0, ..., a{n-1})`` and its body is
    ``n - 1`` straight-line fused multiply-adds: no loop, no branch and no
    recursion at evaluation time. Evaluators are generated once per ``n``
    and cached.

    Parameters
    ----------
    n : int
        Number of coefficients, i.e. degree + 1. Must be at least 1.

    Returns
    -------
    Callable
        ``horner_<n>(x, a0, ..., a{n-1})``. Calling it with any other number
        of coefficients raises ``TypeError``.

    Raises
    ------
    DegreeError
        If ``n`` is not an integer greater than or equal to 1.

    Examples
    --------
    >>> evaluate = horner_unrolled(3)
    >>> evaluate(2.0, 1.0, 2.0, 3.0)
    17.0
    >>> horner_unrolled(1)(float("nan"), 5.0)
    5.0
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise DegreeError(
            f"number of coefficients must be an integer, "
            f"got {type(n).__name__}"
        )

    if n < 1:
        raise DegreeError(
            f"number of coefficients must be greater than or equal to 1, "
            f"got {n}"
        )

    n = int(n)

    name = f"horner_{n}"

    parameters = ", ".join(f"a{i}" for i in range(n))

    source = f"def {name}(x, {parameters}):\n" + _unrolled_body(n)

    logger.debug("generated unrolled evaluator:\n%s", source)

    namespace = {"fused_multiply_add": fused_multiply_add}

    exec(compile(source, f"<{name}>", "exec"), namespace)

    function = namespace[name]

    function.__module__ = __name__
    function.__qualname__ = f"horner_unrolled.<locals>.{name}"
    function.__doc__ = (
        f"Evaluate a0 + a1*x + ... + a{n - 1}*x^{n - 1} by Horner's rule."
    )

    return function
