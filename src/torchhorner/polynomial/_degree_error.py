from torchhorner.polynomial._polynomial_error import PolynomialError


class DegreeError(PolynomialError, ValueError):
    """Raised when a coefficient count is invalid for an evaluator.

    Raised while an unrolled evaluator is being built, never while one
    runs.
    """

    pass
