from ._degree_error import DegreeError
from ._empty_coefficients_error import EmptyCoefficientsError
from ._horner import horner
from ._horner_loop import horner_loop
from ._horner_unrolled import horner_unrolled
from ._polynomial_error import PolynomialError

__all__ = [
    "DegreeError",
    "EmptyCoefficientsError",
    "PolynomialError",
    "horner",
    "horner_loop",
    "horner_unrolled",
]
