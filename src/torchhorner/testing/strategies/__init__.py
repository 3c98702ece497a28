"""Hypothesis strategies for Horner evaluation testing."""

from ._coefficients import coefficients
from ._dtypes import floating_dtypes, integer_dtypes
from ._real_numbers import real_numbers
from ._small_integers import small_integers

__all__ = [
    # Numeric strategies
    "real_numbers",
    "small_integers",
    # Coefficient strategies
    "coefficients",
    # Dtype strategies
    "floating_dtypes",
    "integer_dtypes",
]
