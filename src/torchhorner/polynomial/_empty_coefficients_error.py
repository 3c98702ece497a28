class EmptyCoefficientsError(AssertionError):
    """An empty coefficient sequence was passed to a Horner evaluator.

    The empty polynomial has no value, and returning zero would be
    indistinguishable from evaluating a genuine zero polynomial. Passing
    one is a programming error in the caller, so this is an
    ``AssertionError`` and not a :class:`PolynomialError`.
    """

    pass
