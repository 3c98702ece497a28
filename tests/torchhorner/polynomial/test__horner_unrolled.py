"""Tests for generated unrolled Horner evaluators."""

import pytest
import torch

from torchhorner.polynomial import (
    DegreeError,
    PolynomialError,
    horner,
    horner_loop,
    horner_unrolled,
)


class TestHornerUnrolled:
    """Tests for horner_unrolled()."""

    def test_three_coefficients(self):
        evaluate = horner_unrolled(3)

        assert evaluate(2.0, 1.0, 2.0, 3.0) == 17.0
        assert evaluate(2, 1, 2, 3) == 17

    def test_nine_coefficients(self):
        evaluate = horner_unrolled(9)

        assert evaluate(2, 1, 2, 3, 4, 5, 6, 7, 8, 9) == 4097
        assert evaluate(2.0, *(float(i) for i in range(1, 10))) == 4097.0

    def test_single_coefficient_is_returned_unchanged(self):
        sentinel = object()

        assert horner_unrolled(1)(float("nan"), sentinel) is sentinel

    def test_name(self):
        assert horner_unrolled(6).__name__ == "horner_6"

    def test_cached(self):
        assert horner_unrolled(6) is horner_unrolled(6)

    def test_keyword_coefficients(self):
        evaluate = horner_unrolled(2)

        assert evaluate(x=3.0, a0=1.0, a1=2.0) == 7.0

    def test_matches_horner(self):
        coefficients = (0.5, -1.25, 3.0, 0.125, -2.0)

        evaluate = horner_unrolled(len(coefficients))

        assert evaluate(1.7, *coefficients) == horner(1.7, *coefficients)

    def test_tensor_point(self):
        x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)

        result = horner_unrolled(3)(x, 1.0, 2.0, 3.0)

        torch.testing.assert_close(
            result, torch.tensor([1.0, 6.0, 17.0], dtype=torch.float64)
        )

    @pytest.mark.parametrize("count", [2, 4])
    def test_wrong_coefficient_count_raises(self, count):
        evaluate = horner_unrolled(3)

        with pytest.raises(TypeError):
            evaluate(2.0, *([1.0] * count))


class TestHornerUnrolledErrors:
    """Tests for invalid coefficient counts."""

    @pytest.mark.parametrize("n", [0, -1])
    def test_too_few_coefficients(self, n):
        with pytest.raises(DegreeError, match=f"got {n}"):
            horner_unrolled(n)

    @pytest.mark.parametrize("n", [2.0, 2.5, True])
    def test_non_integer(self, n):
        with pytest.raises(DegreeError, match="integer"):
            horner_unrolled(n)

    def test_non_integer_after_cached_integer(self):
        horner_unrolled(3)

        with pytest.raises(DegreeError):
            horner_unrolled(3.0)

    def test_degree_error_is_value_error(self):
        with pytest.raises(ValueError):
            horner_unrolled(0)

    def test_degree_error_is_polynomial_error(self):
        with pytest.raises(PolynomialError):
            horner_unrolled(0)


class TestHornerUnrolledManyCoefficients:
    """Generated evaluators do not nest, so any count compiles."""

    @pytest.mark.parametrize("n", [300, 500])
    def test_matches_horner_loop_integer(self, n):
        coefficients = list(range(1, n + 1))

        result = horner_unrolled(n)(-1, *coefficients)

        assert result == horner_loop(-1, coefficients)

    def test_matches_horner_loop_float(self):
        coefficients = [1.0 / (i + 1) for i in range(500)]

        result = horner_unrolled(500)(0.99, *coefficients)

        assert result == horner_loop(0.99, coefficients)
