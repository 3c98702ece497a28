"""Tests for torch.vmap compatibility of Horner evaluation."""

import torch
from torch.func import vmap

from torchhorner.polynomial import horner, horner_loop


class TestHornerVmap:
    """Tests for torch.vmap with Horner evaluators."""

    def test_horner_loop_vmap_over_coefficients(self):
        """vmap horner_loop over a batch of coefficient vectors."""
        batched = vmap(horner_loop, in_dims=(None, 0))

        coefficients = torch.randn(4, 3, dtype=torch.float64)
        x = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        result = batched(x, coefficients)

        assert result.shape == (4, 3)

        expected = torch.stack([horner_loop(x, c) for c in coefficients])

        torch.testing.assert_close(result, expected)

    def test_horner_vmap_over_points(self):
        """vmap horner over evaluation points."""

        def evaluate(x):
            return horner(x, 1.0, 2.0, 3.0)

        x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)

        result = vmap(evaluate)(x)

        torch.testing.assert_close(
            result, torch.tensor([1.0, 6.0, 17.0], dtype=torch.float64)
        )
