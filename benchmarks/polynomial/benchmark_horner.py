"""Benchmark Horner evaluation strategies.

Compares the variadic fixed-arity evaluator, the generated unrolled
evaluator and the runtime loop across coefficient counts.
"""

import time

import torch

from torchhorner.polynomial import horner, horner_loop, horner_unrolled


def benchmark_horner(
    n_coefficients: int,
    n_points: int = 10000,
    n_iterations: int = 100,
    device: str = "cpu",
    method: str = "loop",
) -> float:
    """Benchmark evaluation with a given number of coefficients.

    Parameters
    ----------
    n_coefficients : int
        Number of coefficients, i.e. degree + 1.
    n_points : int
        Number of evaluation points.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'variadic', 'unrolled', or 'loop'.

    Returns
    -------
    float
        Average time per evaluation in milliseconds.
    """
    coefficients = torch.randn(
        n_coefficients, device=device, dtype=torch.float64
    )
    x = torch.linspace(-1.0, 1.0, n_points, device=device, dtype=torch.float64)

    unbound = coefficients.unbind(-1)

    if method == "variadic":

        def evaluate():
            return horner(x, *unbound)

    elif method == "unrolled":
        unrolled = horner_unrolled(n_coefficients)

        def evaluate():
            return unrolled(x, *unbound)

    elif method == "loop":

        def evaluate():
            return horner_loop(x, coefficients)

    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(10):
        _ = evaluate()

    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = evaluate()

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run Horner benchmarks across coefficient counts."""
    counts = [1, 2, 4, 6, 8, 16, 32]

    print("Horner Evaluation Benchmark")
    print("=" * 70)
    print(
        f"{'Terms':>8} {'Variadic (ms)':>16} {'Unrolled (ms)':>16} "
        f"{'Loop (ms)':>14}"
    )
    print("-" * 70)

    for count in counts:
        ms_variadic = benchmark_horner(count, method="variadic")
        ms_unrolled = benchmark_horner(count, method="unrolled")
        ms_loop = benchmark_horner(count, method="loop")

        print(
            f"{count:>8} {ms_variadic:>16.4f} {ms_unrolled:>16.4f} "
            f"{ms_loop:>14.4f}"
        )

    print()
    print("Notes:")
    print("- All three issue the same fused multiply-adds in the same order")
    print("- float64 multiply-adds use compensated arithmetic")


if __name__ == "__main__":
    main()
