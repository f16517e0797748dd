"""Benchmark cubic interpolation.

Times fitting (O(n) slope solve) and evaluation (O(m log n) segment lookup)
across knot counts, and compares the binary-search lookup with a linear
scan over segments.
"""

import time

import torch

from torchspline import cubic_interpolant_evaluate, cubic_interpolant_fit
from torchspline._locate_segment import locate_segment


def _linear_scan(knots: torch.Tensor, t: torch.Tensor) -> torch.Tensor:
    # Count of interior knots at or below each query
    return (t.unsqueeze(-1) >= knots[1:-1]).sum(dim=-1)


def _time(fn, n_iterations: int) -> float:
    # Warmup
    for _ in range(3):
        fn()

    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def benchmark_cubic_interpolant(
    n_knots: int, n_queries: int = 10_000, n_iterations: int = 10
) -> dict:
    """Benchmark fit, evaluate and segment lookup at given knot count.

    Parameters
    ----------
    n_knots : int
        Number of sample points.
    n_queries : int
        Number of query points per evaluation.
    n_iterations : int
        Number of iterations for timing.

    Returns
    -------
    dict
        Average times in milliseconds keyed by operation.
    """
    x = torch.linspace(0, 10, n_knots, dtype=torch.float64)
    y = torch.sin(x)
    t = torch.rand(n_queries, dtype=torch.float64) * 10

    spline = cubic_interpolant_fit(x, y)

    assert torch.equal(locate_segment(x, t), _linear_scan(x, t))

    return {
        "fit": _time(lambda: cubic_interpolant_fit(x, y), n_iterations),
        "evaluate": _time(
            lambda: cubic_interpolant_evaluate(spline, t), n_iterations
        ),
        "binary": _time(lambda: locate_segment(x, t), n_iterations),
        "linear": _time(lambda: _linear_scan(x, t), n_iterations),
    }


def main():
    """Run cubic interpolation benchmarks across knot counts."""
    knot_counts = [8, 32, 128, 512, 2048]

    print("Cubic Interpolant Benchmark")
    print("=" * 70)
    print(
        f"{'Knots':>8} {'Fit (ms)':>12} {'Eval (ms)':>12} "
        f"{'Binary (ms)':>14} {'Linear (ms)':>14}"
    )
    print("-" * 70)

    for n in knot_counts:
        result = benchmark_cubic_interpolant(n)
        print(
            f"{n:>8} {result['fit']:>12.3f} {result['evaluate']:>12.3f} "
            f"{result['binary']:>14.3f} {result['linear']:>14.3f}"
        )


if __name__ == "__main__":
    main()
