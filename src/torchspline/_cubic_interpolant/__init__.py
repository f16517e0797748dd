from ._cubic_interpolant import (
    CubicInterpolant,
    cubic_interpolant,
)
from ._cubic_interpolant_derivative import cubic_interpolant_derivative
from ._cubic_interpolant_evaluate import cubic_interpolant_evaluate
from ._cubic_interpolant_fit import cubic_interpolant_fit

__all__ = [
    "CubicInterpolant",
    "cubic_interpolant",
    "cubic_interpolant_derivative",
    "cubic_interpolant_evaluate",
    "cubic_interpolant_fit",
]
