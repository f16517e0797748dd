"""torchspline: differentiable cubic interpolation for PyTorch tensors.

Convenience Functions
---------------------
cubic_interpolant
    Create a cubic interpolator from data (fit + callable).
sample_function
    Sample a function on an evenly spaced grid.

Cubic Interpolation
-------------------
cubic_interpolant_fit
    Fit a cubic interpolant to data points.
cubic_interpolant_evaluate
    Evaluate a cubic interpolant at query points.
cubic_interpolant_derivative
    Evaluate derivatives of a cubic interpolant.

Data Types
----------
CubicInterpolant
    Piecewise cubic polynomial through every sample point.

Exceptions
----------
SplineError
    Base exception for spline operations.
LengthMismatchError
    Abscissas and ordinates differ in length.
KnotError
    Invalid knot vector.
InsufficientDataError
    Fewer than four samples.
DegenerateSpacingError
    Two adjacent abscissas are equal.
ExtrapolationError
    Query point outside spline domain.
"""

from ._cubic_interpolant import (
    CubicInterpolant,
    cubic_interpolant,
    cubic_interpolant_derivative,
    cubic_interpolant_evaluate,
    cubic_interpolant_fit,
)
from ._degenerate_spacing_error import DegenerateSpacingError
from ._extrapolation_error import ExtrapolationError
from ._insufficient_data_error import InsufficientDataError
from ._knot_error import KnotError
from ._length_mismatch_error import LengthMismatchError
from ._sample_function import sample_function
from ._spline_error import SplineError

__all__ = [
    "CubicInterpolant",
    "DegenerateSpacingError",
    "ExtrapolationError",
    "InsufficientDataError",
    "KnotError",
    "LengthMismatchError",
    "SplineError",
    "cubic_interpolant",
    "cubic_interpolant_derivative",
    "cubic_interpolant_evaluate",
    "cubic_interpolant_fit",
    "sample_function",
]

__version__ = "0.1.0"
