"""Hypothesis strategies for spline testing."""

from ._positive_real_numbers import positive_real_numbers
from ._real_numbers import real_numbers
from ._sample_sets import sample_sets

__all__ = [
    "positive_real_numbers",
    "real_numbers",
    "sample_sets",
]
