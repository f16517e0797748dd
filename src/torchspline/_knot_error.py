from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for invalid knot vectors (too few knots, bad spacing or order)."""

    pass
