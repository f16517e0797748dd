from ._spline_error import SplineError


class LengthMismatchError(SplineError):
    """Raised when abscissas and ordinates have different lengths."""

    pass
