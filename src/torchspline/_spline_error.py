class SplineError(Exception):
    """Base exception for spline construction and evaluation."""

    pass
