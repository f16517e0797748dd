from ._knot_error import KnotError


class DegenerateSpacingError(KnotError):
    """Raised when two adjacent abscissas are equal (zero-width segment)."""

    pass
