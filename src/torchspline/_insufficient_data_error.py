from ._knot_error import KnotError


class InsufficientDataError(KnotError):
    """Raised when fewer than four samples are given."""

    pass
