import torch
from torch import Tensor


def locate_segment(knots: Tensor, t: Tensor) -> Tensor:
    """
    Find the segment index of each query point.

    For increasing knots, segment i is the half-open interval
    [knots[i], knots[i+1]). For decreasing knots the interval is mirrored:
    knots[i] >= t > knots[i+1]. Queries before the first knot map to
    segment 0 and queries at or beyond the last knot map to the last
    segment, so the boundary polynomials continue outside the domain.

    Parameters
    ----------
    knots : Tensor
        Strictly monotonic breakpoints, shape (n_knots,).
    t : Tensor
        Query points, any shape.

    Returns
    -------
    Tensor
        Segment indices (int64), same shape as t, in [0, n_knots - 2].

    Notes
    -----
    Binary search gives the same index as scanning segments left to right
    for the first knot beyond t, because the knots are strictly monotonic.
    """
    n_segments = knots.shape[0] - 1

    # searchsorted needs ascending boundaries
    if knots[-1] < knots[0]:
        knots = -knots
        t = -t

    idx = torch.searchsorted(knots, t.reshape(-1), right=True) - 1
    idx = torch.clamp(idx, 0, n_segments - 1)

    return idx.reshape(t.shape)
