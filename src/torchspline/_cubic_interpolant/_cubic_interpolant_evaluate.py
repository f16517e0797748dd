from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError
from .._locate_segment import locate_segment

if TYPE_CHECKING:
    from ._cubic_interpolant import CubicInterpolant


def _query_points(
    spline: CubicInterpolant,
    t: Union[Tensor, float],
) -> Tuple[Tensor, Tensor, Tensor, torch.Size, bool]:
    """Flatten queries, apply the extrapolation mode and locate segments.

    Returns the flat queries, their segment indices, the offsets from the
    segment's left knot, the query shape and whether the input was scalar.
    """
    knots = spline.knots
    extrapolate = spline.extrapolate

    t = torch.as_tensor(t, dtype=knots.dtype, device=knots.device)

    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten()

    # Knots may be decreasing
    t_min = torch.minimum(knots[0], knots[-1])
    t_max = torch.maximum(knots[0], knots[-1])

    if extrapolate == "error":
        if torch.any(t_flat < t_min) or torch.any(t_flat > t_max):
            raise ExtrapolationError(
                f"Query points outside spline domain [{t_min.item()}, {t_max.item()}]"
            )
    elif extrapolate == "clamp":
        t_flat = torch.clamp(t_flat, t_min, t_max)

    segment_idx = locate_segment(knots, t_flat)
    h = t_flat - knots[segment_idx]

    return t_flat, segment_idx, h, query_shape, is_scalar


def cubic_interpolant_evaluate(
    spline: CubicInterpolant,
    t: Union[Tensor, float],
) -> Tensor:
    """
    Evaluate a cubic interpolant at query points.

    Parameters
    ----------
    spline : CubicInterpolant
        Fitted interpolant from cubic_interpolant_fit
    t : Tensor or float
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape). A scalar query gives a
        0-d tensor.

    Raises
    ------
    ExtrapolationError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'

    Notes
    -----
    A query equal to a knot returns that knot's sample value unchanged,
    with the segment slope as its gradient.
    Queries outside the domain with extrapolate='extend' evaluate the first
    or last segment's cubic, which diverges from the data the farther the
    query lies from the domain.
    """
    knots = spline.knots
    samples = spline.y
    coeffs = spline.coefficients

    t_flat, segment_idx, h, query_shape, is_scalar = _query_points(spline, t)

    a = coeffs[segment_idx, 0]
    bq = coeffs[segment_idx, 1]
    c = coeffs[segment_idx, 2]
    d = coeffs[segment_idx, 3]

    # Horner's method: y = d + h*(c + h*(bq + h*a))
    y = d + h * (c + h * (bq + h * a))

    # Knot hits bypass the polynomial; the last knot is the right end of
    # the last segment. The tangent term is zero in value and carries the
    # segment slope to the gradient with respect to t.
    slope = c + h * (2 * bq + 3 * h * a)
    tangent = (h - h.detach()) * slope

    y = torch.where(
        t_flat == knots[segment_idx + 1],
        samples[segment_idx + 1] + tangent,
        y,
    )
    y = torch.where(
        t_flat == knots[segment_idx], samples[segment_idx] + tangent, y
    )

    y = y.view(*query_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y
