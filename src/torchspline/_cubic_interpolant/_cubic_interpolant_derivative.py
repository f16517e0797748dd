from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._cubic_interpolant_evaluate import _query_points

if TYPE_CHECKING:
    from ._cubic_interpolant import CubicInterpolant


def cubic_interpolant_derivative(
    spline: CubicInterpolant,
    t: Union[Tensor, float],
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a cubic interpolant at query points.

    Parameters
    ----------
    spline : CubicInterpolant
        Fitted interpolant from cubic_interpolant_fit
    t : Tensor or float
        Query points, shape (*query_shape) or scalar
    order : int
        Order of derivative (1, 2, or 3). Default is 1.

    Returns
    -------
    Tensor
        Derivative values, shape (*query_shape).

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.
    ExtrapolationError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'

    Notes
    -----
    For y = d + c*h + bq*h^2 + a*h^3:
    - First derivative: y' = c + 2*bq*h + 3*a*h^2
    - Second derivative: y'' = 2*bq + 6*a*h
    - Third derivative: y''' = 6*a

    At a knot the value is taken from the segment starting there, or from
    the last segment at the final knot.
    """
    if order < 1 or order > 3:
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")

    coeffs = spline.coefficients

    _, segment_idx, h, query_shape, is_scalar = _query_points(spline, t)

    a = coeffs[segment_idx, 0]
    bq = coeffs[segment_idx, 1]
    c = coeffs[segment_idx, 2]

    if order == 1:
        dy = c + h * (2 * bq + h * 3 * a)
    elif order == 2:
        dy = 2 * bq + h * 6 * a
    else:  # order == 3
        dy = 6 * a + torch.zeros_like(h)

    dy = dy.view(*query_shape)

    if is_scalar:
        dy = dy.squeeze(0)

    return dy
