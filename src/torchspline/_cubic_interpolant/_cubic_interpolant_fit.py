from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Sequence, Union

import torch
from torch import Tensor

from .._degenerate_spacing_error import DegenerateSpacingError
from .._insufficient_data_error import InsufficientDataError
from .._knot_error import KnotError
from .._length_mismatch_error import LengthMismatchError
from .._solve_tridiagonal import solve_tridiagonal

if TYPE_CHECKING:
    from ._cubic_interpolant import CubicInterpolant

_EXTRAPOLATE_MODES = ("extend", "clamp", "error")


def cubic_interpolant_fit(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    extrapolate: str = "extend",
) -> CubicInterpolant:
    """
    Fit a cubic interpolant through sample points.

    The knot slopes solve the standard continuity system on interior knots.
    At both ends the slope comes from a three-point formula that couples the
    first (last) two segments, equivalent to the not-a-knot condition.

    Parameters
    ----------
    x : Tensor or sequence of float
        Sample abscissas, shape (n_points,). Must be strictly monotonic,
        increasing or decreasing.
    y : Tensor or sequence of float
        Sample ordinates, shape (n_points,).
    extrapolate : str
        Extrapolation mode: "extend", "clamp", "error".

    Returns
    -------
    CubicInterpolant
        Fitted interpolant. Owns copies of x and y.

    Raises
    ------
    LengthMismatchError
        If x and y have different lengths.
    InsufficientDataError
        If there are fewer than 4 points.
    DegenerateSpacingError
        If two adjacent abscissas are equal.
    KnotError
        If the abscissas change direction.
    ValueError
        If x or y is not 1-D, or extrapolate is unknown.

    Warns
    -----
    RuntimeWarning
        If the slope solve produced non-finite values from finite samples.
    """
    if extrapolate not in _EXTRAPOLATE_MODES:
        raise ValueError(
            f"extrapolate must be one of {_EXTRAPOLATE_MODES}, got {extrapolate!r}"
        )

    x = torch.as_tensor(x)
    y = torch.as_tensor(y)

    dtype = torch.promote_types(x.dtype, y.dtype)
    if not dtype.is_floating_point:
        dtype = torch.get_default_dtype()
    x = x.to(dtype)
    y = y.to(dtype=dtype, device=x.device)

    if x.dim() != 1 or y.dim() != 1:
        raise ValueError(
            f"x and y must be 1-D, got shapes {tuple(x.shape)} and {tuple(y.shape)}"
        )

    n = x.shape[0]

    # Validate samples; the first failing check wins
    if y.shape[0] != n:
        raise LengthMismatchError(
            f"x and y must have the same length, got {n} and {y.shape[0]}"
        )
    if n <= 3:
        raise InsufficientDataError(f"Need at least 4 points, got {n}")

    # Segment widths, (n-1,)
    dx = x[1:] - x[:-1]

    zero_width = torch.nonzero(dx == 0)
    if zero_width.numel() > 0:
        i = zero_width[0, 0].item()
        raise DegenerateSpacingError(
            f"Knots {i} and {i + 1} coincide at x = {x[i].item()}"
        )
    if not (torch.all(dx > 0) or torch.all(dx < 0)):
        raise KnotError("Knots must be strictly monotonic")

    # Secant slope of each segment
    delta = (y[1:] - y[:-1]) / dx

    span_first = x[2] - x[0]
    span_last = x[-1] - x[-3]

    # Right-hand side
    # rhs[i] = 3 * (dx[i] * delta[i-1] + dx[i-1] * delta[i]),  i = 1, ..., n-2
    rhs_interior = 3 * (dx[1:] * delta[:-1] + dx[:-1] * delta[1:])
    rhs_first = (
        (dx[0] + 2 * span_first) * dx[1] * delta[0] + dx[0] ** 2 * delta[1]
    ) / span_first
    rhs_last = (
        dx[-1] ** 2 * delta[-2] + (2 * span_last + dx[-1]) * dx[-2] * delta[-1]
    ) / span_last
    rhs = torch.cat(
        [rhs_first.reshape(1), rhs_interior, rhs_last.reshape(1)]
    )

    # Bands; the end rows mirror each other, each weighted by the width of
    # the segment farther from its boundary and by the two-segment span
    diag = torch.cat([dx[1:2], 2 * (dx[:-1] + dx[1:]), dx[-2:-1]])
    upper = torch.cat([span_first.reshape(1), dx[:-1]])
    lower = torch.cat([dx[1:], span_last.reshape(1)])

    slopes = solve_tridiagonal(diag, upper, lower, rhs)  # (n,)

    if (
        torch.all(torch.isfinite(x))
        and torch.all(torch.isfinite(y))
        and not torch.all(torch.isfinite(slopes))
    ):
        warnings.warn(
            "Knot slopes are not finite. The slope system is solved without "
            "pivoting and needs ordered abscissas of comparable spacing.",
            RuntimeWarning,
            stacklevel=2,
        )

    # Per-segment polynomial d + c*h + bq*h^2 + a*h^3 matching the sample
    # values and knot slopes at both ends of the segment
    dy = y[1:] - y[:-1]
    dzzdx = dy / dx**2 - slopes[:-1] / dx
    dzdxdx = slopes[1:] / dx - dy / dx**2

    a = (dzdxdx - dzzdx) / dx
    bq = 2 * dzzdx - dzdxdx
    c = slopes[:-1]
    d = y[:-1]

    coefficients = torch.stack([a, bq, c, d], dim=1)  # (n-1, 4)

    # Lazy import to avoid circular dependency
    from ._cubic_interpolant import CubicInterpolant

    return CubicInterpolant(
        knots=x.clone(),
        y=y.clone(),
        coefficients=coefficients,
        extrapolate=extrapolate,
        batch_size=[],
    )
