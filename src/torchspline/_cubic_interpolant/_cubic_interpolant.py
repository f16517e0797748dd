"""Cubic interpolation through sampled data."""

from typing import Callable, Sequence, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._cubic_interpolant_evaluate import cubic_interpolant_evaluate
from ._cubic_interpolant_fit import cubic_interpolant_fit


@tensorclass
class CubicInterpolant:
    """Piecewise cubic polynomial through every sample point.

    Attributes
    ----------
    knots : Tensor
        Sample abscissas, shape (n_knots,). Strictly monotonic.
    y : Tensor
        Sample ordinates, shape (n_knots,). Returned verbatim when a query
        lands exactly on a knot.
    coefficients : Tensor
        Segment coefficients, shape (n_segments, 4). For segment i,
        coefficients[i] = [a, bq, c, d] and the polynomial is:
        d + c*h + bq*h^2 + a*h^3, with h = t - knots[i]
        so c is the knot slope and d the sample value at knots[i].
    extrapolate : str
        Extrapolation mode: "extend", "clamp", "error".
    """

    knots: Tensor
    y: Tensor
    coefficients: Tensor
    extrapolate: str


def cubic_interpolant(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    extrapolate: str = "extend",
) -> Callable[[Union[Tensor, float]], Tensor]:
    """Create a cubic interpolator from sample data.

    This fits the interpolant once and returns a callable that evaluates it.
    The callable only exists after a successful fit; invalid samples raise
    from here instead.

    Parameters
    ----------
    x : Tensor or sequence of float
        Sample abscissas, at least 4, strictly monotonic.
    y : Tensor or sequence of float
        Sample ordinates, same length as x.
    extrapolate : str, optional
        How to handle out-of-domain queries. One of:

        - ``"extend"``: Continue the boundary segment's polynomial (default).
        - ``"clamp"``: Clamp to boundary values.
        - ``"error"``: Raise ExtrapolationError.

    Returns
    -------
    interpolant : Callable[[Tensor], Tensor]
        Function that evaluates the interpolant at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(-2, 0.5, 6, dtype=torch.float64)
    >>> f = cubic_interpolant(x, x**2 * torch.exp(-(x**2)))
    >>> f(-1.5)
    tensor(0.2371, dtype=torch.float64)
    """
    fitted = cubic_interpolant_fit(x, y, extrapolate=extrapolate)
    return lambda t: cubic_interpolant_evaluate(fitted, t)
