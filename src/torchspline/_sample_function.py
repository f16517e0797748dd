import math
from typing import Callable, Optional, Tuple

import torch
from torch import Tensor


def sample_function(
    f: Callable[[Tensor], Tensor],
    left: float,
    right: float,
    step: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Sample a function on an evenly spaced grid.

    x[k] = left + k * step for k = 0, 1, ..., K with x[K] <= right

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Function to sample. Called once with the full grid.
    left : float
        First abscissa.
    right : float
        Upper bound of the grid (inclusive).
    step : float
        Grid spacing. Must be positive.
    dtype : torch.dtype, optional
        The desired data type of returned tensors.
    device : torch.device, optional
        The desired device of returned tensors.

    Returns
    -------
    x : Tensor
        Grid, shape (K + 1,).
    y : Tensor
        f(x), shape (K + 1,).

    Raises
    ------
    ValueError
        If step is not positive or right < left.

    Notes
    -----
    The grid size comes from the sample count rather than from repeatedly
    adding step, so rounding cannot drop the final point: a point within
    1e-9 steps of right is kept.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if right < left:
        raise ValueError(f"right must not be less than left, got [{left}, {right}]")

    if dtype is None:
        dtype = torch.get_default_dtype()

    count = math.floor((right - left) / step + 1e-9) + 1

    x = left + step * torch.arange(count, dtype=dtype, device=device)
    y = torch.as_tensor(f(x), dtype=dtype, device=device)

    return x, y
