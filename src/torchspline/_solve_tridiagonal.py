import torch
from torch import Tensor


def solve_tridiagonal(
    diag: Tensor,
    upper: Tensor,
    lower: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = b by row normalization and elimination.

    The matrix A has the form:
        [d0  u0   0   0  ...  0   0 ]
        [l0  d1  u1   0  ...  0   0 ]
        [ 0  l1  d2  u2  ...  0   0 ]
        [        ...                ]
        [ 0   0   0   0  ... ln-2 dn-1]

    Parameters
    ----------
    diag : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Upper diagonal, shape (n-1,)
    lower : Tensor
        Lower diagonal, shape (n-1,)
    rhs : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Notes
    -----
    The forward sweep divides row i by its pivot, so that the diagonal
    becomes 1, and then uses the normalized row to cancel the sub-diagonal
    entry of row i + 1. The last row is normalized and the back sweep
    cancels each super-diagonal entry with the already solved unknown
    below it.

    No pivoting is performed. The elimination is accurate when the reduced
    pivots stay away from zero, which holds for the spline systems built
    from strictly ordered abscissas of comparable spacing. A zero pivot
    yields inf or nan in the solution rather than an exception.

    Rows are kept in Python lists instead of being updated in place, so the
    solve is differentiable with respect to every band and the right-hand
    side.
    """
    n = diag.shape[0]

    # (*batch, n) -> (n, *batch)
    rhs_t = rhs.movedim(-1, 0)

    # Normalized super-diagonal and right-hand side of each row
    upper_norm = []
    rhs_norm = []

    pivot = diag[0]
    row_rhs = rhs_t[0]

    for i in range(n - 1):
        upper_norm.append(upper[i] / pivot)
        rhs_norm.append(row_rhs / pivot)

        # Row i + 1 minus lower[i] times the normalized row i
        pivot = diag[i + 1] - lower[i] * upper_norm[i]
        row_rhs = rhs_t[i + 1] - lower[i] * rhs_norm[i]

    x_list = [None] * n
    x_list[n - 1] = row_rhs / pivot

    for i in range(n - 2, -1, -1):
        x_list[i] = rhs_norm[i] - upper_norm[i] * x_list[i + 1]

    x = torch.stack(x_list, dim=0)

    return x.movedim(0, -1)
