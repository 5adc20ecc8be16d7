"""
Gauss-Jordan solver.

Delegates the reduction pass to a backend, then classifies the reduced
matrix and extracts the solution.
"""

import numpy as np
from typing import List, Optional

from .elimination import EPSILON
from .._backends.base import (
    SolveResult,
    Unique,
    Infinite,
    Inconsistent,
    SquareSolveResult,
)
from .._utils import check_augmented


def classify_reduced(
    augmented: np.ndarray,
    m: int,
    n: int,
    pivot_columns: List[int],
    tol: float = EPSILON,
) -> SolveResult:
    """
    Classify a matrix already in reduced row-echelon form.

    Parameters
    ----------
    augmented : ndarray
        Reduced augmented matrix
    m, n : int
        Equations and variables
    pivot_columns : list of int
        Pivot columns in discovery order; row i holds the pivot of
        ``pivot_columns[i]``
    tol : float
        Zero tolerance

    Returns
    -------
    SolveResult
        ``Inconsistent`` if any row reads 0 ... 0 | b with b != 0,
        otherwise ``Unique`` (rank == n) or ``Infinite``.
    """
    pivots = tuple(int(c) for c in pivot_columns)
    rank = len(pivots)

    for r in range(m):
        coefficients_zero = np.all(np.abs(augmented[r, :n]) <= tol)
        if coefficients_zero and abs(augmented[r, n]) > tol:
            return Inconsistent(rank=rank, pivot_columns=pivots, row=r)

    # Free variables stay at 0
    x = np.zeros(n, dtype=np.float64)
    for i, col in enumerate(pivots):
        x[col] = augmented[i, n]

    if rank == n:
        return Unique(rank=rank, pivot_columns=pivots, values=x)
    return Infinite(rank=rank, pivot_columns=pivots, values=x)


def solve(
    augmented: np.ndarray,
    m: int,
    n: int,
    tol: Optional[float] = None,
    backend=None,
) -> SolveResult:
    """
    Solve an m x n linear system by Gauss-Jordan elimination.

    The augmented matrix is reduced IN PLACE: on return it holds the
    reduced row-echelon form, rows ordered by pivot discovery. Pass a
    copy if the original is still needed.

    Parameters
    ----------
    augmented : ndarray of float, shape (>= m, >= n + 1)
        Augmented matrix [A | b]; destroyed by the call
    m : int
        Number of equations
    n : int
        Number of variables
    tol : float, optional
        Pivot and zero tolerance (default: EPSILON = 1e-10)
    backend : str or Backend, optional
        Computational backend (default: CPU reference)

    Returns
    -------
    result : Unique, Infinite or Inconsistent
        Unpacks as ``(type, solution, message)``. For infinitely many
        solutions the vector is one particular solution with every free
        variable set to 0; for an inconsistent system it is None.

    Raises
    ------
    TypeError, ValueError
        If the matrix cannot be reduced in place or is too small for
        the given dimensions.

    Examples
    --------
    >>> A = np.array([[1.0, 1.0, 3.0], [2.0, 3.0, 8.0]])
    >>> kind, x, message = solve(A, 2, 2)
    >>> x
    array([1., 2.])
    """
    from .._backends import get_backend
    backend = get_backend('cpu' if backend is None else backend)

    if tol is None:
        tol = EPSILON

    check_augmented(augmented, m, n)

    pivot_columns = backend.reduce(augmented, m, n, tol)
    return classify_reduced(augmented, m, n, pivot_columns, tol)


def solve_square(
    augmented: np.ndarray,
    n: int,
    tol: Optional[float] = None,
    backend=None,
) -> SquareSolveResult:
    """
    Solve a square n x n system; succeed only on a unique solution.

    Any other outcome is reported as a failure carrying the
    classification message in ``error``.
    """
    result = solve(augmented, n, n, tol=tol, backend=backend)
    if not isinstance(result, Unique):
        return SquareSolveResult(success=False, solution=None, error=result.message)
    return SquareSolveResult(success=True, solution=result.values, error=None)
