"""
Elementary row operations for Gauss-Jordan elimination.

All operations work in place on a float ``numpy.ndarray`` holding an
augmented matrix (coefficients followed by the right-hand side column).
"""

import numpy as np

# Magnitudes below EPSILON are treated as zero
EPSILON = 1e-10

# Returned by find_pivot when a column has no usable pivot
NO_PIVOT = -1


def find_pivot(
    matrix: np.ndarray,
    start_row: int,
    column: int,
    m: int,
    tol: float = EPSILON,
) -> int:
    """
    Partial pivoting search over rows ``[start_row, m)`` of one column.

    Parameters
    ----------
    matrix : ndarray
        Augmented matrix (not modified)
    start_row : int
        First candidate row (inclusive)
    column : int
        Column to search
    m : int
        Row bound (exclusive)
    tol : float
        Smallest magnitude accepted as a pivot

    Returns
    -------
    int
        Row holding the largest ``|matrix[r, column]|`` (first one on ties),
        or ``NO_PIVOT`` if that magnitude is below ``tol``.
    """
    if start_row >= m:
        return NO_PIVOT

    magnitudes = np.abs(matrix[start_row:m, column])
    offset = int(np.argmax(magnitudes))
    if magnitudes[offset] < tol:
        return NO_PIVOT
    return start_row + offset


def find_pivot_diagonal(matrix: np.ndarray, column: int, n: int) -> int:
    """Square-system form: search starts on the diagonal (row == column)."""
    return find_pivot(matrix, column, column, n)


def swap_rows(matrix: np.ndarray, row1: int, row2: int) -> None:
    """Exchange two whole rows."""
    if row1 == row2:
        return
    matrix[[row1, row2]] = matrix[[row2, row1]]


def normalize_row(
    matrix: np.ndarray,
    row: int,
    col: int,
    tol: float = EPSILON,
) -> bool:
    """
    Divide a row by its entry in ``col`` so that entry becomes 1.

    Returns False, leaving the row untouched, when the pivot magnitude
    is below ``tol``.
    """
    pivot = matrix[row, col]
    if abs(pivot) < tol:
        return False
    matrix[row] /= pivot
    return True


def normalize_row_diagonal(matrix: np.ndarray, row: int) -> bool:
    """Square-system form: pivot sits on the diagonal."""
    return normalize_row(matrix, row, row)


def eliminate(
    matrix: np.ndarray,
    pivot_row: int,
    col: int,
    target_row: int,
    tol: float = EPSILON,
) -> None:
    """
    Zero out ``matrix[target_row, col]`` using a normalized pivot row.

    Subtracts ``factor * matrix[pivot_row]`` from the target row, where
    ``factor`` is the target's current value in ``col``. Nothing happens
    for the pivot row itself or when the factor is already below ``tol``.
    """
    if pivot_row == target_row:
        return
    factor = matrix[target_row, col]
    if abs(factor) < tol:
        return
    matrix[target_row] -= factor * matrix[pivot_row]


def eliminate_diagonal(matrix: np.ndarray, pivot_row: int, target_row: int) -> None:
    """Square-system form: eliminates column ``pivot_row``."""
    eliminate(matrix, pivot_row, pivot_row, target_row)
