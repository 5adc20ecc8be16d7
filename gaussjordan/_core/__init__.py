"""
Core algorithms (backend-agnostic).
"""

from .elimination import (
    EPSILON,
    NO_PIVOT,
    find_pivot,
    find_pivot_diagonal,
    swap_rows,
    normalize_row,
    normalize_row_diagonal,
    eliminate,
    eliminate_diagonal,
)
from .solver import solve, solve_square, classify_reduced

__all__ = [
    "EPSILON",
    "NO_PIVOT",
    "find_pivot",
    "find_pivot_diagonal",
    "swap_rows",
    "normalize_row",
    "normalize_row_diagonal",
    "eliminate",
    "eliminate_diagonal",
    "solve",
    "solve_square",
    "classify_reduced",
]
