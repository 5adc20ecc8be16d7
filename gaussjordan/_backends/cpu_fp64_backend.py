"""
CPU backend using NumPy.

This is the reference implementation: one row operation at a time,
directly on the caller's array.
"""

import numpy as np
from typing import List

from .base import CPUBackend
from .._core.elimination import (
    NO_PIVOT,
    find_pivot,
    swap_rows,
    normalize_row,
    eliminate,
)


class CPUBackendFP64(CPUBackend):
    """
    CPU backend using NumPy.

    Reference implementation of the reduction pass.
    Always uses FP64 precision.
    """

    def __init__(self):
        self.name = "cpu_fp64"
        self.precision = "fp64"

    def reduce(
        self,
        augmented: np.ndarray,
        m: int,
        n: int,
        tol: float,
    ) -> List[int]:
        """
        Gauss-Jordan reduction with partial pivoting.

        Columns without a usable pivot are skipped; the row cursor only
        advances when a column yields a pivot.
        """
        row = 0
        pivot_cols = []

        for col in range(n):
            if row >= m:
                break

            p_row = find_pivot(augmented, row, col, m, tol=tol)
            if p_row == NO_PIVOT:
                continue  # free column

            swap_rows(augmented, row, p_row)
            if not normalize_row(augmented, row, col, tol=tol):
                continue

            # Full reduction: clear the column above and below the pivot
            for r in range(m):
                eliminate(augmented, row, col, r, tol=tol)

            pivot_cols.append(col)
            row += 1

        return pivot_cols

    def get_device_info(self) -> dict:
        """Get backend information."""
        return {
            'backend': 'cpu',
            'precision': 'fp64',
            'library': f'NumPy {np.__version__}',
        }
