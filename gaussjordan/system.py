"""
Linear systems with a pandas-friendly interface and printed summaries.

This is the user-facing API: it never destroys the caller's data.
"""

import numpy as np
import pandas as pd
import warnings
from typing import List, Optional, Union

from ._backends import get_backend, SolutionType, Infinite
from ._backends.conditioning import check_conditioning as conditioning_report
from ._core.elimination import EPSILON
from ._core.solver import solve
from ._utils import check_array, check_vector


class LinearSystem:
    """
    Solve and classify a linear system A x = b by Gauss-Jordan elimination.

    Examples
    --------
    >>> from gaussjordan import LinearSystem
    >>>
    >>> # From an augmented matrix
    >>> system = LinearSystem([[1, 1, 3], [2, 3, 8]])
    >>> system.solution
    x1    1.0
    x2    2.0
    dtype: float64
    >>>
    >>> # From a DataFrame: one column per variable plus a right-hand side
    >>> df = pd.DataFrame({'a': [1, 2], 'b': [1, 3], 'rhs': [3, 8]})
    >>> system = LinearSystem(data=df, rhs='rhs')
    >>> system.summary()
    """

    def __init__(
        self,
        augmented: Optional[Union[np.ndarray, List[List[float]]]] = None,
        A: Optional[np.ndarray] = None,
        b: Optional[np.ndarray] = None,
        data: Optional[pd.DataFrame] = None,
        rhs: Optional[str] = None,
        var_names: Optional[List[str]] = None,
        backend: str = 'cpu',
        tol: Optional[float] = None,
        check_conditioning: bool = True,
    ):
        """
        Build and solve a linear system.

        Parameters
        ----------
        augmented : array-like, shape (m, n + 1), optional
            Augmented matrix [A | b]
        A : array-like, shape (m, n), optional
            Coefficient matrix (use together with b)
        b : array-like, shape (m,), optional
            Right-hand side
        data : DataFrame, optional
            One column per variable plus the right-hand side column
        rhs : str, optional
            Name of the right-hand side column in data
        var_names : list of str, optional
            Variable names (default: x1..xn, or the DataFrame columns)
        backend : str
            Computational backend: 'cpu', 'pytorch', 'gpu'
        tol : float, optional
            Pivot tolerance (default: 1e-10)
        check_conditioning : bool
            Warn when the coefficient block is ill-conditioned or when
            the SVD rank disagrees with the elimination rank

        Exactly one of ``augmented``, ``A``/``b`` or ``data``/``rhs``
        must be given.
        """
        sources = [augmented is not None, A is not None or b is not None, data is not None]
        if sum(sources) != 1:
            raise ValueError("Provide exactly one of augmented, A/b, or data/rhs")

        # Parse inputs
        if data is not None:
            if rhs is None:
                raise ValueError("Must provide rhs when data is given")
            if rhs not in data.columns:
                raise ValueError(f"Column '{rhs}' not found in data")
            coef_cols = [c for c in data.columns if c != rhs]
            A_values = check_array(data[coef_cols].values, name='data')
            b_values = check_vector(data[rhs].values, name=rhs)
            names = [str(c) for c in coef_cols]
        elif augmented is not None:
            aug = check_array(augmented, name='augmented')
            if aug.shape[1] < 1:
                raise ValueError("augmented must have at least one column (the right-hand side)")
            A_values = aug[:, :-1]
            b_values = aug[:, -1]
            names = None
        else:
            if A is None or b is None:
                raise ValueError("Must provide both A and b")
            A_values = check_array(A, name='A')
            b_values = check_vector(b, name='b')
            if A_values.shape[0] != b_values.shape[0]:
                raise ValueError(
                    f"A has {A_values.shape[0]} rows but b has {b_values.shape[0]} entries"
                )
            names = None

        # Store metadata
        self.n_equations, self.n_variables = A_values.shape
        if var_names is not None:
            names = list(var_names)
        if names is None:
            names = [f'x{j + 1}' for j in range(self.n_variables)]
        if len(names) != self.n_variables:
            raise ValueError(
                f"Got {len(names)} variable names for {self.n_variables} variables"
            )
        self.var_names = names

        self.A = A_values.copy()
        self.b = b_values.copy()
        self.tol = EPSILON if tol is None else tol

        # Solve a private copy using the backend
        self.backend = get_backend(backend)
        self._reduced = np.column_stack([self.A, self.b]).astype(np.float64)
        self._result = solve(
            self._reduced, self.n_equations, self.n_variables,
            tol=self.tol, backend=self.backend
        )

        self.conditioning = None
        if check_conditioning:
            self._check_conditioning()

    def _check_conditioning(self):
        """Warn about numerically fragile systems."""
        report = conditioning_report(self.A)
        self.conditioning = report

        for message in report['warnings']:
            warnings.warn(message, UserWarning)

        if report['numerical_rank'] != self.rank:
            warnings.warn(
                f"Elimination rank {self.rank} differs from SVD rank "
                f"{report['numerical_rank']}; classification depends on the "
                f"pivot tolerance ({self.tol:g}).",
                UserWarning
            )

    @property
    def result(self):
        """Raw solver result (Unique, Infinite or Inconsistent)."""
        return self._result

    @property
    def type(self) -> SolutionType:
        return self._result.type

    @property
    def message(self) -> str:
        return self._result.message

    @property
    def rank(self) -> int:
        return self._result.rank

    @property
    def is_consistent(self) -> bool:
        return self.type is not SolutionType.INCONSISTENT

    @property
    def pivot_columns(self) -> List[str]:
        """Names of the variables that received a pivot."""
        return [self.var_names[j] for j in self._result.pivot_columns]

    @property
    def free_variables(self) -> List[str]:
        """Names of the free variables (empty unless infinitely many solutions)."""
        if not isinstance(self._result, Infinite):
            return []
        return [self.var_names[j] for j in self._result.free_columns]

    @property
    def values(self) -> Optional[np.ndarray]:
        """Solution vector as an array (None if inconsistent)."""
        return self._result.solution

    @property
    def solution(self) -> Optional[pd.Series]:
        """Named solution (pandas Series), None if inconsistent."""
        if self.values is None:
            return None
        return pd.Series(self.values, index=self.var_names)

    @property
    def residuals(self) -> Optional[np.ndarray]:
        """A x - b for the returned solution (None if inconsistent)."""
        if self.values is None:
            return None
        return self.A @ self.values - self.b

    @property
    def reduced(self) -> pd.DataFrame:
        """Reduced row-echelon form of [A | b]."""
        return pd.DataFrame(self._reduced, columns=self.var_names + ['rhs'])

    def summary(self, digits: int = 6):
        """Print a summary of the system and its solution."""
        print()
        print("=" * 60)
        print("LINEAR SYSTEM (GAUSS-JORDAN)")
        print("=" * 60)
        print()

        print(f"Equations: {self.n_equations}")
        print(f"Variables: {self.n_variables}")
        print(f"Rank:      {self.rank}")
        print(f"Type:      {self.type.value}")
        print()
        print(self.message)

        if self.values is not None:
            print()
            print("Solution" + (" (particular, free variables = 0)"
                                if self.free_variables else "") + ":")
            print("-" * 60)
            for name, value in zip(self.var_names, self.values):
                tag = "  (free)" if name in self.free_variables else ""
                print(f"  {name:<20} {value:>16.{digits}g}{tag}")
            print("-" * 60)
            print(f"Max |residual|: {np.max(np.abs(self.residuals), initial=0.0):.3e}")

        print()
        print(f"Backend: {self.backend.name}")
        print("=" * 60)
        print()

    def __repr__(self):
        return (
            f"LinearSystem(m={self.n_equations}, n={self.n_variables}, "
            f"rank={self.rank}, type={self.type.value})"
        )


def solve_system(augmented=None, **kwargs):
    """
    Solve a linear system (convenience function).

    Parameters
    ----------
    augmented : array-like, optional
        Augmented matrix [A | b]
    **kwargs
        Additional arguments passed to LinearSystem (A, b, data, rhs, ...)

    Returns
    -------
    LinearSystem
        Solved system

    Examples
    --------
    >>> system = solve_system([[1, 1, 3], [2, 2, 7]])
    >>> system.type
    <SolutionType.INCONSISTENT: 'inconsistent'>
    """
    return LinearSystem(augmented=augmented, **kwargs)
