"""
Abstract base classes for backends.

Defines the interface all backends must implement and the result
types shared by every backend.
"""

from abc import ABC, abstractmethod
import numpy as np
from typing import ClassVar, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum


class SolutionType(Enum):
    """Classification of a linear system."""
    UNIQUE = "unique"               # rank == number of variables
    INFINITE = "infinite"           # rank < number of variables, consistent
    INCONSISTENT = "inconsistent"   # some row reads 0 ... 0 | b with b != 0


@dataclass(frozen=True, eq=False)
class SolveResult:
    """
    Outcome of one Gauss-Jordan solve.

    Concrete results are ``Unique``, ``Infinite`` or ``Inconsistent``;
    each carries only the data relevant to its case. Any result unpacks
    as ``(type, solution, message)``.

    Attributes
    ----------
    rank : int
        Number of pivot columns found
    pivot_columns : tuple of int
        Pivot columns in discovery order (row i of the reduced matrix
        holds the pivot for ``pivot_columns[i]``)
    """
    rank: int
    pivot_columns: Tuple[int, ...]

    type: ClassVar[SolutionType]
    message: ClassVar[str]

    @property
    def solution(self) -> Optional[np.ndarray]:
        return None

    def __iter__(self):
        yield self.type
        yield self.solution
        yield self.message


@dataclass(frozen=True, eq=False)
class Unique(SolveResult):
    """Exactly one solution."""
    values: np.ndarray

    type: ClassVar[SolutionType] = SolutionType.UNIQUE
    message: ClassVar[str] = "Unique solution found."

    @property
    def solution(self) -> np.ndarray:
        return self.values


@dataclass(frozen=True, eq=False)
class Infinite(SolveResult):
    """Infinitely many solutions; ``values`` is the one with free variables = 0."""
    values: np.ndarray

    type: ClassVar[SolutionType] = SolutionType.INFINITE
    message: ClassVar[str] = (
        "The system has infinitely many solutions. "
        "Showing a particular solution (free variables = 0)."
    )

    @property
    def solution(self) -> np.ndarray:
        return self.values

    @property
    def free_columns(self) -> List[int]:
        pivots = set(self.pivot_columns)
        return [j for j in range(len(self.values)) if j not in pivots]


@dataclass(frozen=True, eq=False)
class Inconsistent(SolveResult):
    """No solution; ``row`` is the first reduced row of the form 0 ... 0 | b."""
    row: int

    type: ClassVar[SolutionType] = SolutionType.INCONSISTENT
    message: ClassVar[str] = "The system is inconsistent (no solution)."


@dataclass(frozen=True, eq=False)
class SquareSolveResult:
    """Two-way result of the square-system entry point."""
    success: bool
    solution: Optional[np.ndarray]
    error: Optional[str]


class BackendBase(ABC):
    """Abstract base class for all backends."""

    @abstractmethod
    def reduce(
        self,
        augmented: np.ndarray,
        m: int,
        n: int,
        tol: float,
    ) -> List[int]:
        """
        Reduce the first ``m`` rows of ``augmented`` to RREF, in place.

        Backends may compute with their native types internally, but the
        reduced rows must end up in the caller's array.

        Parameters
        ----------
        augmented : ndarray, shape (>= m, >= n + 1)
            Augmented matrix, overwritten with its reduced form
        m : int
            Number of equations (rows)
        n : int
            Number of variables (coefficient columns)
        tol : float
            Pivot tolerance

        Returns
        -------
        list of int
            Pivot columns in discovery order
        """
        pass

    @abstractmethod
    def get_device_info(self) -> dict:
        """Get backend information."""
        pass


class CPUBackend(BackendBase):
    """CPU backend base class (always FP64)."""
    pass


class GPUBackend(BackendBase):
    """Base class for tensor-library backends."""
    pass
