"""
GaussJordan: linear systems solved and classified by Gauss-Jordan elimination.

Copyright (C) 2024 SGCX
Licensed under GPL-3.0
"""

__version__ = "1.0.0"

# Import main user-facing API
from ._core import solve, solve_square, EPSILON
from ._backends import (
    SolutionType,
    Unique,
    Infinite,
    Inconsistent,
    SquareSolveResult,
)
from .system import LinearSystem, solve_system

# Import backend utilities (for advanced users)
from ._backends import get_backend, list_available_backends

__all__ = [
    'solve',
    'solve_square',
    'EPSILON',
    'SolutionType',
    'Unique',
    'Infinite',
    'Inconsistent',
    'SquareSolveResult',
    'LinearSystem',
    'solve_system',
    'get_backend',
    'list_available_backends',
]
