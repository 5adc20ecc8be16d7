"""
Utility functions.
"""

import numpy as np


def check_array(X, name='X', dtype=np.float64):
    """Validate array input."""
    X = np.asarray(X, dtype=dtype)
    if X.ndim != 2:
        raise ValueError(f"{name} must be 2-dimensional")
    if not np.all(np.isfinite(X)):
        raise ValueError(f"{name} contains NaN or Inf")
    return X


def check_vector(y, name='y', dtype=np.float64):
    """Validate vector input."""
    y = np.asarray(y, dtype=dtype)
    if y.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional")
    if not np.all(np.isfinite(y)):
        raise ValueError(f"{name} contains NaN or Inf")
    return y


def check_augmented(augmented, m, n, name='augmented'):
    """
    Validate an augmented matrix that will be reduced in place.

    No conversion is done: the caller's array is the one that gets
    mutated, so it must already be a floating point ndarray.
    """
    if not isinstance(augmented, np.ndarray):
        raise TypeError(
            f"{name} must be a numpy.ndarray to be reduced in place, "
            f"got {type(augmented).__name__}"
        )
    if not np.issubdtype(augmented.dtype, np.floating):
        raise TypeError(f"{name} must have a floating dtype, got {augmented.dtype}")
    if augmented.ndim != 2:
        raise ValueError(f"{name} must be 2-dimensional")
    for label, value in (('m', m), ('n', n)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(
                f"Dimension {label} must be an integer, got {type(value).__name__}"
            )
    if m < 0 or n < 0:
        raise ValueError(f"Dimensions must be non-negative (m={m}, n={n})")

    rows, cols = augmented.shape
    if rows < m:
        raise ValueError(f"{name} has {rows} rows, expected at least m={m}")
    if cols < n + 1:
        raise ValueError(f"{name} has {cols} columns, expected at least n+1={n + 1}")
    if not np.all(np.isfinite(augmented[:m, :n + 1])):
        raise ValueError(f"{name} contains NaN or Inf")
