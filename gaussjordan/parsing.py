"""
Text input for the interactive shell.

Numbers use plain ASCII decimal syntax ('.' as the decimal point,
optional exponent) regardless of the system locale, so ',' is always a
separator. Digit-group underscores and non-ASCII digits are rejected.
"""

import re
import numpy as np
from typing import Optional

# Fields may be separated by whitespace, ',' or ';'
_SEPARATORS = re.compile(r"[\s,;]+")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_NUMBER = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def is_exit(text: Optional[str], exit_word: str = "exit") -> bool:
    """True if ``text`` is the exit word (case-insensitive, surrounding blanks ignored)."""
    return text is not None and text.strip().lower() == exit_word.lower()


def parse_dimension(text: Optional[str]) -> int:
    """
    Parse a positive integer count of equations or variables.

    Raises
    ------
    ValueError
        If the text is not a positive integer
    """
    text = (text or "").strip()
    if not _INTEGER.fullmatch(text):
        raise ValueError("Invalid input. Enter a positive integer.")
    value = int(text)
    if value <= 0:
        raise ValueError("Invalid input. Enter a positive integer.")
    return value


def parse_row(line: Optional[str], expected: int) -> np.ndarray:
    """
    Parse one row of the augmented matrix.

    Parameters
    ----------
    line : str
        Numbers separated by whitespace, ',' or ';'
    expected : int
        Required number of values (n + 1)

    Returns
    -------
    ndarray of float64, shape (expected,)

    Raises
    ------
    ValueError
        On a blank line, wrong count, or a value that is not a finite number
    """
    error = ValueError(f"Invalid input. Enter exactly {expected} numbers.")

    if line is None or not line.strip():
        raise error

    parts = [p for p in _SEPARATORS.split(line.strip()) if p]
    if len(parts) != expected:
        raise error
    if not all(_NUMBER.fullmatch(p) for p in parts):
        raise error

    values = np.array([float(p) for p in parts], dtype=np.float64)

    if not np.all(np.isfinite(values)):
        raise error
    return values
