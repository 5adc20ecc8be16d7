"""
Interactive shell: read a system, solve it, print the result, repeat.

Runs until the exit word is entered at any prompt.
"""

import argparse
import sys
from typing import List, Optional, TextIO, Union

import numpy as np

from ._backends import BackendBase, get_backend
from ._core.solver import solve
from .parsing import is_exit, parse_dimension, parse_row


class _ExitRequested(Exception):
    """Raised by the prompt helper when the user types the exit word."""


def _prompt(message: str, stdin: TextIO, stdout: TextIO, exit_word: str) -> str:
    print(message, file=stdout)
    line = stdin.readline()
    if not line:  # EOF ends the session
        raise _ExitRequested
    line = line.rstrip("\n")
    if is_exit(line, exit_word):
        raise _ExitRequested
    return line


def _read_system(stdin, stdout, exit_word: str) -> Optional[np.ndarray]:
    """Read one augmented matrix; None if a dimension was invalid."""
    try:
        m = parse_dimension(_prompt(
            f"Enter the number of equations (m) or '{exit_word}' to quit:",
            stdin, stdout, exit_word))
    except ValueError as e:
        print(e, file=stdout)
        return None

    try:
        n = parse_dimension(_prompt(
            f"Enter the number of variables (n) or '{exit_word}' to quit:",
            stdin, stdout, exit_word))
    except ValueError as e:
        print(e, file=stdout)
        return None

    augmented = np.zeros((m, n + 1), dtype=np.float64)

    print(
        f"Enter coefficients and constant terms ({m} rows, {n + 1} values per row).\n"
        f"\tSeparate values with spaces, commas, semicolons or tabs.\n"
        f"\tType '{exit_word}' at any time to quit.",
        file=stdout,
    )

    for i in range(m):
        while True:
            line = _prompt(f"Row {i + 1}:", stdin, stdout, exit_word)
            try:
                augmented[i] = parse_row(line, n + 1)
                break
            except ValueError as e:
                print(e, file=stdout)  # retry the same row

    return augmented


def _print_result(result, stdout, digits: int):
    print(result.message, file=stdout)
    if result.solution is not None:
        print("Solution (particular if there are infinitely many):", file=stdout)
        for i, value in enumerate(result.solution):
            print(f"x{i + 1} = {value:.{digits}g}", file=stdout)
    print(file=stdout)


def run(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    backend: Union[str, BackendBase] = 'cpu',
    exit_word: str = 'exit',
    digits: int = 6,
) -> int:
    """
    Run the read-solve-print loop.

    Returns
    -------
    int
        Exit status (always 0; invalid input is reported and re-prompted)
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    engine = get_backend(backend)

    while True:
        try:
            augmented = _read_system(stdin, stdout, exit_word)
        except _ExitRequested:
            return 0

        if augmented is None:
            continue

        m, cols = augmented.shape
        result = solve(augmented, m, cols - 1, backend=engine)
        _print_result(result, stdout, digits)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gaussjordan",
        description="Solve linear systems interactively by Gauss-Jordan elimination.",
    )
    parser.add_argument("--backend", default="cpu", choices=["cpu", "pytorch", "gpu"],
                        help="computational backend (default: cpu)")
    parser.add_argument("--exit-word", default="exit",
                        help="word that ends the session (default: exit)")
    parser.add_argument("--digits", type=int, default=6,
                        help="significant digits in printed solutions (default: 6)")
    args = parser.parse_args(argv)

    # An unusable backend is a usage error, reported before the first prompt
    try:
        engine = get_backend(args.backend)
    except (ValueError, RuntimeError, ImportError) as e:
        parser.error(f"backend '{args.backend}' is not usable: {e}")

    return run(backend=engine, exit_word=args.exit_word, digits=args.digits)


if __name__ == "__main__":
    raise SystemExit(main())
