"""
Test the Gauss-Jordan solver and its classification.

Covers the unique / infinite / inconsistent scenarios, rectangular
systems, the square-system entry point, and properties that must hold
for arbitrary input (rank bound, round trip, idempotence).
"""

import pytest
import numpy as np

from gaussjordan import (
    solve,
    solve_square,
    SolutionType,
    Unique,
    Infinite,
    Inconsistent,
)


SOL_TOL = 1e-10       # Solution tolerance for exact small systems
RESID_TOL = 1e-8      # Residual tolerance for random systems


def augmented(rows):
    return np.array(rows, dtype=np.float64)


class TestScenarios:
    """Classification of small hand-checked systems."""

    def test_unique_2x2(self):
        M = augmented([[1, 1, 3],
                       [2, 3, 8]])
        result = solve(M, 2, 2)

        assert isinstance(result, Unique)
        assert result.type is SolutionType.UNIQUE
        assert result.message == "Unique solution found."
        np.testing.assert_allclose(result.solution, [1.0, 2.0], atol=SOL_TOL)

    def test_dependent_rows_give_infinite(self):
        M = augmented([[1, 1, 3],
                       [2, 2, 6]])
        result = solve(M, 2, 2)

        assert result.type is SolutionType.INFINITE
        assert "infinitely many solutions" in result.message
        assert len(result.solution) == 2
        assert result.rank == 1

    def test_contradiction_gives_inconsistent(self):
        M = augmented([[1, 1, 3],
                       [2, 2, 7]])
        result = solve(M, 2, 2)

        assert isinstance(result, Inconsistent)
        assert result.type is SolutionType.INCONSISTENT
        assert result.solution is None
        assert result.message == "The system is inconsistent (no solution)."

    def test_overdetermined_consistent(self):
        M = augmented([[1, 1, 3],
                       [2, 1, 5],
                       [3, 2, 8]])
        result = solve(M, 3, 2)

        assert result.type is SolutionType.UNIQUE
        np.testing.assert_allclose(result.solution, [2.0, 1.0], atol=SOL_TOL)

    def test_overdetermined_inconsistent(self):
        M = augmented([[1, 1, 3],
                       [2, 1, 5],
                       [1, -1, -1],
                       [1, 1, 4]])
        result = solve(M, 4, 2)

        assert result.type is SolutionType.INCONSISTENT
        assert result.solution is None

    def test_underdetermined(self):
        original = augmented([[1, 1, 1, 6],
                              [2, 1, 3, 14]])
        result = solve(original.copy(), 2, 3)

        assert isinstance(result, Infinite)
        assert len(result.solution) == 3
        assert result.pivot_columns == (0, 1)
        assert result.free_columns == [2]

        x = result.solution
        assert x[2] == 0.0
        np.testing.assert_allclose(original[:, :3] @ x, original[:, 3], atol=SOL_TOL)
        np.testing.assert_allclose(x, [8.0, -2.0, 0.0], atol=SOL_TOL)

    def test_empty_system(self):
        M = np.zeros((0, 3))
        result = solve(M, 0, 2)

        assert result.type is SolutionType.INFINITE
        np.testing.assert_array_equal(result.solution, [0.0, 0.0])
        assert result.rank == 0

    def test_no_equations_no_variables(self):
        result = solve(np.zeros((0, 1)), 0, 0)
        assert result.type is SolutionType.UNIQUE
        assert len(result.solution) == 0

    def test_zero_on_diagonal_needs_swap(self):
        M = augmented([[0, 1, 2],
                       [1, 0, 3]])
        result = solve(M, 2, 2)

        assert result.type is SolutionType.UNIQUE
        np.testing.assert_allclose(result.solution, [3.0, 2.0], atol=SOL_TOL)

    def test_all_zero_matrix(self):
        result = solve(np.zeros((3, 4)), 3, 3)

        assert result.type is SolutionType.INFINITE
        np.testing.assert_array_equal(result.solution, np.zeros(3))

    def test_zero_row_with_constant(self):
        M = augmented([[1, 0, 1],
                       [0, 0, 5]])
        result = solve(M, 2, 2)

        assert result.type is SolutionType.INCONSISTENT
        assert result.row == 1

    def test_single_equation(self):
        result = solve(augmented([[4, 10]]), 1, 1)
        np.testing.assert_allclose(result.solution, [2.5], atol=SOL_TOL)

    def test_identity(self):
        M = np.column_stack([np.eye(4), [1.0, -2.0, 3.0, -4.0]])
        result = solve(M, 4, 4)

        assert result.type is SolutionType.UNIQUE
        np.testing.assert_allclose(result.solution, [1.0, -2.0, 3.0, -4.0], atol=SOL_TOL)

    def test_skipped_column_becomes_free(self):
        """A column with no pivot is skipped; the cursor stays put."""
        M = augmented([[0, 1, 1],
                       [0, 2, 2]])
        result = solve(M, 2, 2)

        assert result.type is SolutionType.INFINITE
        assert result.pivot_columns == (1,)
        assert result.free_columns == [0]
        np.testing.assert_allclose(result.solution, [0.0, 1.0], atol=SOL_TOL)

    def test_sub_tolerance_column_is_skipped(self):
        M = augmented([[1e-12, 1, 1],
                       [1e-11, 1, 1]])
        result = solve(M, 2, 2)

        assert result.pivot_columns == (1,)
        assert result.type is SolutionType.INFINITE


class TestResultShape:

    def test_unpacks_as_triple(self):
        kind, x, message = solve(augmented([[1, 1, 3], [2, 3, 8]]), 2, 2)

        assert kind is SolutionType.UNIQUE
        np.testing.assert_allclose(x, [1.0, 2.0], atol=SOL_TOL)
        assert message == "Unique solution found."

    def test_inconsistent_unpacks_with_none(self):
        kind, x, message = solve(augmented([[1, 1, 3], [2, 2, 7]]), 2, 2)
        assert kind is SolutionType.INCONSISTENT
        assert x is None


class TestInPlace:
    """The caller's matrix is reduced in place."""

    def test_matrix_holds_rref_after_solve(self):
        M = augmented([[1, 1, 3],
                       [2, 3, 8]])
        solve(M, 2, 2)
        np.testing.assert_allclose(M, [[1.0, 0.0, 1.0],
                                       [0.0, 1.0, 2.0]], atol=SOL_TOL)

    def test_rows_beyond_m_untouched(self):
        M = augmented([[1, 1, 3],
                       [2, 3, 8],
                       [7, 7, 7]])
        solve(M, 2, 2)
        np.testing.assert_array_equal(M[2], [7.0, 7.0, 7.0])

    def test_pivot_entries_are_one(self):
        M = augmented([[2, 4, -2, 2],
                       [4, 9, -3, 8],
                       [-2, -3, 7, 10]])
        result = solve(M, 3, 3)
        for i, col in enumerate(result.pivot_columns):
            assert abs(M[i, col] - 1.0) <= SOL_TOL
            others = np.delete(M[:, col], i)
            np.testing.assert_allclose(others, 0.0, atol=SOL_TOL)


class TestValidation:
    """Malformed input is rejected before any mutation."""

    def test_list_input_rejected(self):
        with pytest.raises(TypeError, match="numpy.ndarray"):
            solve([[1.0, 1.0, 3.0]], 1, 2)

    def test_integer_array_rejected(self):
        with pytest.raises(TypeError, match="floating dtype"):
            solve(np.array([[1, 1, 3]]), 1, 2)

    def test_too_few_rows(self):
        with pytest.raises(ValueError, match="rows"):
            solve(augmented([[1, 1, 3]]), 2, 2)

    def test_too_few_columns(self):
        with pytest.raises(ValueError, match="columns"):
            solve(augmented([[1, 1]]), 1, 2)

    def test_non_finite(self):
        with pytest.raises(ValueError, match="NaN or Inf"):
            solve(augmented([[1, np.nan, 3]]), 1, 2)

    def test_negative_dimension(self):
        with pytest.raises(ValueError, match="non-negative"):
            solve(augmented([[1, 1, 3]]), -1, 2)

    @pytest.mark.parametrize("m, n", [(1.0, 2), (1, 2.0), ("1", 2), (True, 2)])
    def test_non_integer_dimension(self, m, n):
        M = augmented([[1, 1, 3]])
        before = M.copy()
        with pytest.raises(TypeError, match="must be an integer"):
            solve(M, m, n)
        np.testing.assert_array_equal(M, before)

    def test_numpy_integer_dimension(self):
        M = augmented([[1, 1, 3], [2, 3, 8]])
        result = solve(M, np.int64(2), np.int32(2))
        np.testing.assert_allclose(result.solution, [1.0, 2.0], atol=SOL_TOL)


class TestSquareEntryPoint:

    def test_unique(self):
        result = solve_square(augmented([[1, 1, 3], [2, 3, 8]]), 2)

        assert result.success
        assert result.error is None
        np.testing.assert_allclose(result.solution, [1.0, 2.0], atol=SOL_TOL)

    def test_infinite_is_failure(self):
        result = solve_square(augmented([[1, 1, 3], [2, 2, 6]]), 2)

        assert not result.success
        assert result.solution is None
        assert "infinitely many solutions" in result.error

    def test_inconsistent_is_failure(self):
        result = solve_square(augmented([[1, 1, 3], [2, 2, 7]]), 2)

        assert not result.success
        assert result.solution is None
        assert result.error == "The system is inconsistent (no solution)."

    def test_3x3(self):
        original = augmented([[1, 1, 1, 6],
                              [2, 1, 3, 14],
                              [1, -1, 2, 7]])
        result = solve_square(original.copy(), 3)

        assert result.success
        np.testing.assert_allclose(result.solution, [2.0, 1.0, 3.0], atol=SOL_TOL)
        np.testing.assert_allclose(original[:, :3] @ result.solution, original[:, 3],
                                   atol=SOL_TOL)


def _random_system(rng):
    """Small integer system, sometimes with duplicated or combined rows."""
    m = int(rng.integers(1, 6))
    n = int(rng.integers(1, 6))
    M = rng.integers(-4, 5, size=(m, n + 1)).astype(np.float64)
    if m > 1 and rng.random() < 0.5:
        M[-1] = M[0] * rng.integers(-2, 3)
    if m > 2 and rng.random() < 0.3:
        M[1] = M[0] + M[-1]
    return M, m, n


class TestProperties:
    """Properties that hold for any input."""

    def test_rank_bound(self):
        rng = np.random.default_rng(42)
        for _ in range(200):
            M, m, n = _random_system(rng)
            result = solve(M, m, n)
            assert result.rank <= min(m, n)
            assert len(result.pivot_columns) == result.rank

    def test_round_trip_for_unique(self):
        rng = np.random.default_rng(7)
        checked = 0
        for _ in range(200):
            M, m, n = _random_system(rng)
            original = M.copy()
            result = solve(M, m, n)
            if result.type is SolutionType.UNIQUE:
                np.testing.assert_allclose(
                    original[:m, :n] @ result.solution, original[:m, n],
                    atol=RESID_TOL
                )
                checked += 1
        assert checked > 0

    def test_particular_solution_satisfies_consistent_systems(self):
        rng = np.random.default_rng(11)
        for _ in range(200):
            M, m, n = _random_system(rng)
            original = M.copy()
            result = solve(M, m, n)
            if result.type is SolutionType.INFINITE:
                x = result.solution
                np.testing.assert_allclose(
                    original[:m, :n] @ x, original[:m, n], atol=RESID_TOL
                )
                np.testing.assert_array_equal(x[result.free_columns], 0.0)

    def test_idempotent_on_reduced_matrix(self):
        rng = np.random.default_rng(3)
        for _ in range(100):
            M, m, n = _random_system(rng)
            first = solve(M, m, n)
            second = solve(M, m, n)

            assert second.type is first.type
            assert second.pivot_columns == first.pivot_columns
            if first.solution is not None:
                np.testing.assert_allclose(second.solution, first.solution, atol=SOL_TOL)

    def test_pivot_choice_is_deterministic(self):
        M = augmented([[1, 0, 0],
                       [-7, 0, 0],
                       [3, 0, 0]])
        from gaussjordan._core.elimination import find_pivot
        assert {find_pivot(M, 0, 0, 3) for _ in range(10)} == {1}

    def test_agrees_with_scipy_on_nonsingular(self):
        from scipy.linalg import solve as scipy_solve

        rng = np.random.default_rng(0)
        for _ in range(20):
            n = int(rng.integers(1, 8))
            A = rng.standard_normal((n, n)) + n * np.eye(n)
            b = rng.standard_normal(n)
            result = solve(np.column_stack([A, b]), n, n)

            assert result.type is SolutionType.UNIQUE
            np.testing.assert_allclose(result.solution, scipy_solve(A, b), atol=RESID_TOL)
