"""
Tests for reduce_rank(), factor_reduction(), rank_reduction() and renormalize_rows().
"""

import numpy as np
import pytest

from pyfinlinalg.core.exceptions import DimensionMismatchError, InvalidArgumentError
from pyfinlinalg.core.compute.linalg import EigenResult, LapackBackend
from pyfinlinalg.core.random import random_correlation_matrix, seed
from pyfinlinalg.factors import (
    extract_factors,
    factor_reduction,
    rank_reduction,
    reduce_rank,
    renormalize_rows,
)


class ExactDiagonalBackend(LapackBackend):
    """Exact eigen-decomposition for diagonal input, LAPACK otherwise."""

    @property
    def name(self) -> str:
        return 'exact_diagonal'

    def eigen(self, A):
        if np.count_nonzero(A - np.diag(np.diag(A))) == 0:
            return EigenResult(eigenvalues=np.diag(A).copy(), eigenvectors=np.eye(A.shape[0]))
        return super().eigen(A)


# ═══════════════════════════════════════════════════════════════════════
# renormalize_rows
# ═══════════════════════════════════════════════════════════════════════


class TestRenormalizeRows:
    """Test row renormalisation on its own."""

    def test_unit_rows(self, rng):
        F = rng.standard_normal((6, 3))
        renormalized, degenerate = renormalize_rows(F)
        np.testing.assert_allclose(np.sum(renormalized ** 2, axis=1), 1.0, rtol=1e-14)
        assert degenerate == ()

    def test_zero_row_set_to_one(self):
        """A zero row becomes 1.0 in every column, with norm sqrt(k)."""
        F = np.array([[0.6, 0.8, 0.0], [0.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
        renormalized, degenerate = renormalize_rows(F)
        np.testing.assert_array_equal(renormalized[1], [1.0, 1.0, 1.0])
        np.testing.assert_array_equal(renormalized[2], [1.0, 0.0, 0.0])
        assert degenerate == (1,)
        np.testing.assert_allclose(np.linalg.norm(renormalized[1]), np.sqrt(3.0))

    def test_direction_preserved(self):
        renormalized, _ = renormalize_rows([[3.0, -4.0]])
        np.testing.assert_allclose(renormalized, [[0.6, -0.8]], rtol=1e-15)

    def test_input_not_mutated(self):
        F = np.array([[3.0, 4.0], [0.0, 0.0]])
        before = F.copy()
        renormalize_rows(F)
        np.testing.assert_array_equal(F, before)

    def test_requires_2d(self):
        with pytest.raises(DimensionMismatchError):
            renormalize_rows([1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# reduce_rank
# ═══════════════════════════════════════════════════════════════════════


class TestReduceRank:
    """Test the extract, renormalise, re-extract pipeline."""

    def test_two_by_two_full_rank(self):
        C = np.array([[1.0, 0.5], [0.5, 1.0]])
        F = reduce_rank(C, 2)
        assert F.shape == (2, 2)
        np.testing.assert_allclose(F @ F.T, C, atol=1e-9)

    @pytest.mark.parametrize("seed_value", [10, 20, 30])
    def test_full_rank_reconstructs(self, seed_value):
        C = random_correlation_matrix(6, seed(seed_value))
        F = reduce_rank(C, 6)
        np.testing.assert_allclose(F @ F.T, C, atol=1e-9)

    @pytest.mark.parametrize("k", [1, 2, 3])
    def test_unit_diagonal_at_reduced_rank(self, exponential_correlation, k):
        """Diagonal of F F' stays close to 1 even when k < n."""
        F = reduce_rank(exponential_correlation, k)
        assert F.shape == (8, k)
        np.testing.assert_allclose(np.sum(F ** 2, axis=1), 1.0, atol=1e-10)

    def test_closer_to_unit_diagonal_than_pca(self, exponential_correlation):
        """Renormalisation improves the diagonal over plain extraction."""
        solution = rank_reduction(exponential_correlation, 2)
        initial = np.sum(solution.initial_factor_matrix ** 2, axis=1)
        assert solution.max_diagonal_deviation < np.max(np.abs(initial - 1.0))

    def test_first_entry_non_negative(self, correlation_5x5):
        F = reduce_rank(correlation_5x5, 3)
        assert np.all(F[0, :] >= 0.0)

    def test_equals_reextraction_of_renormalized(self, exponential_correlation):
        """Result is extract(F F', k) where F is the renormalised first extraction."""
        renormalized, _ = renormalize_rows(extract_factors(exponential_correlation, 2))
        expected = extract_factors(renormalized @ renormalized.T, 2)
        np.testing.assert_allclose(
            reduce_rank(exponential_correlation, 2), expected, rtol=0, atol=1e-15
        )

    def test_factor_reduction_alias(self, correlation_5x5):
        np.testing.assert_array_equal(
            factor_reduction(correlation_5x5, 2), reduce_rank(correlation_5x5, 2)
        )

    def test_input_not_mutated(self, correlation_5x5):
        before = correlation_5x5.copy()
        reduce_rank(correlation_5x5, 2)
        np.testing.assert_array_equal(correlation_5x5, before)


# ═══════════════════════════════════════════════════════════════════════
# Degenerate rows
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerateRows:
    """Test rows with no loading on the retained factors."""

    def test_uncorrelated_dimension_set_to_one(self):
        """An uncorrelated dimension gets no loading at k=1 and is substituted."""
        C = np.eye(2)
        with pytest.warns(UserWarning, match=r"Rows \[1\]"):
            solution = rank_reduction(C, 1, backend=ExactDiagonalBackend())

        np.testing.assert_array_equal(solution.initial_factor_matrix, [[1.0], [0.0]])
        np.testing.assert_array_equal(solution.renormalized_factor_matrix, [[1.0], [1.0]])
        assert solution.degenerate_rows == (1,)
        assert any("renormalization" in w for w in solution.warnings)
        np.testing.assert_allclose(solution.factor_matrix, [[1.0], [1.0]], atol=1e-12)

    def test_every_column_set_to_one(self):
        C = np.diag([1.0, 1.0, 1.0])
        with pytest.warns(UserWarning):
            solution = rank_reduction(C, 2, backend=ExactDiagonalBackend())
        np.testing.assert_array_equal(solution.renormalized_factor_matrix[2], [1.0, 1.0])
        assert solution.degenerate_rows == (2,)

    @pytest.mark.filterwarnings("ignore::UserWarning")
    def test_identity_with_default_backend(self):
        """LAPACK leaves row 1 without loading; it is replaced by exactly 1.0."""
        solution = rank_reduction(np.eye(2), 1)
        np.testing.assert_array_equal(solution.renormalized_factor_matrix[1], [1.0])
        assert solution.degenerate_rows == (1,)
        np.testing.assert_allclose(np.abs(solution.factor_matrix), 1.0, atol=1e-12)


# ═══════════════════════════════════════════════════════════════════════
# Solution object
# ═══════════════════════════════════════════════════════════════════════


class TestSolution:
    """Test ReductionSolution accessors."""

    def test_accessors(self, exponential_correlation):
        solution = rank_reduction(exponential_correlation, 3)
        assert solution.number_of_factors == 3
        assert solution.degenerate_rows == ()
        assert solution.eigenvalues.shape == (3,)
        np.testing.assert_allclose(
            solution.reduced_correlation_matrix,
            solution.factor_matrix @ solution.factor_matrix.T,
        )
        np.testing.assert_allclose(np.diag(solution.reduced_correlation_matrix), 1.0, atol=1e-10)
        assert solution.backend_name == 'cpu_factor_reduction'
        assert {'extraction', 'renormalization', 'reextraction'} <= set(solution.timing)

    def test_summary_and_repr(self, correlation_5x5):
        solution = rank_reduction(correlation_5x5, 2)
        assert "Correlation rank reduction (n=5, k=2)" in solution.summary()
        assert repr(solution) == (
            "ReductionSolution(n=5, number_of_factors=2, degenerate_rows=[])"
        )


class TestErrors:
    """Test input errors."""

    @pytest.mark.parametrize("k", [0, 3])
    def test_factor_count_out_of_range(self, k):
        with pytest.raises(InvalidArgumentError):
            reduce_rank([[1.0, 0.5], [0.5, 1.0]], k)

    def test_non_square(self):
        with pytest.raises(DimensionMismatchError):
            reduce_rank(np.ones((3, 2)), 1)
