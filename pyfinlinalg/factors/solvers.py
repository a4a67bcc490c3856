"""
Solver dispatch for principal component factor models.

Provides factor_decomposition() and rank_reduction() as full-result entry
points, plus the plain-array functions extract_factors() / factor_matrix()
and reduce_rank() / factor_reduction().
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfinlinalg.core.compute.linalg.backend import (
    BackendChoice,
    get_decomposition_backend,
)
from pyfinlinalg.core.validation import check_array, check_2d
from pyfinlinalg.factors.design import FactorDesign
from pyfinlinalg.factors.solution import FactorSolution, ReductionSolution
from pyfinlinalg.factors.backends.cpu import CPUEigenFactorBackend, CPURankReductionBackend
from pyfinlinalg.factors import _extraction


def _ensure_design(
    correlation_matrix: ArrayLike | FactorDesign,
    number_of_factors: int | None,
) -> FactorDesign:
    """Convert raw array to FactorDesign if needed."""
    if isinstance(correlation_matrix, FactorDesign):
        return correlation_matrix
    return FactorDesign.from_matrix(correlation_matrix, number_of_factors)


def factor_decomposition(
    correlation_matrix: ArrayLike | FactorDesign,
    number_of_factors: int | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> FactorSolution:
    """
    Principal component analysis of a symmetric matrix.

    Retains the eigenvectors of the k largest eigenvalues, each made unique
    by a positive first component and scaled to length sqrt(eigenvalue).
    Negative eigenvalues among the retained ones are treated as zero.

    Parameters
    ----------
    correlation_matrix : array-like or FactorDesign
        Symmetric matrix, shape (n, n). Only the lower triangle is read by
        the default backend.
    number_of_factors : int
        k, 1 <= k <= n. Ignored when a FactorDesign is passed.
    backend : str or DecompositionBackend
        'auto', 'cpu', or a custom decomposition backend.

    Returns
    -------
    FactorSolution

    Raises
    ------
    DimensionMismatchError
        If the matrix is not square.
    InvalidArgumentError
        If number_of_factors is outside [1, n].
    NumericalFailureError
        If the eigen-decomposition fails (e.g. non-finite entries).
    """
    design = _ensure_design(correlation_matrix, number_of_factors)
    be = CPUEigenFactorBackend(get_decomposition_backend(backend))
    result = be.solve(design)
    return FactorSolution(_result=result, _design=design)


def extract_factors(
    correlation_matrix: ArrayLike,
    number_of_factors: int,
    *,
    backend: BackendChoice = 'auto',
) -> NDArray[np.floating[Any]]:
    """
    Matrix of the k dominant scaled eigenvectors, shape (n, k).

    Columns are ordered by descending eigenvalue; F F' approximates the
    input with its k largest-variance directions.
    """
    return factor_decomposition(
        correlation_matrix, number_of_factors, backend=backend
    ).factor_matrix


def factor_matrix(
    correlation_matrix: ArrayLike,
    number_of_factors: int,
    *,
    backend: BackendChoice = 'auto',
) -> NDArray[np.floating[Any]]:
    """Alias of extract_factors()."""
    return extract_factors(correlation_matrix, number_of_factors, backend=backend)


def rank_reduction(
    correlation_matrix: ArrayLike | FactorDesign,
    number_of_factors: int | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> ReductionSolution:
    """
    Rank-k factor model of a correlation matrix with near-unit diagonal.

    Extracts k factors, rescales every row of the loadings to unit norm,
    and re-extracts k factors from the product of the rescaled loadings.
    A row with no loading at all on the first k factors is set to 1.0 in
    every column; a UserWarning names such rows.

    Parameters
    ----------
    correlation_matrix : array-like or FactorDesign
        Correlation matrix, shape (n, n). Unit diagonal, symmetry and the
        [-1, 1] range are assumed, not checked.
    number_of_factors : int
        k, 1 <= k <= n. Ignored when a FactorDesign is passed.
    backend : str or DecompositionBackend
        'auto', 'cpu', or a custom decomposition backend.

    Returns
    -------
    ReductionSolution
    """
    design = _ensure_design(correlation_matrix, number_of_factors)
    be = CPURankReductionBackend(get_decomposition_backend(backend))
    result = be.solve(design)

    if result.params.degenerate_rows:
        warnings.warn(
            f"Rows {list(result.params.degenerate_rows)} are uncorrelated with the "
            f"first {design.number_of_factors} factor(s); their loadings were set "
            f"to 1.0 before re-extraction.",
            UserWarning,
            stacklevel=2,
        )

    return ReductionSolution(_result=result, _design=design)


def reduce_rank(
    correlation_matrix: ArrayLike,
    number_of_factors: int,
    *,
    backend: BackendChoice = 'auto',
) -> NDArray[np.floating[Any]]:
    """Factor matrix (n, k) of the rank-reduced correlation model."""
    return rank_reduction(
        correlation_matrix, number_of_factors, backend=backend
    ).factor_matrix


def factor_reduction(
    correlation_matrix: ArrayLike,
    number_of_factors: int,
    *,
    backend: BackendChoice = 'auto',
) -> NDArray[np.floating[Any]]:
    """Alias of reduce_rank()."""
    return reduce_rank(correlation_matrix, number_of_factors, backend=backend)


def renormalize_rows(
    factor_matrix: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], tuple[int, ...]]:
    """
    Scale each row of a factor matrix to unit norm.

    Rows of exactly zero norm are set to 1.0 in every column.

    Returns
    -------
    (renormalised copy, indices of substituted zero rows)
    """
    F = check_array(factor_matrix, 'factor_matrix')
    check_2d(F, 'factor_matrix')
    return _extraction.renormalize_rows(F)
