"""
Principal component factor extraction and row renormalisation.

Pure functions on float64 arrays; shapes and factor counts are validated
by the callers (designs). Every function returns fresh arrays.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyfinlinalg.core.exceptions import NumericalFailureError
from pyfinlinalg.core.protocols import DecompositionBackend
from pyfinlinalg.core.compute.linalg.decompositions import EigenResult


EigenPair = tuple[int, float, NDArray[np.floating[Any]]]


@dataclass(frozen=True)
class ExtractedFactors:
    """
    Output of one extraction pass.

    Attributes:
        factor_matrix: n x k loadings, columns by descending eigenvalue
        eigenvalues: Retained eigenvalues after clamping at zero (k,)
        raw_eigenvalues: Retained eigenvalues as decomposed (k,)
        eigenvalue_indices: Position of each retained pair in the backend's output (k,)
        spectrum: All n eigenvalues, descending
    """
    factor_matrix: NDArray[np.floating[Any]]
    eigenvalues: NDArray[np.floating[Any]]
    raw_eigenvalues: NDArray[np.floating[Any]]
    eigenvalue_indices: NDArray[np.integer[Any]]
    spectrum: NDArray[np.floating[Any]]


def sorted_eigenpairs(eigen: EigenResult) -> list[EigenPair]:
    """
    Eigenpairs as (index, eigenvalue, eigenvector), largest eigenvalue first.

    The sort is stable: equal eigenvalues keep the backend's order.
    """
    pairs = [
        (i, float(value), eigen.eigenvectors[:, i])
        for i, value in enumerate(eigen.eigenvalues)
    ]
    return sorted(pairs, key=lambda pair: -pair[1])


def extract_factors(
    M: NDArray[np.floating[Any]],
    number_of_factors: int,
    decomposition: DecompositionBackend,
) -> ExtractedFactors:
    """
    Scaled eigenvectors of the `number_of_factors` largest eigenvalues of M.

    Column j is sign * sqrt(max(lambda_j, 0) / ||v_j||^2) * v_j, where the
    sign makes the first component of v_j positive (a zero first component
    is negated too). F F' then carries exactly the retained part of the
    spectrum of M.
    """
    n = M.shape[0]
    pairs = sorted_eigenpairs(decomposition.eigen(M))

    factor_matrix = np.empty((n, number_of_factors), dtype=np.float64)
    raw_eigenvalues = np.empty(number_of_factors, dtype=np.float64)
    indices = np.empty(number_of_factors, dtype=np.intp)

    for factor, (index, eigenvalue, eigenvector) in enumerate(pairs[:number_of_factors]):
        norm_squared = float(eigenvector @ eigenvector)
        if norm_squared == 0.0:
            raise NumericalFailureError(
                f"eigen: eigenvector {index} returned by the backend is zero",
                operation='eigen',
            )

        sign = 1.0 if eigenvector[0] > 0.0 else -1.0
        scale = np.sqrt(max(eigenvalue, 0.0) / norm_squared)
        factor_matrix[:, factor] = sign * scale * eigenvector

        raw_eigenvalues[factor] = eigenvalue
        indices[factor] = index

    return ExtractedFactors(
        factor_matrix=factor_matrix,
        eigenvalues=np.maximum(raw_eigenvalues, 0.0),
        raw_eigenvalues=raw_eigenvalues,
        eigenvalue_indices=indices,
        spectrum=np.array([value for _, value, _ in pairs]),
    )


def renormalize_rows(
    factor_matrix: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], tuple[int, ...]]:
    """
    Scale every row of a factor matrix to unit Euclidean norm.

    Rows whose squared norm is exactly zero cannot be scaled; every entry of
    such a row is set to 1.0 instead, giving it norm sqrt(k).

    Returns:
        (renormalised copy, indices of the zero rows that were substituted)
    """
    renormalized = np.array(factor_matrix, dtype=np.float64)
    sum_squared = np.sum(renormalized * renormalized, axis=1)
    degenerate = sum_squared == 0.0

    regular = ~degenerate
    renormalized[regular] /= np.sqrt(sum_squared[regular])[:, np.newaxis]
    renormalized[degenerate] = 1.0

    return renormalized, tuple(int(i) for i in np.flatnonzero(degenerate))
