"""
FactorDesign: input wrapper for factor extraction and rank reduction.

Validates shape and factor count up front. Symmetry, unit diagonal and
the [-1, 1] range of a correlation matrix are the caller's responsibility
and are NOT checked here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfinlinalg.core.validation import (
    check_array,
    check_2d,
    check_non_empty,
    check_square,
    check_number_of_factors,
)


@dataclass(frozen=True)
class FactorDesign:
    """
    Design for principal component factor models.

    Wraps an n x n symmetric matrix (typically a correlation matrix) and the
    number k of factors to retain, 1 <= k <= n. Immutable after construction.

    Construction:
        FactorDesign.from_matrix(correlation_matrix, number_of_factors)
    """
    _matrix: NDArray[np.floating[Any]]
    _number_of_factors: int

    @classmethod
    def from_matrix(cls, matrix: ArrayLike, number_of_factors: int) -> FactorDesign:
        """
        Build FactorDesign from a square array-like.

        Parameters
        ----------
        matrix : array-like
            Symmetric matrix, shape (n, n). Pandas DataFrames are accepted
            through their .values.
        number_of_factors : int
            Number of factors k, 1 <= k <= n.

        Raises
        ------
        DimensionMismatchError
            If matrix is not a non-empty square 2D array.
        InvalidArgumentError
            If number_of_factors is not an integer in [1, n].
        """
        if hasattr(matrix, 'values') and hasattr(matrix, 'columns'):
            matrix = matrix.values

        M = check_array(matrix, 'correlation_matrix')
        check_2d(M, 'correlation_matrix')
        check_non_empty(M, 'correlation_matrix')
        check_square(M, 'correlation_matrix')

        k = check_number_of_factors(number_of_factors, M.shape[0], 'number_of_factors')
        return cls(_matrix=M, _number_of_factors=k)

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Input matrix (n x n)."""
        return self._matrix

    @property
    def n(self) -> int:
        """Matrix dimension."""
        return self._matrix.shape[0]

    @property
    def number_of_factors(self) -> int:
        """Number of retained factors k."""
        return self._number_of_factors

    def __repr__(self) -> str:
        return f"FactorDesign(n={self.n}, number_of_factors={self.number_of_factors})"
