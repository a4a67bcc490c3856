"""
Matrix decompositions and the default LAPACK backend.

Provides the result types of the three decompositions the package needs
(SVD, LU, symmetric eigen-decomposition) and LapackBackend, which computes
them with SciPy (LAPACK under the hood). Any object with the same three
methods satisfies DecompositionBackend and can be passed instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import linalg as sla

from pyfinlinalg.core.exceptions import NumericalFailureError
from pyfinlinalg.core.validation import is_finite


@dataclass(frozen=True)
class SVDResult:
    """
    Thin singular value decomposition A = U diag(s) Vt.

    Attributes:
        U: Left singular vectors (n x r), r = min(n, m)
        s: Singular values, descending (r,)
        Vt: Right singular vectors, transposed (r x m)
    """
    U: NDArray[np.floating[Any]]
    s: NDArray[np.floating[Any]]
    Vt: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class LUResult:
    """
    LU factorisation with partial pivoting, A = P L U.

    Attributes:
        P: Permutation matrix (n x n)
        L: Unit lower triangular factor (n x n)
        U: Upper triangular factor (n x n)
    """
    P: NDArray[np.floating[Any]]
    L: NDArray[np.floating[Any]]
    U: NDArray[np.floating[Any]]

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        """Diagonal of U."""
        return np.diag(self.U)


@dataclass(frozen=True)
class EigenResult:
    """
    Eigen-decomposition of a symmetric matrix, A V = V diag(w).

    Attributes:
        eigenvalues: Real eigenvalues (n,), in backend order
        eigenvectors: Column i is the eigenvector of eigenvalues[i] (n x n)
    """
    eigenvalues: NDArray[np.floating[Any]]
    eigenvectors: NDArray[np.floating[Any]]


def _require_finite(A: NDArray[np.floating[Any]], operation: str) -> None:
    if not is_finite(A):
        raise NumericalFailureError(
            f"{operation}: input contains non-finite values",
            operation=operation,
        )


class LapackBackend:
    """Decomposition backend using SciPy's LAPACK bindings."""

    @property
    def name(self) -> str:
        return 'cpu_lapack'

    def svd(self, A: NDArray[np.floating[Any]]) -> SVDResult:
        _require_finite(A, 'svd')
        try:
            U, s, Vt = sla.svd(A, full_matrices=False, check_finite=False)
        except sla.LinAlgError as e:
            raise NumericalFailureError(f"svd: {e}", operation='svd') from e
        return SVDResult(U=U, s=s, Vt=Vt)

    def lu(self, A: NDArray[np.floating[Any]]) -> LUResult:
        _require_finite(A, 'lu')
        try:
            P, L, U = sla.lu(A, check_finite=False)
        except sla.LinAlgError as e:
            raise NumericalFailureError(f"lu: {e}", operation='lu') from e
        return LUResult(P=P, L=L, U=U)

    def eigen(self, A: NDArray[np.floating[Any]]) -> EigenResult:
        _require_finite(A, 'eigen')
        try:
            # eigh reads the lower triangle only
            w, V = sla.eigh(A, check_finite=False)
        except sla.LinAlgError as e:
            raise NumericalFailureError(f"eigen: {e}", operation='eigen') from e
        return EigenResult(eigenvalues=w, eigenvectors=V)
