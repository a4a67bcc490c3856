"""
Solver dispatch for linear systems and matrix inversion.

Provides linear_system() and inverse() as full-result entry points, plus the
plain-array functions solve(), solve_least_squares(), solve_symmetric() and
invert() used throughout the library.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfinlinalg.core.compute.linalg.backend import (
    BackendChoice,
    get_decomposition_backend,
)
from pyfinlinalg.linear.design import LinearSystemDesign, InversionDesign
from pyfinlinalg.linear.solution import LinearSystemSolution, InverseSolution
from pyfinlinalg.linear.backends.cpu import CPUSVDSolverBackend, CPULUInverseBackend


def linear_system(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> LinearSystemSolution:
    """
    Solve A x = b in the least-squares sense via the SVD pseudo-inverse.

    Square nonsingular, over-determined and under-determined systems are
    handled uniformly: the result is the minimum-norm minimiser of
    ||A x - b||_2.

    Parameters
    ----------
    A : array-like or LinearSystemDesign
        Matrix of shape (n, m), or a prebuilt design (then b must be None).
    b : array-like
        Right-hand side of length n.
    backend : str or DecompositionBackend
        'auto', 'cpu', or a custom decomposition backend.

    Returns
    -------
    LinearSystemSolution

    Raises
    ------
    DimensionMismatchError
        If A is not 2D, b is not 1D, or len(b) != A.shape[0].
    SingularSystemError
        If the SVD cannot be computed (e.g. non-finite entries).
    """
    if isinstance(A, LinearSystemDesign):
        design = A
    else:
        design = LinearSystemDesign.from_arrays(A, b)

    be = CPUSVDSolverBackend(get_decomposition_backend(backend))
    result = be.solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> NDArray[np.floating[Any]]:
    """
    Find x minimising ||A x - b||_2.

    Parameters
    ----------
    A : array-like, shape (n, m)
    b : array-like, shape (n,)

    Returns
    -------
    ndarray, shape (m,)
    """
    return linear_system(A, b, backend=backend).x


def solve_least_squares(
    A: ArrayLike,
    b: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> NDArray[np.floating[Any]]:
    """Least-squares solution of A x = b. Same contract as solve()."""
    return linear_system(A, b, backend=backend).x


def solve_symmetric(
    A: ArrayLike,
    b: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b for a symmetric matrix A.

    Uses the same SVD path as solve(); symmetry is not exploited, so
    near-singular systems behave exactly as they do for solve(). A must be
    square. Symmetry itself is not checked.
    """
    design = LinearSystemDesign.from_arrays(A, b, require_square=True)
    return linear_system(design, backend=backend).x


def inverse(
    A: ArrayLike | InversionDesign,
    *,
    backend: BackendChoice = 'auto',
) -> InverseSolution:
    """
    Invert a square matrix through its LU factorisation.

    Parameters
    ----------
    A : array-like or InversionDesign
        Square matrix (n, n).
    backend : str or DecompositionBackend
        'auto', 'cpu', or a custom decomposition backend.

    Returns
    -------
    InverseSolution

    Raises
    ------
    DimensionMismatchError
        If A is not square.
    SingularMatrixError
        If an LU pivot is below the singularity threshold.
    NumericalFailureError
        If A has non-finite entries.
    """
    design = A if isinstance(A, InversionDesign) else InversionDesign.from_array(A)
    be = CPULUInverseBackend(get_decomposition_backend(backend))
    result = be.solve(design)
    return InverseSolution(_result=result, _design=design)


def invert(
    A: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> NDArray[np.floating[Any]]:
    """Return A^-1 for a square nonsingular matrix A."""
    return inverse(A, backend=backend).inverse
