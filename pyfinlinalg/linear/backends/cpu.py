"""
CPU backends for linear systems and matrix inversion.

Both backends delegate the decomposition itself to a DecompositionBackend
and only implement the algebra on top of it.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pyfinlinalg.core.result import Result
from pyfinlinalg.core.protocols import DecompositionBackend
from pyfinlinalg.core.compute.timing import Timer
from pyfinlinalg.core.compute.tolerances import (
    LU_SINGULARITY_THRESHOLD,
    pseudo_inverse_tolerance,
)
from pyfinlinalg.core.exceptions import (
    NumericalFailureError,
    SingularMatrixError,
    SingularSystemError,
)
from pyfinlinalg.linear.design import LinearSystemDesign, InversionDesign
from pyfinlinalg.linear.solution import LinearSystemParams, InverseParams


class CPUSVDSolverBackend:
    """
    Minimum-norm least-squares solver through the SVD pseudo-inverse.

    With A = U diag(s) V', the solution is
        x = V diag(1/s_i for s_i > tol, else 0) U' b
    which equals A^-1 b for square nonsingular A and the least-squares /
    minimum-norm solution otherwise.
    """

    def __init__(self, decomposition: DecompositionBackend):
        self._decomposition = decomposition

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        timer = Timer()
        timer.start()

        A = design.A
        b = design.b
        warnings_list: list[str] = []

        with timer.section('svd'):
            try:
                svd = self._decomposition.svd(A)
            except NumericalFailureError as e:
                raise SingularSystemError(
                    f"Cannot decompose A for the linear solve: {e}",
                    matrix_name='A',
                ) from e

        with timer.section('pseudo_inverse_solve'):
            s = svd.s
            tol = pseudo_inverse_tolerance(A.shape, float(s[0])) if s.size else 0.0
            keep = s > tol
            rank = int(np.sum(keep))

            inv_s = np.zeros_like(s)
            inv_s[keep] = 1.0 / s[keep]
            x = svd.Vt.T @ (inv_s * (svd.U.T @ b))

        residual_norm = float(np.linalg.norm(A @ x - b))

        if rank < min(design.n, design.m):
            warnings_list.append(
                f"A is rank-deficient (rank={rank}, min(n, m)={min(design.n, design.m)}); "
                f"returned the minimum-norm least-squares solution"
            )

        timer.stop()

        params = LinearSystemParams(
            x=x,
            singular_values=s,
            rank=rank,
            tolerance=tol,
            residual_norm=residual_norm,
        )

        return Result(
            params=params,
            info={
                'method': 'svd_pseudo_inverse',
                'decomposition_backend': self._decomposition.name,
                'rank': rank,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPULUInverseBackend:
    """
    Matrix inverse through LU factorisation solved against the identity.

    With A = P L U, A^-1 = U^-1 L^-1 P'. The matrix is declared singular
    when any |U_ii| is below LU_SINGULARITY_THRESHOLD.
    """

    def __init__(
        self,
        decomposition: DecompositionBackend,
        singularity_threshold: float = LU_SINGULARITY_THRESHOLD,
    ):
        self._decomposition = decomposition
        self._threshold = singularity_threshold

    @property
    def name(self) -> str:
        return 'cpu_lu'

    def solve(self, design: InversionDesign) -> Result[InverseParams]:
        timer = Timer()
        timer.start()

        A = design.A

        with timer.section('lu'):
            lu = self._decomposition.lu(A)

        pivots = lu.pivots
        min_pivot = float(np.min(np.abs(pivots)))
        if min_pivot < self._threshold:
            raise SingularMatrixError(
                f"Matrix is singular: smallest LU pivot |{min_pivot:.3e}| is below "
                f"the singularity threshold {self._threshold:.1e}",
                matrix_name='A',
                min_pivot=min_pivot,
                threshold=self._threshold,
            )

        with timer.section('triangular_solves'):
            inverse = _solve_lu(lu.P, lu.L, lu.U, np.eye(design.n))

        timer.stop()

        return Result(
            params=InverseParams(inverse=inverse, pivots=pivots),
            info={
                'method': 'lu',
                'decomposition_backend': self._decomposition.name,
                'singularity_threshold': self._threshold,
            },
            timing=timer.result(),
            backend_name=self.name,
        )


def _solve_lu(
    P: NDArray[np.floating[Any]],
    L: NDArray[np.floating[Any]],
    U: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """Solve (P L U) X = B by forward then back substitution."""
    Y = solve_triangular(L, P.T @ B, lower=True, unit_diagonal=True)
    return solve_triangular(U, Y, lower=False)
