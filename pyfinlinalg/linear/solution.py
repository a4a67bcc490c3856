"""
Linear system solution types.

Contains the parameter payloads and user-facing solution wrappers for
solve() and invert().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyfinlinalg.core.result import Result

if TYPE_CHECKING:
    from pyfinlinalg.linear.design import LinearSystemDesign, InversionDesign


@dataclass(frozen=True)
class LinearSystemParams:
    """
    Parameter payload for an SVD pseudo-inverse solve.

    Attributes:
        x: Minimum-norm least-squares solution (m,)
        singular_values: Singular values of A, descending
        rank: Number of singular values above the cut-off
        tolerance: Cut-off below which singular values were dropped
        residual_norm: ||A x - b||_2
    """
    x: NDArray[np.floating[Any]]
    singular_values: NDArray[np.floating[Any]]
    rank: int
    tolerance: float
    residual_norm: float


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for an LU inversion.

    Attributes:
        inverse: A^-1 (n x n)
        pivots: Diagonal of the U factor
    """
    inverse: NDArray[np.floating[Any]]
    pivots: NDArray[np.floating[Any]]


@dataclass
class LinearSystemSolution:
    """
    User-facing solution of A x = b.

    Wraps Result[LinearSystemParams] and provides convenient accessors.
    """
    _result: Result[LinearSystemParams]
    _design: 'LinearSystemDesign'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Solution vector, shape (m,)."""
        return self._result.params.x

    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.singular_values

    @property
    def rank(self) -> int:
        """Numerical rank of A."""
        return self._result.params.rank

    @property
    def residual_norm(self) -> float:
        return self._result.params.residual_norm

    @property
    def is_rank_deficient(self) -> bool:
        """True if A has rank below min(n, m)."""
        return self.rank < min(self._design.n, self._design.m)

    @property
    def condition_number(self) -> float:
        """Ratio of largest to smallest singular value (inf if singular)."""
        s = self.singular_values
        if s[-1] == 0:
            return np.inf
        return float(s[0] / s[-1])

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        lines = [
            "Linear system (SVD pseudo-inverse)",
            f"  Equations: {self._design.n}  Unknowns: {self._design.m}",
            f"  Rank: {self.rank}  (cut-off {self._result.params.tolerance:.3e})",
            f"  Condition number: {self.condition_number:.6g}",
            f"  Residual norm: {self.residual_norm:.6e}",
        ]
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self._design.n}, m={self._design.m}, "
            f"rank={self.rank})"
        )


@dataclass
class InverseSolution:
    """User-facing result of invert()."""
    _result: Result[InverseParams]
    _design: 'InversionDesign'

    @property
    def inverse(self) -> NDArray[np.floating[Any]]:
        """A^-1, shape (n, n)."""
        return self._result.params.inverse

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        """Diagonal of the LU U factor."""
        return self._result.params.pivots

    @property
    def min_abs_pivot(self) -> float:
        return float(np.min(np.abs(self.pivots)))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        lines = [
            "Matrix inverse (LU)",
            f"  Dimension: {self._design.n}",
            f"  Min |pivot|: {self.min_abs_pivot:.6e}",
        ]
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"InverseSolution(n={self._design.n}, min_abs_pivot={self.min_abs_pivot:.3e})"
