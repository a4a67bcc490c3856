"""
Factor model solution types.

Contains the parameter payloads and user-facing solution wrappers for
factor extraction (PCA) and correlation rank reduction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyfinlinalg.core.result import Result

if TYPE_CHECKING:
    from pyfinlinalg.factors.design import FactorDesign


@dataclass(frozen=True)
class FactorParams:
    """
    Parameter payload for factor extraction.

    Attributes:
        factor_matrix: n x k loadings, columns by descending eigenvalue
        eigenvalues: Retained eigenvalues after clamping at zero (k,)
        raw_eigenvalues: Retained eigenvalues before clamping (k,)
        eigenvalue_indices: Position of each retained eigenpair in the
            decomposition backend's output (k,)
        spectrum: Full spectrum of the input, descending (n,)
    """
    factor_matrix: NDArray[np.floating[Any]]
    eigenvalues: NDArray[np.floating[Any]]
    raw_eigenvalues: NDArray[np.floating[Any]]
    eigenvalue_indices: NDArray[np.integer[Any]]
    spectrum: NDArray[np.floating[Any]]


@dataclass(frozen=True)
class ReductionParams:
    """
    Parameter payload for correlation rank reduction.

    Attributes:
        factor_matrix: Final n x k loadings (second extraction pass)
        eigenvalues: Eigenvalues retained by the second pass (k,)
        initial_factor_matrix: Loadings of the first extraction pass
        renormalized_factor_matrix: First-pass loadings with unit row norms
        degenerate_rows: Rows with zero norm that were set to 1.0
    """
    factor_matrix: NDArray[np.floating[Any]]
    eigenvalues: NDArray[np.floating[Any]]
    initial_factor_matrix: NDArray[np.floating[Any]]
    renormalized_factor_matrix: NDArray[np.floating[Any]]
    degenerate_rows: tuple[int, ...]


def _format_row(label: str, values: NDArray[np.floating[Any]]) -> str:
    return f"  {label:<12}" + "  ".join(f"{v:>10.6f}" for v in values)


@dataclass
class FactorSolution:
    """
    User-facing factor extraction results.

    Wraps Result[FactorParams] and provides convenient accessors.
    """
    _result: Result[FactorParams]
    _design: 'FactorDesign'

    @property
    def factor_matrix(self) -> NDArray[np.floating[Any]]:
        """Loadings, shape (n, k)."""
        return self._result.params.factor_matrix

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Retained eigenvalues, clamped at zero, descending."""
        return self._result.params.eigenvalues

    @property
    def raw_eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Retained eigenvalues before clamping."""
        return self._result.params.raw_eigenvalues

    @property
    def eigenvalue_indices(self) -> NDArray[np.integer[Any]]:
        return self._result.params.eigenvalue_indices

    @property
    def spectrum(self) -> NDArray[np.floating[Any]]:
        """All eigenvalues of the input, descending."""
        return self._result.params.spectrum

    @property
    def n_clamped(self) -> int:
        """Number of retained eigenvalues that were negative."""
        return int(np.sum(self.raw_eigenvalues < 0.0))

    @property
    def explained_variance_ratio(self) -> NDArray[np.floating[Any]]:
        """Share of the (non-negative) total variance carried by each factor."""
        total = float(np.sum(np.maximum(self.spectrum, 0.0)))
        if total == 0.0:
            return np.zeros_like(self.eigenvalues)
        return self.eigenvalues / total

    @property
    def reconstructed_matrix(self) -> NDArray[np.floating[Any]]:
        """F F', the rank-k approximation of the input."""
        F = self.factor_matrix
        return F @ F.T

    @property
    def number_of_factors(self) -> int:
        return self._design.number_of_factors

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
            f"Principal component factors (n={self._design.n}, k={self.number_of_factors})",
            _format_row("Eigenvalue", self.eigenvalues),
            _format_row("Explained", self.explained_variance_ratio),
            f"  Cumulative explained variance: {float(np.sum(self.explained_variance_ratio)):.6f}",
        ]
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FactorSolution(n={self._design.n}, "
            f"number_of_factors={self.number_of_factors})"
        )


@dataclass
class ReductionSolution:
    """
    User-facing correlation rank reduction results.

    Wraps Result[ReductionParams]. The final loadings are only approximately
    unit-row-norm; max_diagonal_deviation reports how far F F' is from a
    unit diagonal.
    """
    _result: Result[ReductionParams]
    _design: 'FactorDesign'

    @property
    def factor_matrix(self) -> NDArray[np.floating[Any]]:
        """Final loadings, shape (n, k)."""
        return self._result.params.factor_matrix

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        return self._result.params.eigenvalues

    @property
    def initial_factor_matrix(self) -> NDArray[np.floating[Any]]:
        """Loadings of the first extraction pass, before renormalisation."""
        return self._result.params.initial_factor_matrix

    @property
    def renormalized_factor_matrix(self) -> NDArray[np.floating[Any]]:
        return self._result.params.renormalized_factor_matrix

    @property
    def degenerate_rows(self) -> tuple[int, ...]:
        """Rows that had zero norm at rank k and were set to 1.0."""
        return self._result.params.degenerate_rows

    @property
    def reduced_correlation_matrix(self) -> NDArray[np.floating[Any]]:
        """F F' of the final loadings."""
        F = self.factor_matrix
        return F @ F.T

    @property
    def max_diagonal_deviation(self) -> float:
        """max_i |(F F')_ii - 1|."""
        row_norms_squared = np.sum(self.factor_matrix ** 2, axis=1)
        return float(np.max(np.abs(row_norms_squared - 1.0)))

    @property
    def number_of_factors(self) -> int:
        return self._design.number_of_factors

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
            f"Correlation rank reduction (n={self._design.n}, k={self.number_of_factors})",
            _format_row("Eigenvalue", self.eigenvalues),
            f"  Max |diag(F F') - 1|: {self.max_diagonal_deviation:.3e}",
        ]
        if self.degenerate_rows:
            lines.append(f"  Degenerate rows: {list(self.degenerate_rows)}")
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"ReductionSolution(n={self._design.n}, "
            f"number_of_factors={self.number_of_factors}, "
            f"degenerate_rows={list(self.degenerate_rows)})"
        )
